from sdk_util_generator.core.application.ports.artifact_store_port import ArtifactStorePort
from sdk_util_generator.core.application.ports.chat_completion_port import ChatCompletionPort
from sdk_util_generator.core.application.ports.editor_port import EditorPort

__all__ = ["ArtifactStorePort", "ChatCompletionPort", "EditorPort"]
