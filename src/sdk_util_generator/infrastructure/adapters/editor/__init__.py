from sdk_util_generator.infrastructure.adapters.editor.logging_editor_adapter import (
    LoggingEditorAdapter,
)

__all__ = ["LoggingEditorAdapter"]
