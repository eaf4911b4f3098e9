"""Sequential pipeline turning a chat line into a utility file plus integration guidance."""

from collections.abc import Sequence
from pathlib import Path
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

from sdk_util_generator.core.application.exceptions import (
    GeneratorError,
    IntegrationRequestTimeoutError,
    NoContentInResponseError,
    NoWorkspaceOpenError,
    SdkFileCreationError,
)
from sdk_util_generator.core.application.ports import ArtifactStorePort, EditorPort
from sdk_util_generator.core.application.skills.contracts import (
    FetchIntegrationInstructionsInput,
    GenerateSdkCodeInput,
)
from sdk_util_generator.core.application.skills.fetch_integration_instructions_skill import (
    FetchIntegrationInstructionsSkill,
)
from sdk_util_generator.core.application.skills.generate_sdk_code_skill import (
    GenerateSdkCodeSkill,
)
from sdk_util_generator.core.application.tools import (
    WorkspaceScanner,
    extract_sdk_name,
    generate_filename,
)
from sdk_util_generator.core.application.workflows.base_workflow import BaseWorkflow
from sdk_util_generator.core.domain.artifact import GeneratedArtifact
from sdk_util_generator.core.domain.shared import (
    DEFAULT_KNOWN_SDK_NAMES,
    DEFAULT_LANGUAGE_EXTENSIONS,
)
from sdk_util_generator.core.domain.workspace import ScannedFile

logger = structlog.get_logger()

UTILS_DIR = "utils"


class SdkUtilWorkflow(BaseWorkflow):
    """ExtractName -> RequestCode -> ExtractCode -> Filename -> Workspace -> Write -> Open
    -> Scan -> IntegrationInstructions -> ComposeResult.

    Any failure up to and including the editor hand-off aborts the run with a
    single ``SdkFileCreationError``; nothing is written when code generation
    fails.
    Integration failures after the write become a degraded reply.
    """

    def __init__(
        self,
        generate_code: GenerateSdkCodeSkill,
        fetch_instructions: FetchIntegrationInstructionsSkill,
        scanner: WorkspaceScanner,
        artifact_store: ArtifactStorePort,
        editor: EditorPort,
        workspace_root: Path | None,
        target_language: str = "python",
        known_sdk_names: Sequence[str] = DEFAULT_KNOWN_SDK_NAMES,
        language_extensions: dict[str, str] | None = None,
    ) -> None:
        self._generate_code = generate_code
        self._fetch_instructions = fetch_instructions
        self._scanner = scanner
        self._artifact_store = artifact_store
        self._editor = editor
        self._workspace_root = workspace_root
        self._target_language = target_language
        self._known_sdk_names = known_sdk_names
        self._language_extensions = language_extensions or dict(DEFAULT_LANGUAGE_EXTENSIONS)

    async def execute(self, user_message: str) -> str:
        return await self.create_sdk_util_file(user_message)

    async def create_sdk_util_file(self, user_message: str) -> str:
        """Run the whole pipeline and return the composed reply text.

        Raises:
            SdkFileCreationError: message prefixed with "Failed to create SDK file:".
        """
        bind_contextvars(run_id=str(uuid4()), event_type="workflow.sdk_util")
        logger.info("SDK util workflow started")
        try:
            artifact = await self._create_artifact(user_message)
            workspace_files = await self._step_scan_workspace()
            instructions = await self._step_integration_instructions(artifact, workspace_files)
            logger.info(
                "SDK util workflow completed",
                file_path=str(artifact.file_path),
                processing_status="SUCCESS",
            )
            return self._compose_result(artifact, instructions, len(workspace_files))
        except Exception as exc:
            logger.error(
                "SDK util workflow failed",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=str(exc),
                error_retryable=False,
            )
            raise SdkFileCreationError.wrap(exc) from exc
        finally:
            unbind_contextvars("run_id", "event_type")

    # ── Fatal steps ──────────────────────────────────────────────────

    async def _create_artifact(self, user_message: str) -> GeneratedArtifact:
        service_name = extract_sdk_name(user_message, self._known_sdk_names)
        logger.info("Step 1: Service name extracted", service_name=service_name)

        code = await self._generate_code.execute(
            GenerateSdkCodeInput(user_message=user_message, target_language=self._target_language)
        )
        filename = generate_filename(service_name, self._target_language, self._language_extensions)
        workspace_root = self._require_workspace()

        file_path = await self._artifact_store.write(workspace_root, UTILS_DIR, filename, code)
        logger.info("Step 2: Utility file written", file_path=str(file_path))
        await self._editor.open_file(file_path)

        return GeneratedArtifact(
            service_name=service_name,
            target_language=self._target_language,
            filename=filename,
            code=code,
            file_path=file_path,
        )

    def _require_workspace(self) -> Path:
        root = self._workspace_root
        if root is None or not root.is_dir():
            raise NoWorkspaceOpenError(
                "No workspace folder open. Please open a folder first.",
                context={"workspace_root": str(root) if root else None},
            )
        return root

    # ── Best-effort steps ────────────────────────────────────────────

    async def _step_scan_workspace(self) -> list[ScannedFile]:
        workspace_root = self._require_workspace()
        files = await self._scanner.scan_async(workspace_root)
        logger.info("Step 3: Workspace scanned", files_count=len(files))
        return files

    async def _step_integration_instructions(
        self, artifact: GeneratedArtifact, workspace_files: list[ScannedFile]
    ) -> str:
        logger.info("Step 4: Fetching integration instructions", service_name=artifact.service_name)
        sdk = artifact.service_name
        try:
            result = await self._fetch_instructions.execute(
                FetchIntegrationInstructionsInput(
                    service_name=sdk,
                    filename=artifact.filename,
                    code=artifact.code,
                    target_language=artifact.target_language,
                    workspace_files=workspace_files,
                )
            )
        except NoContentInResponseError:
            logger.warning("Integration response had no content", service_name=sdk)
            return (
                "📄 File created successfully!\n\n"
                f"Integration instructions not available. Please refer to the {sdk} documentation."
            )
        except IntegrationRequestTimeoutError as exc:
            logger.warning("Integration request timed out", error_details=str(exc))
            return (
                "📄 File created successfully!\n\n"
                "⏱️ Integration instruction request timed out. "
                "Your workspace might be too large.\n\n"
                f"Please refer to the {sdk} documentation or try with a smaller workspace."
            )
        except GeneratorError as exc:
            logger.warning(
                "Integration request failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return (
                "📄 File created successfully!\n\n"
                f"⚠️ Couldn't fetch integration instructions: {exc.message}\n\n"
                f"Please refer to the {sdk} documentation."
            )
        return f"📚 HOW TO INTEGRATE:\n\n{result.content}"

    @staticmethod
    def _compose_result(artifact: GeneratedArtifact, instructions: str, files_count: int) -> str:
        summary = f"\n\n📊 Analyzed {files_count} files from your workspace for context."
        return f"✅ Successfully created: {artifact.file_path}\n\n{instructions}{summary}"
