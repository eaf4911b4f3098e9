from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, StreamingResponse

from sdk_util_generator.core.application.exceptions import SdkFileCreationError
from sdk_util_generator.core.application.workflows.sdk_util_workflow import SdkUtilWorkflow
from sdk_util_generator.core.domain.shared import ChatTurn, ChatTurnKind
from sdk_util_generator.infrastructure.entrypoints.api.chat_panel import render_chat_panel
from sdk_util_generator.infrastructure.entrypoints.api.dtos import (
    ChatMessageRequestDTO,
    ChatMessageResponseDTO,
    ChatTurnDTO,
)
from sdk_util_generator.infrastructure.observability import get_logger
from sdk_util_generator.infrastructure.resolution import build_sdk_util_workflow

logger = get_logger("chat_router")
router = APIRouter()

PROGRESS_NOTICES = (
    "🔄 Step 1/3: Generating SDK utility code...",
    "🔄 Step 2/3: Scanning your workspace files...",
    "🔄 Step 3/3: Getting detailed integration instructions...",
)


def get_workflow(request: Request) -> SdkUtilWorkflow:
    """Build a fresh workflow per request from the app settings."""
    return build_sdk_util_workflow(request.app.state.settings)


@router.get("/", response_class=HTMLResponse)
def chat_panel(request: Request):
    return render_chat_panel(request.app.state.settings.app_name)


@router.post("/api/v1/chat/messages", response_model=ChatMessageResponseDTO)
async def post_message(
    body: ChatMessageRequestDTO,
    workflow: SdkUtilWorkflow = Depends(get_workflow),
) -> ChatMessageResponseDTO:
    turns = [ChatTurn(ChatTurnKind.PROGRESS, notice) for notice in PROGRESS_NOTICES]
    turns.append(await _run_workflow(workflow, body.text))
    return ChatMessageResponseDTO(turns=[ChatTurnDTO(kind=t.kind, text=t.text) for t in turns])


@router.post("/api/v1/chat/messages/stream")
async def stream_message(
    body: ChatMessageRequestDTO,
    workflow: SdkUtilWorkflow = Depends(get_workflow),
) -> StreamingResponse:
    """Same turns as :func:`post_message`, sent as server-sent events.

    Progress notices are flushed before the workflow runs, so the client sees
    them while the remote calls are in flight.
    """

    async def generate() -> AsyncIterator[str]:
        for notice in PROGRESS_NOTICES:
            yield _sse_event(ChatTurn(ChatTurnKind.PROGRESS, notice))
        yield _sse_event(await _run_workflow(workflow, body.text))

    return StreamingResponse(generate(), media_type="text/event-stream")


def _sse_event(turn: ChatTurn) -> str:
    payload = ChatTurnDTO(kind=turn.kind, text=turn.text).model_dump_json()
    return f"event: turn\ndata: {payload}\n\n"


async def _run_workflow(workflow: SdkUtilWorkflow, text: str) -> ChatTurn:
    logger.info("Chat message received", message_length=len(text))
    try:
        result = await workflow.create_sdk_util_file(text)
    except SdkFileCreationError as exc:
        return ChatTurn(ChatTurnKind.ERROR, f"❌ Error: {exc.message}")
    except Exception as exc:
        logger.exception(
            "Unexpected error handling chat message",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        return ChatTurn(ChatTurnKind.ERROR, f"❌ Error: {exc}")
    return ChatTurn(ChatTurnKind.RESULT, result)
