from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sdk_util_generator.infrastructure.configuration import Settings
from sdk_util_generator.infrastructure.entrypoints.api.chat_router import router as chat_router
from sdk_util_generator.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from sdk_util_generator.infrastructure.observability import configure_logging, get_logger

logger = get_logger("app_factory")


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        api_url=settings.api_url,
        api_key_present=settings.api_key is not None,
        workspace_root=str(settings.workspace_root) if settings.workspace_root else None,
        target_language=settings.target_language,
    )

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error("Validation error", url=str(request.url), errors=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(health_router)
    app.include_router(chat_router)

    return app
