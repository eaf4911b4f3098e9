import uvicorn

from sdk_util_generator.infrastructure.configuration import Settings
from sdk_util_generator.infrastructure.entrypoints.api import create_app


def dev():
    """Open the chat panel on a local development server."""
    settings = Settings()
    uvicorn.run(
        "sdk_util_generator.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
