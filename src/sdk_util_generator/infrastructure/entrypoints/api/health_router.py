from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    try:
        app_version = version("sdk-util-generator")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "sdk-util-generator",
        "version": app_version,
    }
