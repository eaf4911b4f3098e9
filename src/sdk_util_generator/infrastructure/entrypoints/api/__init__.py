from sdk_util_generator.infrastructure.entrypoints.api.app_factory import create_app

__all__ = ["create_app"]
