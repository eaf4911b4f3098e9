from sdk_util_generator.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from sdk_util_generator.infrastructure.observability.redaction_service import (
    redact_for_log,
    redact_text,
)

__all__ = ["configure_logging", "get_logger", "redact_for_log", "redact_text"]
