import logging

from app.core.config import get_settings


class PrivacyFilter(logging.Filter):
    """Drop chat content from structured logs."""

    BLOCKED_KEYS = {"line", "text", "message_text", "raw_content"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Handler filters also see records propagated from child loggers.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, PrivacyFilter) for f in handler.filters):
            handler.addFilter(PrivacyFilter())
