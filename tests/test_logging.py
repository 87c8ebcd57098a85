import logging

from app.core.logging import PrivacyFilter


def test_privacy_filter_redacts_chat_content():
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "chat_line_rejected", None, None)
    record.line = "25/01/2025, 14:30 - Rahul: secret"
    record.reason = "missing_text_delimiter"

    assert PrivacyFilter().filter(record) is True
    assert record.line == "[REDACTED]"
    assert record.reason == "missing_text_delimiter"
