"""Parse a single exported chat line: ``DD/MM/YYYY, HH:MM - Sender: message``.

Date and time are sliced by position and never checked against a calendar.
Only the presence of the sender and text delimiters is validated.
"""

import re
import string

from app.core.errors import ValidationFailure
from app.services.parsing.sentiment import classify_sentiment
from app.services.parsing.types import ParsedMessage

DATE_LENGTH = 10
TIME_LENGTH = 5

TIME_DELIMITER = ", "
SENDER_DELIMITER = " - "
# The sender is sliced after the first "- ", which can sit before the first " - ".
SENDER_START_DELIMITER = "- "
SENDER_END_DELIMITER = ":"
TEXT_DELIMITER = ": "

NOT_TEXT = "not_text"
MISSING_SENDER_DELIMITER = "missing_sender_delimiter"
MISSING_TEXT_DELIMITER = "missing_text_delimiter"

_PUNCTUATION = frozenset(string.punctuation)
WORD_RE = re.compile(r"\w+", re.ASCII)


def count_words(text: str) -> int:
    """Count ASCII word runs, plus standalone tokens such as a lone emoji.

    ``"don't stop,now"`` has four words; ``"hai? 😂"`` has two. Tokens made only of
    punctuation (``-``, ``...``) never count.
    """
    words = len(WORD_RE.findall(text))
    symbols = sum(
        1 for token in text.split() if not WORD_RE.search(token) and not set(token) <= _PUNCTUATION
    )
    return words + symbols


def _locate_boundaries(line: str) -> tuple[int, int]:
    sender_at = line.find(SENDER_DELIMITER)
    if sender_at == -1:
        raise ValidationFailure(MISSING_SENDER_DELIMITER, f"Line has no {SENDER_DELIMITER!r} delimiter")
    text_at = line.find(TEXT_DELIMITER, sender_at)
    if text_at == -1:
        raise ValidationFailure(MISSING_TEXT_DELIMITER, f"Line has no {TEXT_DELIMITER!r} after the sender")
    return sender_at, text_at


def _extract_time(line: str) -> str:
    _, found, rest = line.partition(TIME_DELIMITER)
    return rest[:TIME_LENGTH] if found else ""


def _extract_sender(line: str) -> str:
    _, _, remainder = line.partition(SENDER_START_DELIMITER)
    end = remainder.find(SENDER_END_DELIMITER)
    return remainder[:end] if end != -1 else remainder


def _extract_text(line: str, sender_at: int) -> str:
    tail = line[sender_at + len(SENDER_DELIMITER):]
    _, _, text = tail.partition(TEXT_DELIMITER)
    return text.strip()


def read_chat_line(line: object) -> ParsedMessage:
    """Parse ``line`` or raise :class:`ValidationFailure` explaining why it was rejected."""
    if not isinstance(line, str):
        raise ValidationFailure(NOT_TEXT, f"Expected a string, got {type(line).__name__}")

    sender_at, _ = _locate_boundaries(line)
    text = _extract_text(line, sender_at)
    return ParsedMessage(
        date=line[:DATE_LENGTH],
        time=_extract_time(line),
        sender=_extract_sender(line),
        text=text,
        word_count=count_words(text),
        sentiment=classify_sentiment(line),
    )


def parse_chat_line(line: object) -> ParsedMessage | None:
    """Parse ``line``, returning ``None`` when it is not a well-formed chat line."""
    try:
        return read_chat_line(line)
    except ValidationFailure:
        return None
