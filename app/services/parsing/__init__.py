from app.services.parsing.chat_line import count_words, parse_chat_line, read_chat_line
from app.services.parsing.sentiment import classify_sentiment
from app.services.parsing.types import ParsedMessage, Sentiment

__all__ = [
    "ParsedMessage",
    "Sentiment",
    "classify_sentiment",
    "count_words",
    "parse_chat_line",
    "read_chat_line",
]
