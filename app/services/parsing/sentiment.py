from app.services.parsing.types import Sentiment

FUNNY_MARKERS = ("😂", ":)", "haha")
LOVE_MARKERS = ("❤", "love", "pyaar")

# Evaluated top to bottom; the first label with a matching marker wins.
SENTIMENT_RULES: tuple[tuple[Sentiment, tuple[str, ...]], ...] = (
    ("funny", FUNNY_MARKERS),
    ("love", LOVE_MARKERS),
)
DEFAULT_SENTIMENT: Sentiment = "neutral"


def _contains_any(text: str, lexicon: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(token.lower() in lowered for token in lexicon)


def classify_sentiment(text: str) -> Sentiment:
    for label, markers in SENTIMENT_RULES:
        if _contains_any(text, markers):
            return label
    return DEFAULT_SENTIMENT
