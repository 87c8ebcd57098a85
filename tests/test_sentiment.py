import pytest

from app.services.parsing import classify_sentiment, parse_chat_line
from app.services.parsing.sentiment import SENTIMENT_RULES


def test_rules_are_ordered_funny_first():
    assert [label for label, _ in SENTIMENT_RULES] == ["funny", "love"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("that was hilarious 😂", "funny"),
        ("ok :)", "funny"),
        ("HAHA nice one", "funny"),
        ("hahahaha", "funny"),
        ("sending ❤️", "love"),
        ("LOVE this", "love"),
        ("lovely weather", "love"),
        ("bahut pyaar", "love"),
        ("Pyaar hai", "love"),
        ("see you tomorrow", "neutral"),
        ("", "neutral"),
    ],
)
def test_classify_sentiment(text, expected):
    assert classify_sentiment(text) == expected


def test_funny_beats_love():
    assert classify_sentiment("I love you haha") == "funny"
    parsed = parse_chat_line("14/02/2025, 20:00 - Neha: love you ❤ 😂")
    assert parsed.sentiment == "funny"


def test_sentiment_reads_the_whole_line():
    # The keyword only appears in the sender name.
    parsed = parse_chat_line("14/02/2025, 20:00 - Lovepreet: kal milte hain")
    assert parsed.sentiment == "love"
