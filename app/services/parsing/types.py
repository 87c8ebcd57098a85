from dataclasses import dataclass
from typing import Literal

Sentiment = Literal["funny", "love", "neutral"]


@dataclass(frozen=True, slots=True)
class ParsedMessage:
    date: str
    time: str
    sender: str
    text: str
    word_count: int
    sentiment: Sentiment

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "time": self.time,
            "sender": self.sender,
            "text": self.text,
            "wordCount": self.word_count,
            "sentiment": self.sentiment,
        }
