from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ParsedMessageRead(BaseModel):
    date: str
    time: str
    sender: str
    text: str
    word_count: int = Field(ge=0)
    sentiment: Literal["funny", "love", "neutral"]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
