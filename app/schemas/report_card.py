from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReportCardRead(BaseModel):
    name: str
    total_marks: int | float
    percentage: float = Field(ge=0, le=100)
    grade: Literal["A+", "A", "B", "C", "D", "F"]
    highest_subject: str
    lowest_subject: str
    passed_subjects: list[str] = Field(default_factory=list)
    failed_subjects: list[str] = Field(default_factory=list)
    subject_count: int = Field(ge=1)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
