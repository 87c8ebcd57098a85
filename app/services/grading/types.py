from dataclasses import dataclass
from typing import Literal

Grade = Literal["A+", "A", "B", "C", "D", "F"]


@dataclass(frozen=True, slots=True)
class ReportCard:
    name: str
    total_marks: float
    percentage: float
    grade: Grade
    highest_subject: str
    lowest_subject: str
    passed_subjects: tuple[str, ...]
    failed_subjects: tuple[str, ...]
    subject_count: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "totalMarks": self.total_marks,
            "percentage": self.percentage,
            "grade": self.grade,
            "highestSubject": self.highest_subject,
            "lowestSubject": self.lowest_subject,
            "passedSubjects": list(self.passed_subjects),
            "failedSubjects": list(self.failed_subjects),
            "subjectCount": self.subject_count,
        }
