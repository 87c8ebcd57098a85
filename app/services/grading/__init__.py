from app.services.grading.report_card import build_report_card, generate_report_card
from app.services.grading.scoring import PASS_MARK, grade_for_percentage
from app.services.grading.types import Grade, ReportCard

__all__ = [
    "Grade",
    "PASS_MARK",
    "ReportCard",
    "build_report_card",
    "generate_report_card",
    "grade_for_percentage",
]
