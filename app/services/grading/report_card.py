"""Build a report card from ``{"name": ..., "marks": {subject: score}}``."""

import math
from collections.abc import Mapping
from numbers import Real

from app.core.errors import ValidationFailure
from app.services.grading.scoring import (
    MAX_MARK,
    MIN_MARK,
    compute_percentage,
    grade_for_percentage,
    is_passing,
    round_percentage,
)
from app.services.grading.types import ReportCard

NOT_A_RECORD = "not_a_record"
MARKS_NOT_A_RECORD = "marks_not_a_record"
MISSING_NAME = "missing_name"
NO_SUBJECTS = "no_subjects"
INVALID_MARK = "invalid_mark"


def _is_valid_mark(mark: object) -> bool:
    if isinstance(mark, bool) or not isinstance(mark, Real):
        return False
    return math.isfinite(mark) and MIN_MARK <= mark <= MAX_MARK


def _validate(student: object) -> tuple[str, Mapping]:
    if not isinstance(student, Mapping):
        raise ValidationFailure(NOT_A_RECORD, "Student must be a mapping")
    marks = student.get("marks")
    if not isinstance(marks, Mapping):
        raise ValidationFailure(MARKS_NOT_A_RECORD, "Student marks must be a mapping")
    name = student.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationFailure(MISSING_NAME, "Student name must be a non-empty string")
    if not marks:
        raise ValidationFailure(NO_SUBJECTS, "Student has no subject marks")
    for subject, mark in marks.items():
        if not _is_valid_mark(mark):
            raise ValidationFailure(INVALID_MARK, f"Mark for {subject!r} must be a number between {MIN_MARK} and {MAX_MARK}")
    return name, marks


def _extremes(marks: Mapping) -> tuple[str, str]:
    entries = iter(marks.items())
    first_subject, first_mark = next(entries)
    highest, highest_mark = first_subject, first_mark
    lowest, lowest_mark = first_subject, first_mark
    for subject, mark in entries:
        # Strict comparisons keep the earliest subject on ties.
        if mark > highest_mark:
            highest, highest_mark = subject, mark
        if mark < lowest_mark:
            lowest, lowest_mark = subject, mark
    return highest, lowest


def build_report_card(student: object) -> ReportCard:
    """Compute the report card or raise :class:`ValidationFailure`."""
    name, marks = _validate(student)

    subject_count = len(marks)
    total_marks = sum(marks.values())
    percentage = compute_percentage(total_marks, subject_count)
    highest, lowest = _extremes(marks)

    passed: list[str] = []
    failed: list[str] = []
    for subject, mark in marks.items():
        (passed if is_passing(mark) else failed).append(subject)

    return ReportCard(
        name=name,
        total_marks=total_marks,
        percentage=round_percentage(percentage),
        grade=grade_for_percentage(percentage),
        highest_subject=highest,
        lowest_subject=lowest,
        passed_subjects=tuple(passed),
        failed_subjects=tuple(failed),
        subject_count=subject_count,
    )


def generate_report_card(student: object) -> ReportCard | None:
    try:
        return build_report_card(student)
    except ValidationFailure:
        return None
