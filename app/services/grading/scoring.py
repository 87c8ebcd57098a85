from decimal import ROUND_HALF_UP, Decimal

from app.services.grading.types import Grade

MAX_MARK = 100
MIN_MARK = 0
PASS_MARK = 40

# Inclusive lower bounds, checked from the top down.
GRADE_BANDS: tuple[tuple[float, Grade], ...] = (
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (40, "D"),
)
FAILING_GRADE: Grade = "F"


def grade_for_percentage(percentage: float) -> Grade:
    for threshold, grade in GRADE_BANDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE


def compute_percentage(total: float, subject_count: int) -> float:
    return total / (subject_count * MAX_MARK) * 100


def round_percentage(value: float) -> float:
    # Half away from zero on the exact binary value, so 12.125 -> 12.13.
    return float(Decimal(float(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def is_passing(mark: float) -> bool:
    return mark >= PASS_MARK
