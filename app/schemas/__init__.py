from app.schemas.chat import ParsedMessageRead
from app.schemas.errors import ValidationFailureRead, ValidationFailureResponse
from app.schemas.report_card import ReportCardRead

__all__ = [
    "ParsedMessageRead",
    "ReportCardRead",
    "ValidationFailureRead",
    "ValidationFailureResponse",
]
