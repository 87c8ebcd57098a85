import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from app.core.errors import ValidationFailure
from app.schemas.errors import ValidationFailureResponse
from app.schemas.report_card import ReportCardRead
from app.services.grading import build_report_card

router = APIRouter(prefix="/report-cards", tags=["report-cards"])
logger = logging.getLogger(__name__)


@router.post("", response_model=ReportCardRead, responses={422: {"model": ValidationFailureResponse}})
def create_report_card(student: Any = Body(default=None)) -> ReportCardRead:
    try:
        card = build_report_card(student)
    except ValidationFailure as exc:
        logger.info("report_card_rejected", extra={"reason": exc.reason})
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"reason": exc.reason, "detail": exc.detail},
        ) from exc
    logger.info("report_card_generated", extra={"subject_count": card.subject_count, "grade": card.grade})
    return ReportCardRead.model_validate(card.to_dict())
