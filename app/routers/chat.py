import logging
from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from app.core.config import get_settings
from app.core.errors import ValidationFailure
from app.schemas.chat import ParsedMessageRead
from app.schemas.errors import ValidationFailureResponse
from app.services.parsing import read_chat_line

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger(__name__)

NOT_AN_OBJECT = "not_an_object"
LINE_TOO_LONG = "line_too_long"


def _extract_line(payload: Any) -> Any:
    if not isinstance(payload, Mapping):
        raise ValidationFailure(NOT_AN_OBJECT, 'Request body must be a JSON object like {"line": "..."}')
    line = payload.get("line")
    max_length = get_settings().max_line_length
    if isinstance(line, str) and len(line) > max_length:
        raise ValidationFailure(LINE_TOO_LONG, f"Line exceeds {max_length} characters")
    return line


@router.post("/parse", response_model=ParsedMessageRead, responses={422: {"model": ValidationFailureResponse}})
def parse_line(payload: Any = Body(default=None, examples=[{"line": "25/01/2025, 14:30 - Rahul: hi"}])) -> ParsedMessageRead:
    try:
        parsed = read_chat_line(_extract_line(payload))
    except ValidationFailure as exc:
        logger.info("chat_line_rejected", extra={"reason": exc.reason, "line": payload})
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"reason": exc.reason, "detail": exc.detail},
        ) from exc
    return ParsedMessageRead.model_validate(parsed.to_dict())
