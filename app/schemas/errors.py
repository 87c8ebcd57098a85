from pydantic import BaseModel


class ValidationFailureRead(BaseModel):
    reason: str
    detail: str


class ValidationFailureResponse(BaseModel):
    detail: ValidationFailureRead
