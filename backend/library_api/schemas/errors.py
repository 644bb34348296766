"""Error Schemas — documents the error envelope in OpenAPI.

Invariants:
    - Mirrors LibraryError.to_response() and the RequestValidationError handler
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str | None = None
    details: list[ErrorDetail] = []


class ErrorResponse(BaseModel):
    error: ErrorBody
