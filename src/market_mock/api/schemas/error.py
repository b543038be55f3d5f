"""Pydantic schema for error responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    error: str
    message: str
