"""Response bodies for the calculator API that aren't engine results."""

from typing import List

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Single-scenario failure: one validation or internal error message."""

    error: str = Field(..., description="Human readable reason the request failed.")


class BatchErrorResponse(BaseModel):
    """Batch failure: one message per rejected scenario, no partial results."""

    errors: List[str] = Field(..., min_length=1)
