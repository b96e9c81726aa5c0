# Role: JSON envelopes returned by the relay endpoint. Every response is either a Success with a result,
# or a Server error carrying the error text.

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from intentbridge.models.intent_result import IntentResult


class SuccessResponse(BaseModel):
    message: Literal["Success"] = "Success"
    result: IntentResult


class ErrorResponse(BaseModel):
    message: Literal["Server error"] = "Server error"
    error: str
