# Role: Thin HTTP adapter for the relay endpoint. Reads "message" from the form body or the query string,
# delegates to the Dialogflow client, and collapses every failure into the same 500 envelope.

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from intentbridge.api.deps import get_intent_client
from intentbridge.models.envelope import ErrorResponse, SuccessResponse
from intentbridge.nlu.dialogflow_client import DialogflowIntentClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["relay"])


async def read_message(request: Request) -> Optional[str]:
    # Key line: body wins over query string; an empty body value also falls through.
    form = await request.form()
    body_message = form.get("message")
    if isinstance(body_message, str) and body_message:
        return body_message
    return request.query_params.get("message")


# GET stays the primary verb; POST is accepted too so form bodies work with ordinary clients.
@router.api_route(
    "/",
    methods=["GET", "POST"],
    response_model=SuccessResponse,
    responses={500: {"model": ErrorResponse}},
)
async def relay(
    request: Request,
    client: DialogflowIntentClient = Depends(get_intent_client),
):
    # 1) Extract the user message
    # 2) Forward it to Dialogflow (single awaited call)
    # 3) Wrap the result, or any error, in the response envelope
    try:
        message = await read_message(request)
        result = await client.detect_intent(message)
    except Exception as e:
        logger.exception("Relay request failed")
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())

    return SuccessResponse(result=result)
