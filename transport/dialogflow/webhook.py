"""
Dialogflow Webhook Receiver

FastAPI router that receives Dialogflow fulfillment requests.
Reads the raw body, hands it to the pure handler, writes the result.
"""

import logging

from fastapi import APIRouter, Request, Response

from .handler import handle_webhook

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dialogflow Fulfillment"])


@router.post("/webhook")
async def dialogflow_webhook(request: Request) -> Response:
    """
    Receive a Dialogflow fulfillment request.

    Returns:
        200 with JSON fulfillment (Content-Type: application/json)
        400 with empty body on any decode or extraction failure
    """
    body = await request.body()
    result = handle_webhook(body)

    logger.debug(f"Webhook handled with status {result.status_code}")

    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )
