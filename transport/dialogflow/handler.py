"""
Dialogflow Webhook Handler

decode -> extract params -> extract context -> construct -> encode

Pure function of the request body: no HTTP objects, no shared state.
All decode/extraction failures collapse into a bare 400.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .extract import WebhookError, get_context, get_params, parse_request
from .messages import for_google, single_simple_response, text_message
from .schemas import CityParams, Fulfillment

logger = logging.getLogger(__name__)

CONTEXT_NAME = "my-awesome-context"
JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class WebhookResult:
    """Status, body and media type to write back. media_type is None on failure."""

    status_code: int
    body: bytes = b""
    media_type: Optional[str] = None


def build_fulfillment() -> Fulfillment:
    """Fixed response: a Google simple response followed by a plain text message."""
    return Fulfillment(
        fulfillment_messages=[
            for_google(single_simple_response("hello", "hello")),
            text_message("hello"),
        ]
    )


def handle_webhook(body: bytes) -> WebhookResult:
    """
    Handle one Dialogflow webhook call.

    Args:
        body: Raw request body

    Returns:
        WebhookResult(200, JSON fulfillment, application/json) on success,
        WebhookResult(400) on any decode or extraction failure
    """
    try:
        request = parse_request(body)

        params = get_params(request, CityParams)

        # The context value replaces the top-level one; only its outcome matters from here on.
        params = get_context(request, CONTEXT_NAME, CityParams)
    except WebhookError as e:
        logger.warning(f"Rejecting webhook request: {e}")
        return WebhookResult(status_code=400)

    logger.debug(
        "Context parameters extracted",
        extra={
            "session": request.session,
            "city": params.city,
            "age": params.age,
        }
    )

    fulfillment = build_fulfillment()
    return WebhookResult(
        status_code=200,
        body=fulfillment.to_json(),
        media_type=JSON_MEDIA_TYPE,
    )
