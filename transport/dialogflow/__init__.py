"""Dialogflow Transport Layer - Module Exports"""

from .extract import (
    ExtractionError,
    RequestDecodeError,
    UnknownContextError,
    WebhookError,
    find_context,
    get_context,
    get_params,
    parse_request,
)
from .handler import CONTEXT_NAME, WebhookResult, build_fulfillment, handle_webhook
from .messages import (
    carousel_select,
    for_google,
    for_platform,
    image,
    list_select,
    select_item,
    simple_response,
    single_simple_response,
    suggestions,
    text_message,
)
from .schemas import (
    BasicCard,
    CarouselSelect,
    Card,
    CityParams,
    Context,
    CustomPayload,
    Fulfillment,
    Image,
    LinkOutSuggestion,
    ListSelect,
    Message,
    Platform,
    QueryResult,
    QuickReplies,
    ReceivedMessage,
    SelectItem,
    SimpleResponse,
    SimpleResponses,
    Suggestions,
    Text,
    WebhookRequest,
)
from .webhook import router

__all__ = [
    # Schemas
    "WebhookRequest",
    "QueryResult",
    "Context",
    "CityParams",
    "Fulfillment",
    "Message",
    "Platform",
    "Text",
    "Image",
    "QuickReplies",
    "Card",
    "SimpleResponse",
    "SimpleResponses",
    "BasicCard",
    "Suggestions",
    "LinkOutSuggestion",
    "ListSelect",
    "CarouselSelect",
    "SelectItem",
    "ReceivedMessage",
    "CustomPayload",
    # Builders
    "text_message",
    "for_platform",
    "for_google",
    "simple_response",
    "single_simple_response",
    "suggestions",
    "image",
    "select_item",
    "list_select",
    "carousel_select",
    # Extraction
    "parse_request",
    "get_params",
    "get_context",
    "find_context",
    "WebhookError",
    "RequestDecodeError",
    "ExtractionError",
    "UnknownContextError",
    # Handler
    "handle_webhook",
    "build_fulfillment",
    "WebhookResult",
    "CONTEXT_NAME",
    # Router
    "router",
]
