"""
Dialogflow Fulfillment - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Defines the contract between Dialogflow (v2 webhook format) and this service.

ref: https://cloud.google.com/dialogflow/es/docs/fulfillment-webhook
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel


class DialogflowModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Platform(str, Enum):
    """Platforms a rich message can be targeted at."""

    UNSPECIFIED = "PLATFORM_UNSPECIFIED"
    FACEBOOK = "FACEBOOK"
    SLACK = "SLACK"
    TELEGRAM = "TELEGRAM"
    KIK = "KIK"
    SKYPE = "SKYPE"
    LINE = "LINE"
    VIBER = "VIBER"
    ACTIONS_ON_GOOGLE = "ACTIONS_ON_GOOGLE"


# ============================================================================
# RICH MESSAGE VARIANTS
# ============================================================================

class Text(DialogflowModel):
    """Plain text message. Each entry is one line shown to the user."""
    text: list[str] = Field(default_factory=list)


class Image(DialogflowModel):
    image_uri: Optional[str] = None
    accessibility_text: Optional[str] = None


class QuickReplies(DialogflowModel):
    title: Optional[str] = None
    quick_replies: list[str] = Field(default_factory=list)


class CardButton(DialogflowModel):
    text: Optional[str] = None
    postback: Optional[str] = None


class Card(DialogflowModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image_uri: Optional[str] = None
    buttons: list[CardButton] = Field(default_factory=list)


class SimpleResponse(DialogflowModel):
    """Speech and display text for Actions on Google."""
    text_to_speech: Optional[str] = None
    ssml: Optional[str] = None
    display_text: Optional[str] = None


class SimpleResponses(DialogflowModel):
    simple_responses: list[SimpleResponse] = Field(default_factory=list)


class OpenUriAction(DialogflowModel):
    uri: str


class BasicCardButton(DialogflowModel):
    title: str
    open_uri_action: OpenUriAction


class BasicCard(DialogflowModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    formatted_text: Optional[str] = None
    image: Optional[Image] = None
    buttons: list[BasicCardButton] = Field(default_factory=list)


class Suggestion(DialogflowModel):
    title: str


class Suggestions(DialogflowModel):
    suggestions: list[Suggestion] = Field(default_factory=list)


class LinkOutSuggestion(DialogflowModel):
    destination_name: str
    uri: str


class SelectItemInfo(DialogflowModel):
    """Key sent back as the option parameter when the user picks the item."""
    key: str
    synonyms: list[str] = Field(default_factory=list)


class SelectItem(DialogflowModel):
    info: SelectItemInfo
    title: str
    description: Optional[str] = None
    image: Optional[Image] = None


class ListSelect(DialogflowModel):
    """Actions on Google list of selectable items."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    items: list[SelectItem] = Field(default_factory=list)


class CarouselSelect(DialogflowModel):
    """Actions on Google carousel of selectable items."""
    items: list[SelectItem] = Field(default_factory=list)


class CustomPayload(RootModel[dict[str, Any]]):
    """Free-form platform payload (e.g. a Facebook template)."""


RichMessage = Union[
    Text,
    Image,
    QuickReplies,
    Card,
    SimpleResponses,
    BasicCard,
    Suggestions,
    LinkOutSuggestion,
    ListSelect,
    CarouselSelect,
    CustomPayload,
]

# Wire key for every variant of the union. Closed set.
MESSAGE_KEYS: dict[type, str] = {
    Text: "text",
    Image: "image",
    QuickReplies: "quickReplies",
    Card: "card",
    SimpleResponses: "simpleResponses",
    BasicCard: "basicCard",
    Suggestions: "suggestions",
    LinkOutSuggestion: "linkOutSuggestion",
    ListSelect: "listSelect",
    CarouselSelect: "carouselSelect",
    CustomPayload: "payload",
}

_VARIANTS_BY_KEY: dict[str, type] = {key: cls for cls, key in MESSAGE_KEYS.items()}


class Message(BaseModel):
    """
    One fulfillment message: an optional platform plus exactly one variant.

    On the wire the variant is keyed by its name, e.g.
    {"platform": "ACTIONS_ON_GOOGLE", "simpleResponses": {...}}
    or {"text": {"text": ["hello"]}}.
    """

    platform: Optional[Platform] = None
    rich: RichMessage

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def unwrap_variant(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "rich" in data:
            return data

        keys = [key for key in data if key in _VARIANTS_BY_KEY]
        if len(keys) != 1:
            raise ValueError(
                f"Message must carry exactly one of {sorted(_VARIANTS_BY_KEY)}, got {sorted(data)}"
            )

        key = keys[0]
        return {
            "platform": data.get("platform"),
            "rich": _VARIANTS_BY_KEY[key].model_validate(data[key]),
        }

    @model_serializer
    def wrap_variant(self) -> dict[str, Any]:
        key = MESSAGE_KEYS.get(type(self.rich))
        if key is None:
            raise TypeError(f"Unsupported message variant: {type(self.rich).__name__}")

        wire: dict[str, Any] = {}
        if self.platform is not None:
            wire["platform"] = self.platform.value
        wire[key] = self.rich.model_dump(by_alias=True, exclude_none=True)
        return wire


class ReceivedMessage(BaseModel):
    """
    Message echoed back in queryResult.fulfillmentMessages.

    Kept as raw data: Dialogflow sends variants and platforms this service
    never builds (tableCard, mediaContent, GOOGLE_HANGOUTS, ...), and they
    must not fail the request.
    """

    platform: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @property
    def variant_key(self) -> Optional[str]:
        keys = list(self.model_extra or {})
        return keys[0] if len(keys) == 1 else None

    def as_message(self) -> Optional[Message]:
        """Typed Message, or None when the variant or platform is not modeled."""
        try:
            return Message.model_validate(self.model_dump(exclude_none=True))
        except ValidationError:
            return None


# ============================================================================
# WEBHOOK REQUEST (INPUT)
# ============================================================================

class Context(DialogflowModel):
    """
    Output context carried by the request.

    `name` is usually the full resource path:
    projects/<project>/agent/sessions/<session>/contexts/<short-name>
    """

    name: str
    lifespan_count: Optional[int] = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @property
    def short_name(self) -> str:
        return self.name.rsplit("/", 1)[-1]


class Intent(DialogflowModel):
    name: Optional[str] = None
    display_name: Optional[str] = None


class QueryResult(DialogflowModel):
    query_text: Optional[str] = None
    language_code: Optional[str] = None
    action: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    all_required_params_present: Optional[bool] = None
    fulfillment_text: Optional[str] = None
    fulfillment_messages: list[ReceivedMessage] = Field(default_factory=list)
    output_contexts: list[Context] = Field(default_factory=list)
    intent: Optional[Intent] = None
    intent_detection_confidence: Optional[float] = None
    diagnostic_info: Optional[dict[str, Any]] = None


class OriginalDetectIntentRequest(DialogflowModel):
    source: Optional[str] = None
    version: Optional[str] = None
    payload: dict[str, Any] = Field(default_factory=dict)


class WebhookRequest(DialogflowModel):
    """Full webhook request posted by Dialogflow."""

    response_id: Optional[str] = None
    session: Optional[str] = None
    query_result: QueryResult
    original_detect_intent_request: Optional[OriginalDetectIntentRequest] = None


# ============================================================================
# APPLICATION PARAMETERS
# ============================================================================

class CityParams(BaseModel):
    """
    Parameters this agent collects.

    Strict: `age` must be a JSON integer, not "30".
    """

    city: str
    gender: str
    age: int

    model_config = ConfigDict(strict=True)


# ============================================================================
# FULFILLMENT RESPONSE (OUTPUT)
# ============================================================================

class EventInput(DialogflowModel):
    name: str
    language_code: Optional[str] = None
    parameters: Optional[dict[str, Any]] = None


class Fulfillment(DialogflowModel):
    """Webhook response returned to Dialogflow."""

    fulfillment_text: Optional[str] = None
    fulfillment_messages: list[Message] = Field(default_factory=list)
    source: Optional[str] = None
    payload: Optional[dict[str, Any]] = None
    output_contexts: Optional[list[Context]] = None
    followup_event_input: Optional[EventInput] = None

    def to_json(self) -> bytes:
        """Wire encoding: camelCase keys, unset fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
