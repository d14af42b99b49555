"""
Fulfillment message builders.

Small helpers for constructing Message values without spelling out the
nested models every time.
"""

from typing import Optional

from .schemas import (
    CarouselSelect,
    Image,
    ListSelect,
    Message,
    Platform,
    RichMessage,
    SelectItem,
    SelectItemInfo,
    SimpleResponse,
    SimpleResponses,
    Suggestion,
    Suggestions,
    Text,
)


def text_message(*lines: str, platform: Optional[Platform] = None) -> Message:
    """Plain text message, one entry per line."""
    return Message(platform=platform, rich=Text(text=list(lines)))


def for_platform(platform: Platform, rich: RichMessage) -> Message:
    """Wrap a rich message variant for a specific platform."""
    return Message(platform=platform, rich=rich)


def for_google(rich: RichMessage) -> Message:
    """Wrap a rich message variant for Actions on Google."""
    return for_platform(Platform.ACTIONS_ON_GOOGLE, rich)


def simple_response(display_text: str, text_to_speech: str) -> SimpleResponse:
    return SimpleResponse(display_text=display_text, text_to_speech=text_to_speech)


def single_simple_response(display_text: str, text_to_speech: str) -> SimpleResponses:
    """SimpleResponses holding exactly one response."""
    return SimpleResponses(simple_responses=[simple_response(display_text, text_to_speech)])


def suggestions(*titles: str) -> Suggestions:
    return Suggestions(suggestions=[Suggestion(title=title) for title in titles])


def image(uri: str, accessibility_text: Optional[str] = None) -> Image:
    return Image(image_uri=uri, accessibility_text=accessibility_text)


def select_item(
    key: str,
    title: str,
    description: Optional[str] = None,
    synonyms: tuple[str, ...] = (),
    item_image: Optional[Image] = None,
) -> SelectItem:
    """One option of a list or carousel; `key` comes back as the selected option."""
    return SelectItem(
        info=SelectItemInfo(key=key, synonyms=list(synonyms)),
        title=title,
        description=description,
        image=item_image,
    )


def list_select(title: str, *items: SelectItem) -> ListSelect:
    return ListSelect(title=title, items=list(items))


def carousel_select(*items: SelectItem) -> CarouselSelect:
    return CarouselSelect(items=list(items))
