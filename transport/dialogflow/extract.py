"""
Dialogflow Request Decoding & Parameter Extraction

PURE CONVERSION - NO HTTP, NO SIDE EFFECTS

- Decode the raw body into a WebhookRequest
- Coerce top-level parameters into an application model
- Coerce a named output context's parameters into an application model

Every failure raises a WebhookError subclass; callers decide the status code.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .schemas import Context, WebhookRequest

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class WebhookError(Exception):
    """Base class for webhook decode/extraction failures."""
    pass


class RequestDecodeError(WebhookError):
    """Body is not valid JSON or does not match the request shape."""
    pass


class ExtractionError(WebhookError):
    """Parameters could not be coerced into the target model."""
    pass


class UnknownContextError(ExtractionError):
    """The requested output context is not present in the request."""
    pass


def parse_request(body: bytes) -> WebhookRequest:
    """
    Decode a raw webhook body.

    Args:
        body: Raw HTTP request body

    Returns:
        WebhookRequest

    Raises:
        RequestDecodeError: Malformed JSON or wrong shape
    """
    try:
        return WebhookRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestDecodeError(f"Invalid webhook request: {e.error_count()} error(s)") from e


def get_params(request: WebhookRequest, target: type[ParamsT]) -> ParamsT:
    """
    Coerce the request's top-level parameters into `target`.

    Raises:
        ExtractionError: Missing fields or type mismatch
    """
    return _coerce(request.query_result.parameters, target, "parameters")


def find_context(request: WebhookRequest, name: str) -> Context:
    """
    Find an output context by name.

    Matches either the full resource path or its last segment, so both
    "my-context" and "projects/p/agent/sessions/s/contexts/my-context" work.
    Matching is on the whole last segment, not a plain name suffix, so
    "context" does not pick up "my-context".

    Raises:
        UnknownContextError: No such context
    """
    for context in request.query_result.output_contexts:
        if context.name == name or context.short_name == name:
            return context
    raise UnknownContextError(f"Context not found: {name}")


def get_context(request: WebhookRequest, name: str, target: type[ParamsT]) -> ParamsT:
    """
    Coerce the parameters of output context `name` into `target`.

    Raises:
        UnknownContextError: No such context
        ExtractionError: Missing fields or type mismatch
    """
    context = find_context(request, name)
    return _coerce(context.parameters, target, f"context '{name}'")


def _coerce(parameters: dict, target: type[ParamsT], source: str) -> ParamsT:
    try:
        return target.model_validate(parameters)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ExtractionError(
            f"Cannot coerce {source} into {target.__name__}: {', '.join(fields) or 'invalid'}"
        ) from e
