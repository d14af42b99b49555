"""
Dialogflow Webhook Handler Tests

Pure handler: body in, (status, body, media type) out.
"""

import json

from conftest import build_payload
from transport.dialogflow.handler import (
    CONTEXT_NAME,
    JSON_MEDIA_TYPE,
    WebhookResult,
    build_fulfillment,
    handle_webhook,
)


def _body(**kwargs) -> bytes:
    return json.dumps(build_payload(**kwargs)).encode()


EXPECTED_MESSAGES = [
    {
        "platform": "ACTIONS_ON_GOOGLE",
        "simpleResponses": {
            "simpleResponses": [{"textToSpeech": "hello", "displayText": "hello"}],
        },
    },
    {"text": {"text": ["hello"]}},
]


class TestHandlerSuccess:
    """Well-formed requests."""

    def test_returns_fixed_fulfillment(self):
        result = handle_webhook(_body())

        assert result.status_code == 200
        assert result.media_type == "application/json"
        assert json.loads(result.body) == {"fulfillmentMessages": EXPECTED_MESSAGES}

    def test_response_not_derived_from_params(self):
        """Different parameters, same fulfillment."""
        other = _body(
            parameters={"city": "Oslo", "gender": "male", "age": 70},
            contexts=[{"name": "my-awesome-context", "parameters": {"city": "Bergen", "gender": "f", "age": 3}}],
        )

        assert handle_webhook(other).body == handle_webhook(_body()).body

    def test_idempotent(self):
        """Identical input yields byte-identical output."""
        body = _body()

        first = handle_webhook(body)
        second = handle_webhook(body)

        assert first == second
        assert first.body == build_fulfillment().to_json()

    def test_context_name_constant(self):
        assert CONTEXT_NAME == "my-awesome-context"
        assert JSON_MEDIA_TYPE == "application/json"


class TestHandlerFailures:
    """Every failure is a bare 400."""

    def test_malformed_json(self):
        result = handle_webhook(b"{\"queryResult\": {\"parameters\": ")

        assert result == WebhookResult(status_code=400)
        assert result.body == b""
        assert result.media_type is None

    def test_wrong_shape(self):
        assert handle_webhook(b"{\"queryResult\": \"nope\"}").status_code == 400

    def test_top_level_params_fail(self):
        """age given as a string."""
        body = _body(parameters={"city": "Paris", "gender": "female", "age": "30"})

        assert handle_webhook(body) == WebhookResult(status_code=400)

    def test_missing_context(self):
        """Top-level extraction succeeds, context is absent."""
        result = handle_webhook(_body(contexts=[{"name": "some/contexts/other-context", "parameters": {}}]))

        assert result == WebhookResult(status_code=400)

    def test_context_params_fail(self):
        body = _body(contexts=[{"name": "my-awesome-context", "parameters": {"city": "Lyon", "age": 41}}])

        assert handle_webhook(body).status_code == 400

    def test_failure_logged(self, caplog):
        with caplog.at_level("WARNING", logger="transport.dialogflow.handler"):
            handle_webhook(b"garbage")

        assert "Rejecting webhook request" in caplog.text


class TestHandlerEchoedMessages:
    """queryResult.fulfillmentMessages never decides the outcome."""

    def _with_messages(self, messages) -> bytes:
        payload = build_payload()
        payload["queryResult"]["fulfillmentMessages"] = messages
        return json.dumps(payload).encode()

    def test_carousel_select_accepted(self):
        body = self._with_messages([{"platform": "ACTIONS_ON_GOOGLE", "carouselSelect": {"items": []}}])

        assert handle_webhook(body).status_code == 200

    def test_list_select_accepted(self):
        body = self._with_messages([{"platform": "ACTIONS_ON_GOOGLE", "listSelect": {"title": "Pick"}}])

        assert handle_webhook(body).status_code == 200

    def test_unmodeled_variant_accepted(self):
        body = self._with_messages([{"platform": "ACTIONS_ON_GOOGLE", "tableCard": {"rows": []}}])

        assert handle_webhook(body).status_code == 200

    def test_hangouts_platform_accepted(self):
        body = self._with_messages([{"platform": "GOOGLE_HANGOUTS", "text": {"text": ["hi"]}}])

        result = handle_webhook(body)

        assert result.status_code == 200
        assert json.loads(result.body) == {"fulfillmentMessages": EXPECTED_MESSAGES}
