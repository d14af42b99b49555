"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

SESSION = "projects/demo-agent/agent/sessions/1234"


def build_payload(parameters=None, contexts=None):
    """Dialogflow v2 webhook request as posted by the platform."""
    if parameters is None:
        parameters = {"city": "Paris", "gender": "female", "age": 30}
    if contexts is None:
        contexts = [
            {
                "name": f"{SESSION}/contexts/my-awesome-context",
                "lifespanCount": 5,
                "parameters": {"city": "Lyon", "gender": "male", "age": 41},
            }
        ]
    return {
        "responseId": "resp-1",
        "session": SESSION,
        "queryResult": {
            "queryText": "I live in Paris",
            "languageCode": "en",
            "parameters": parameters,
            "allRequiredParamsPresent": True,
            "fulfillmentMessages": [{"text": {"text": [""]}}],
            "outputContexts": contexts,
            "intent": {
                "name": "projects/demo-agent/agent/intents/abc",
                "displayName": "user.profile",
            },
            "intentDetectionConfidence": 0.92,
        },
        "originalDetectIntentRequest": {"source": "google", "version": "2", "payload": {}},
    }


@pytest.fixture
def valid_payload():
    return build_payload()
