"""
Pytest configuration and shared fixtures for Intent Bridge tests.

The Dialogflow transport is replaced by a mock whose detect_intent returns real
DetectIntentResponse messages, so the client code reads the same proto fields it
reads in production.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from google.cloud import dialogflow_v2 as dialogflow
from hypothesis import settings

from intentbridge.config import Settings
from intentbridge.main import create_app
from intentbridge.nlu.dialogflow_client import DialogflowIntentClient

settings.register_profile("default", max_examples=50, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))

PROJECT_ID = "test-project"


def make_response(query_text: str, fulfillment_text: str) -> dialogflow.DetectIntentResponse:
    return dialogflow.DetectIntentResponse(
        query_result=dialogflow.QueryResult(
            query_text=query_text,
            fulfillment_text=fulfillment_text,
        )
    )


@pytest.fixture
def sessions():
    """Stand-in for SessionsAsyncClient."""
    mock = MagicMock()
    mock.detect_intent = AsyncMock(return_value=make_response("hello", "Hi there!"))
    mock.transport.close = AsyncMock()
    return mock


@pytest.fixture
def intent_client(sessions):
    return DialogflowIntentClient(project_id=PROJECT_ID, sessions_client=sessions)


@pytest.fixture
def api(intent_client):
    app = create_app(Settings(project_id=PROJECT_ID), intent_client=intent_client)
    with TestClient(app) as client:
        yield client
