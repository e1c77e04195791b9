"""Shared fixtures wiring the app to a scripted chat-completion endpoint."""
import httpx
import pytest
from fastapi.testclient import TestClient

from snackgpt.config import LLMConfig, Settings
from snackgpt.main import create_app
from snackgpt.services.openai_client import OpenAIClient

from .helpers import FakeLLMEndpoint


@pytest.fixture
def llm_endpoint() -> FakeLLMEndpoint:
    return FakeLLMEndpoint()


@pytest.fixture
def llm_config() -> LLMConfig:
    return LLMConfig(api_key="test-key", base_url="http://llm.test/v1", model="test-model")


@pytest.fixture
def llm_client(llm_config, llm_endpoint) -> OpenAIClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(llm_endpoint))
    return OpenAIClient(llm_config, http_client=http_client)


@pytest.fixture
def app(llm_client):
    return create_app(Settings(), llm_client)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
