"""Unit tests for the chat-completion client and its error mapping."""
import json

import httpx
import pytest

from snackgpt.errors import AuthError, LLMClientError, LLMParseError, NetworkError, RateLimitError

from .helpers import RECIPE


async def complete(client, **overrides):
    kwargs = {"temperature": 0.8, "max_tokens": 1000}
    kwargs.update(overrides)
    return await client.complete("system text", "user text", **kwargs)


async def test_returns_parsed_json_object(llm_client, llm_endpoint):
    llm_endpoint.queue(RECIPE)
    assert await complete(llm_client) == RECIPE


async def test_sends_openai_compatible_request(llm_client, llm_endpoint):
    llm_endpoint.queue(RECIPE)
    await complete(llm_client, temperature=0.3, max_tokens=500)

    request = llm_endpoint.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"

    body = llm_endpoint.bodies[0]
    assert body["model"] == "test-model"
    assert body["temperature"] == 0.3
    assert body["max_tokens"] == 500
    assert body["response_format"] == {"type": "json_object"}
    assert body["messages"] == [
        {"role": "system", "content": "system text"},
        {"role": "user", "content": "user text"},
    ]


async def test_json_mode_off_omits_response_format(llm_client, llm_endpoint):
    llm_endpoint.queue(RECIPE)
    await complete(llm_client, json_mode=False)
    assert "response_format" not in llm_endpoint.bodies[0]


async def test_strips_markdown_fences(llm_client, llm_endpoint):
    llm_endpoint.queue("```json\n" + json.dumps(RECIPE) + "\n```")
    assert await complete(llm_client) == RECIPE


async def test_invalid_json_raises_parse_error(llm_client, llm_endpoint):
    llm_endpoint.queue("Here is your recipe: eggs!")
    with pytest.raises(LLMParseError):
        await complete(llm_client)


async def test_non_object_json_raises_parse_error(llm_client, llm_endpoint):
    llm_endpoint.queue('["egg", "rice"]')
    with pytest.raises(LLMParseError):
        await complete(llm_client)


async def test_unreachable_endpoint_raises_network_error(llm_client, llm_endpoint):
    with pytest.raises(NetworkError):
        await complete(llm_client)
    # No retry inside the client
    assert len(llm_endpoint.requests) == 1


async def test_timeout_raises_network_error(llm_client, llm_endpoint):
    llm_endpoint.queue(httpx.ReadTimeout("timed out"))
    with pytest.raises(NetworkError):
        await complete(llm_client, timeout=30.0)


async def test_401_raises_auth_error(llm_client, llm_endpoint):
    llm_endpoint.queue(httpx.Response(401, json={"error": {"message": "bad key"}}))
    with pytest.raises(AuthError):
        await complete(llm_client)


async def test_429_raises_rate_limit_error(llm_client, llm_endpoint):
    llm_endpoint.queue(httpx.Response(429, json={"error": {"message": "slow down"}}))
    with pytest.raises(RateLimitError):
        await complete(llm_client)
    assert len(llm_endpoint.requests) == 1


async def test_other_status_raises_base_client_error(llm_client, llm_endpoint):
    llm_endpoint.queue(httpx.Response(500, json={"error": {"message": "boom"}}))
    with pytest.raises(LLMClientError) as exc_info:
        await complete(llm_client)
    assert type(exc_info.value) is LLMClientError
