"""Scripted chat-completion endpoint for tests, served through httpx.MockTransport."""
import json
from typing import Any

import httpx


RECIPE = {
    "dish_name": "Sunny Egg Fried Rice",
    "ingredients": ["egg", "rice", "spring onion"],
    "instructions": "Step 1. Cook the rice.\nStep 2. Scramble the egg.\nStep 3. Toss together.",
    "style_description": "This is the BEST rice ever!",
}

ANALYSIS = {
    "food_type": "light",
    "mood_influence": "bright and playful",
    "weather_adaptation": "fresh, no-oven cooking",
    "style_recommendation": "five_year_old",
}


def chat_completion(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeLLMEndpoint:
    """
    Replays queued responses in order. Each entry may be a dict (sent as the
    JSON message content), a str (sent verbatim as content), an httpx.Response,
    or an exception to raise. An empty queue behaves like an unreachable host.
    """

    def __init__(self) -> None:
        self.responses: list[Any] = []
        self.requests: list[httpx.Request] = []

    def queue(self, *responses: Any) -> "FakeLLMEndpoint":
        self.responses.extend(responses)
        return self

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise httpx.ConnectError("LLM endpoint unreachable", request=request)

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        content = response if isinstance(response, str) else json.dumps(response)
        return httpx.Response(200, json=chat_completion(content))
