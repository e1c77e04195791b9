"""
OpenAI-compatible chat-completion client
"""
import json
import time
from typing import Any, Optional

import httpx
import openai
from openai import AsyncOpenAI

from ..config import LLMConfig
from ..errors import AuthError, LLMClientError, LLMParseError, NetworkError, RateLimitError
from ..logger import get_logger

logger = get_logger(__name__)


class OpenAIClient:
    """
    Thin wrapper over AsyncOpenAI that returns parsed JSON payloads.

    SDK retries are disabled; retry policy belongs to the caller.
    """

    def __init__(self, config: LLMConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.model = config.model
        kwargs: dict[str, Any] = {
            "api_key": config.api_key,
            "base_url": config.base_url,
            "max_retries": 0,
        }
        if config.request_timeout is not None:
            kwargs["timeout"] = config.request_timeout
        if http_client is not None:
            kwargs["http_client"] = http_client
        self.client = AsyncOpenAI(**kwargs)

    async def chat(
        self,
        messages: list[dict],
        temperature: float = 0.7,
        max_tokens: int = 1000,
        response_format: Optional[dict] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """Send a chat completion request and return the first choice's content"""
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if response_format:
            kwargs["response_format"] = response_format
        if timeout is not None:
            kwargs["timeout"] = timeout

        started = time.perf_counter()
        try:
            response = await self.client.chat.completions.create(**kwargs)
        except openai.AuthenticationError as e:
            raise AuthError(f"Invalid API key: {e}") from e
        except openai.RateLimitError as e:
            raise RateLimitError(f"Too many requests to AI service: {e}") from e
        except openai.APIConnectionError as e:
            # Covers APITimeoutError as well
            raise NetworkError(f"Failed to connect to AI service: {e}") from e
        except openai.APIStatusError as e:
            raise LLMClientError(f"AI service returned HTTP {e.status_code}: {e}") from e

        logger.debug(
            f"Chat completion from {self.model} in {(time.perf_counter() - started) * 1000:.0f}ms"
        )

        if not response.choices:
            raise LLMParseError("AI service returned no choices")
        return response.choices[0].message.content or ""

    async def complete(
        self,
        system_message: str,
        user_message: str,
        *,
        temperature: float,
        max_tokens: int,
        json_mode: bool = True,
        timeout: Optional[float] = None,
    ) -> dict:
        """System + user message in, parsed JSON object out"""
        content = await self.chat(
            messages=[
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_message},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
            response_format={"type": "json_object"} if json_mode else None,
            timeout=timeout,
        )

        try:
            payload = json.loads(self._clean_json(content))
        except json.JSONDecodeError as e:
            raise LLMParseError(f"AI response is not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise LLMParseError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload

    async def close(self) -> None:
        await self.client.close()

    def _clean_json(self, content: str) -> str:
        """Remove markdown code blocks if present"""
        content = content.strip()
        if content.startswith("```"):
            first_newline = content.find("\n")
            if first_newline != -1:
                content = content[first_newline + 1:]
            if content.endswith("```"):
                content = content[:-3]
        return content.strip()
