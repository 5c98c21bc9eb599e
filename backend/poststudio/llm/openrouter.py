"""
OpenRouter chat-completions client.

One POST per call, bounded by a client-side timeout. Failures raise
GenerationError; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Optional

import httpx
from pydantic import BaseModel

from ..config import settings
from ..errors import GenerationError

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = {}
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str) and error:
            return error
        if data.get("message"):
            return data["message"]
    return f"API error: {response.reason_phrase or response.status_code}"


def _first_choice_text(data: dict[str, Any]) -> str:
    choices = data.get("choices") or []
    if not choices:
        raise GenerationError("No response choices from API")

    choice = choices[0] or {}
    if not isinstance(choice, dict):
        raise GenerationError("API returned an invalid response")
    message = choice.get("message") or {}
    if not isinstance(message, dict):
        message = {}
    content = (
        message.get("content")
        or message.get("text")
        or choice.get("text")
        or choice.get("content")
        or ""
    )
    return content.strip() if isinstance(content, str) else ""


class OpenRouterClient:
    """Thin async client for the OpenRouter chat completions endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENROUTER_API_KEY
        self.model = model or settings.DEFAULT_MODEL
        self.temperature = temperature if temperature is not None else settings.DEFAULT_TEMPERATURE
        self.timeout = timeout if timeout is not None else settings.OPENROUTER_TIMEOUT
        self.api_url = api_url or settings.OPENROUTER_API_URL
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": settings.APP_URL,
            "X-Title": settings.APP_TITLE,
        }

    async def complete(
        self,
        messages: list[ChatMessage],
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Send messages and return the first completion's text.

        Raises:
            GenerationError: missing API key, non-success status, API error
                body, empty output, timeout or connection failure
        """
        if not self.api_key:
            raise GenerationError("OpenRouter API key is not configured")

        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [message.model_dump() for message in messages],
            "temperature": self.temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, headers=self._headers(), json=payload)
        except httpx.TimeoutException:
            logger.error(f"OpenRouter request timed out after {self.timeout}s")
            raise GenerationError(
                "Request to OpenRouter API timed out. The service took too long to respond. "
                "Please try again."
            )
        except httpx.HTTPError as e:
            logger.error(f"OpenRouter connection failed: {e}")
            raise GenerationError(
                "Connection error. Unable to reach the AI service. "
                "Please check your connection and try again."
            )

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(f"OpenRouter returned {response.status_code}: {message}")
            raise GenerationError(message)

        try:
            data = response.json()
        except ValueError:
            raise GenerationError("API returned an invalid response")

        if not isinstance(data, dict):
            raise GenerationError("API returned an invalid response")
        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise GenerationError(message or "API returned an error")

        text = _first_choice_text(data)
        if not text:
            raise GenerationError("API returned empty content")

        logger.info(f"OpenRouter completion received ({len(text)} chars, model={self.model})")
        return text


def get_llm_client() -> OpenRouterClient:
    """FastAPI dependency for the LLM client; overridden in tests."""
    return OpenRouterClient()
