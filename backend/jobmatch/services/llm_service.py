"""
LLM Service — gateway to the external text-generation endpoint via LiteLLM.

Responsibilities:
  • Build GenerativeRequests from PROMPT_CONFIG defaults
  • Send chat-completion payloads with the configured bearer key
  • Classify failures: raise GatewayError on the structured path,
    return a sentinel string on the free-text path
  • Apply the per-call timeout and bounded retries
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from jobmatch.config import PROMPT_CONFIG, Settings
from jobmatch.errors import GatewayError
from jobmatch.models.ai_models import ChatMessage, GenerativeRequest

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True
litellm.set_verbose = False

GENERATION_FAILED = "Error generating content."
EMPTY_COMPLETION = "Error processing response."


class LLMGateway:
    """Stateless wrapper around one chat-completion endpoint."""

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        api_base: str | None = None,
        timeout: float = 60.0,
        num_retries: int = 0,
    ):
        self._api_key = api_key
        self._model = model
        self._api_base = api_base
        self._timeout = timeout
        self._num_retries = num_retries

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMGateway":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.llm_model,
            api_base=settings.llm_api_base,
            timeout=settings.llm_timeout_seconds,
            num_retries=settings.llm_num_retries,
        )

    # ── Request Building ─────────────────────────────────────────────────

    def build_request(
        self,
        prompt_name: str,
        messages: list[dict[str, str]] | list[ChatMessage],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> GenerativeRequest:
        """Merge PROMPT_CONFIG defaults → explicit overrides into a GenerativeRequest."""
        config = PROMPT_CONFIG.get(prompt_name, {})
        return GenerativeRequest(
            model=self._model,
            messages=[m if isinstance(m, ChatMessage) else ChatMessage(**m) for m in messages],
            temperature=temperature if temperature is not None else config.get("temperature", 0.7),
            max_tokens=max_tokens if max_tokens is not None else config.get("max_tokens", 500),
        )

    # ── Core Completion ──────────────────────────────────────────────────

    async def complete(self, request: GenerativeRequest) -> str:
        """
        Send one chat completion and return the raw completion text.

        Raises:
            GatewayError: non-success status, timeout or connection failure.
        """
        kwargs: dict[str, Any] = {
            "model": request.model,
            "messages": [m.model_dump() for m in request.messages],
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "api_key": self._api_key,
            "timeout": self._timeout,
            "num_retries": self._num_retries,
        }
        if self._api_base:
            kwargs["api_base"] = self._api_base

        logger.info(
            f"LLM call: model={request.model} temp={request.temperature} tokens={request.max_tokens}"
        )

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            body = str(getattr(e, "message", "") or e)
            logger.error(f"LLM error ({request.model}): status={status_code} {body}")
            raise GatewayError(
                f"Model call failed: {status_code}. Error: {body}",
                status_code=status_code,
                body=body,
            ) from e

        content = _first_choice_content(response)
        logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
        return content

    async def generate_text(self, request: GenerativeRequest) -> str:
        """
        Free-text generation that never raises on model failures.

        Returns GENERATION_FAILED when the call fails and EMPTY_COMPLETION
        when the endpoint answered without content.
        """
        try:
            content = await self.complete(request)
        except GatewayError:
            return GENERATION_FAILED
        return content or EMPTY_COMPLETION


# ── Helpers ──────────────────────────────────────────────────────────────────


def _first_choice_content(response: Any) -> str:
    """Pull choices[0].message.content out of a completion, '' when absent."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""
