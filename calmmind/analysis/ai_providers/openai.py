from __future__ import annotations

import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from calmmind.analysis.ai_providers.base import GenerationClient, GenerationResult
from calmmind.analysis.errors import (
    AuthError,
    ConfigurationError,
    GenerationError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gpt-4o"


class OpenAIGenerationClient(GenerationClient):
    """Chat Completions client returning the first choice as raw text."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_CHAT_MODEL,
        *,
        timeout: float = 60.0,
        client: Optional[Any] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        if client is None and api_key:
            # SDK retries are disabled: callers decide how to handle failures.
            client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self._client is not None

    def generate(self, prompt: str) -> GenerationResult:
        if not self.is_configured:
            raise ConfigurationError()

        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.AuthenticationError as e:
            logger.error(f"OpenAI rejected the API key: {e}")
            raise AuthError() from e
        except openai.RateLimitError as e:
            logger.error(f"OpenAI rate limit hit: {e}")
            raise RateLimitError() from e
        except openai.NotFoundError as e:
            logger.error(f"OpenAI model '{self.model}' not found: {e}")
            raise NotFoundError() from e
        except openai.OpenAIError as e:
            logger.error(f"OpenAI chat completion failed: {e}")
            raise GenerationError(str(e)) from e

        if not resp.choices:
            logger.warning("OpenAI returned no choices")
            return GenerationResult(raw_text="")
        return GenerationResult(raw_text=resp.choices[0].message.content or "")
