"""Ordered fallback across Gemini models.

Backends have independent, unpredictable availability and quota, so each
request walks the configured list one model at a time until one returns
text. Calls are never raced.
"""

from __future__ import annotations

import logging
from typing import Iterator, Protocol

from google import genai

from auditor.errors import ConfigurationError, ModelAttempt, ModelExhaustionError

logger = logging.getLogger(__name__)


class InferenceBackend(Protocol):
    def generate(self, model_id: str, prompt: str) -> str: ...


class GeminiBackend:
    def __init__(self, api_key: str):
        self.client = genai.Client(api_key=api_key)

    def generate(self, model_id: str, prompt: str) -> str:
        response = self.client.models.generate_content(model=model_id, contents=prompt)
        return response.text or ""


class ModelOrchestrator:
    def __init__(
        self,
        api_key: str,
        model_ids: list[str],
        backend: InferenceBackend | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Missing Gemini API key (GOOGLE_GENERATIVE_AI_API_KEY)")
        if not model_ids:
            raise ConfigurationError("No inference models configured")
        self.model_ids = list(model_ids)
        self.backend = backend or GeminiBackend(api_key)

    def attempts(self, prompt: str) -> Iterator[ModelAttempt]:
        """Yield one ModelAttempt per model tried, stopping after the first success."""
        for model_id in self.model_ids:
            try:
                text = self.backend.generate(model_id, prompt)
            except Exception as e:
                reason = str(e) or type(e).__name__
                logger.warning("Model %s failed: %s", model_id, reason)
                yield ModelAttempt(model_id=model_id, reason=reason)
                continue
            if not text or not text.strip():
                logger.warning("Model %s returned an empty response", model_id)
                yield ModelAttempt(model_id=model_id, reason="empty response")
                continue
            logger.info("Model %s answered (%d chars)", model_id, len(text))
            yield ModelAttempt(model_id=model_id, text=text)
            return

    def generate(self, prompt: str) -> str:
        failures: list[ModelAttempt] = []
        for attempt in self.attempts(prompt):
            if attempt.succeeded:
                return attempt.text
            failures.append(attempt)
        raise ModelExhaustionError(failures)
