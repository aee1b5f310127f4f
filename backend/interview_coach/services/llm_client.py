import asyncio
import logging
import time

from openai import AsyncOpenAI

from interview_coach.core.config import (
    GROQ_API_KEY,
    LLM_BASE_URL,
    LLM_MAX_TOKENS,
    LLM_TEMPERATURE,
    LLM_TIMEOUT_SEC,
    MODEL_NAME,
)
from interview_coach.system_metrics import increment_metric, observe_llm_latency_ms

logger = logging.getLogger("interview_coach.services.llm_client")


class LLMError(RuntimeError):
    """Any failure to obtain assistant text from the provider."""


class LLMClient:
    """
    Thin adapter over an OpenAI-compatible chat-completions endpoint.
    One attempt per call: no retries, bounded by a timeout.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout_sec: float | None = None,
    ):
        self.api_key = GROQ_API_KEY if api_key is None else str(api_key).strip()
        self.base_url = base_url or LLM_BASE_URL
        self.model = model or MODEL_NAME
        self.temperature = LLM_TEMPERATURE if temperature is None else float(temperature)
        self.max_tokens = LLM_MAX_TOKENS if max_tokens is None else int(max_tokens)
        self.timeout_sec = LLM_TIMEOUT_SEC if timeout_sec is None else float(timeout_sec)
        self.client: AsyncOpenAI | None = None
        if self.api_key:
            self.client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url, max_retries=0)

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def complete(self, messages: list[dict]) -> str:
        if self.client is None:
            raise LLMError("Missing GROQ_API_KEY in environment.")

        increment_metric("llm_calls_total")
        started = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout_sec,
            )
        except asyncio.TimeoutError as exc:
            increment_metric("llm_failures_total")
            logger.warning("LLM timeout | model=%s timeout_sec=%s", self.model, self.timeout_sec)
            raise LLMError(f"LLM request timed out after {self.timeout_sec}s") from exc
        except Exception as exc:
            increment_metric("llm_failures_total")
            logger.warning("LLM failure | model=%s err=%s", self.model, exc)
            raise LLMError(f"LLM API error: {exc}") from exc
        finally:
            observe_llm_latency_ms((time.perf_counter() - started) * 1000.0)

        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None) if message is not None else None
        if not content:
            increment_metric("llm_failures_total")
            logger.warning("LLM malformed response | model=%s", self.model)
            raise LLMError("Malformed LLM response")

        return str(content)
