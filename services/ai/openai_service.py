import logging
import time
from typing import Protocol

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class MissingAPIKeyError(RuntimeError):
    pass


class GenerationProvider(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str):
        ...


def build_input(system_prompt, user_prompt):
    return [
        {
            "role": "system",
            "content": [{"type": "input_text", "text": system_prompt}],
        },
        {
            "role": "user",
            "content": [{"type": "input_text", "text": user_prompt}],
        },
    ]


class OpenAIResponsesProvider:
    """
    OpenAI Responses API 호출 (gpt-5-mini)
    Flask async view 는 요청마다 이벤트 루프가 새로 돌기 때문에 클라이언트를 호출마다 연다.
    """

    def __init__(self, api_key, *, model="gpt-5-mini", timeout=60.0, max_retries=2, client_factory=AsyncOpenAI):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self._client_factory = client_factory

    @classmethod
    def from_config(cls, cfg):
        return cls(
            cfg.get("OPENAI_API_KEY"),
            model=cfg.get("OPENAI_MODEL") or "gpt-5-mini",
            timeout=cfg.get("OPENAI_TIMEOUT", 60.0),
            max_retries=cfg.get("OPENAI_MAX_RETRIES", 2),
        )

    async def generate(self, system_prompt, user_prompt):
        if not self.api_key:
            raise MissingAPIKeyError("OPENAI_API_KEY is not configured")

        start = time.perf_counter()
        async with self._client_factory(
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        ) as client:
            response = await client.responses.create(
                model=self.model,
                input=build_input(system_prompt, user_prompt),
            )
        latency_ms = int((time.perf_counter() - start) * 1000)

        usage = getattr(response, "usage", None)
        logger.info(
            "[OPENAI] model=%s latency_ms=%s total_tokens=%s",
            self.model,
            latency_ms,
            getattr(usage, "total_tokens", None),
        )
        return response
