from __future__ import annotations

import logging
from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI

from .llm import CompletionOutcome, CompletionRequest, LLMClient


logger = logging.getLogger(__name__)


class OpenAICompletionClient(LLMClient):
    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ValueError("OpenAI API Key is required")
        self.base_url = base_url
        # one submission per run: the SDK retries twice by default
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, request: CompletionRequest) -> CompletionOutcome:
        logger.debug("completion request: model=%s max_tokens=%d", request.model, request.max_tokens)
        try:
            resp = await self._client.completions.create(
                model=request.model,
                prompt=request.prompt,
                max_tokens=request.max_tokens,
            )
        except openai.OpenAIError as e:
            logger.debug("completion request failed: %r", e)
            return CompletionOutcome(error=str(e) or e.__class__.__name__)
        except ValueError as e:
            # body that is not valid JSON (json.JSONDecodeError)
            logger.debug("completion response could not be decoded: %r", e)
            return CompletionOutcome(error=f"malformed response: {e}")

        choices = getattr(resp, "choices", None) or []
        logger.debug("completion returned %d choice(s)", len(choices))
        if not choices:
            return CompletionOutcome()
        return CompletionOutcome(text=choices[0].text)

    async def aclose(self) -> None:
        await self._client.close()
