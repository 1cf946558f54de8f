from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompletionRequest:
    model: str
    prompt: str
    max_tokens: int

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("model is required")
        if not self.prompt:
            raise ValueError("prompt is required")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens < 1:
            raise ValueError(f"max_tokens must be a positive integer, got {self.max_tokens!r}")


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_PROMPT = "Hello! Can you tell me a short joke?"
DEFAULT_MAX_TOKENS = 100


def build_request() -> CompletionRequest:
    """The fixed request sent on every run; raises ValueError if it cannot be built."""
    return CompletionRequest(model=DEFAULT_MODEL, prompt=DEFAULT_PROMPT, max_tokens=DEFAULT_MAX_TOKENS)


@dataclass(frozen=True)
class CompletionOutcome:
    """Result of one submission: first choice text, an error, or neither."""

    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LLMClient:
    """Minimal LLM client interface."""

    async def complete(self, request: CompletionRequest) -> CompletionOutcome:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
