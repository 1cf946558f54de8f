from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

import click

from .config import Settings
from .llm import CompletionOutcome, CompletionRequest, LLMClient, build_request
from .openai_client import OpenAICompletionClient


logger = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], LLMClient]


def _default_client(settings: Settings) -> LLMClient:
    return OpenAICompletionClient(api_key=settings.api_key, base_url=settings.base_url)


async def request_completion(client: LLMClient, request: CompletionRequest) -> CompletionOutcome:
    """Submit exactly one request and release the client afterwards."""
    try:
        return await client.complete(request)
    finally:
        await client.aclose()


def report(outcome: CompletionOutcome) -> None:
    if not outcome.ok:
        click.echo(f"Error calling completion API: {outcome.error}", err=True)
        return
    if outcome.text is not None:
        click.echo(f"Response: {outcome.text}")


def run_once(
    settings: Settings,
    mask_key: bool = False,
    client_factory: Optional[ClientFactory] = None,
    request: Optional[CompletionRequest] = None,
) -> CompletionOutcome:
    if request is None:
        request = build_request()
    key = Settings.mask(settings.api_key) if mask_key else settings.api_key
    click.echo(f"API Key: {key}")
    click.echo(f"Base URL: {settings.base_url}")

    client = (client_factory or _default_client)(settings)
    click.echo("Client initialized successfully!")

    outcome = asyncio.run(request_completion(client, request))
    logger.debug("completion outcome: ok=%s has_text=%s", outcome.ok, outcome.text is not None)
    report(outcome)
    return outcome
