"""Tests for container wiring and configuration."""

import asyncio

from supplement_compare.adapters.openai_generation_client import (
    OpenAIGenerationClient,
)
from supplement_compare.config import parse_allowed_origins
from supplement_compare.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.comparison_service is not None
    assert container.catalog.get("NOW Foods") is not None
    remote = container.comparison_service.remote_producer
    assert isinstance(remote.client, OpenAIGenerationClient)
    assert remote.model == "gpt-4o-mini"
    asyncio.run(container.close_resources())


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == ["*"]
    assert parse_allowed_origins(" * ") == ["*"]
    assert parse_allowed_origins("") == ["*"]
    assert parse_allowed_origins("http://a.test, http://b.test,") == [
        "http://a.test",
        "http://b.test",
    ]
