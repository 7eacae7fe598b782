"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from supplement_compare.adapters.static_catalog import StaticProductCatalog
from supplement_compare.config import Settings
from supplement_compare.containers import AppContainer
from supplement_compare.domain.products import ProductRecord
from supplement_compare.domain.profile import UserProfile
from supplement_compare.services.comparison import ComparisonService
from supplement_compare.services.recommendation import (
    GenerationClient,
    LocalRecommendationProducer,
    RemoteRecommendationProducer,
)

GOOD_RECOMMENDATION = {
    "winner": "Sports Research",
    "reason": "Better value per 1000mg omega-3 and more EPA per serving.",
    "valueSummary": ["Cheaper per 1000mg omega-3", "Higher EPA per serving"],
    "cautions": ["Check with your doctor if you take blood thinners."],
}


@dataclass
class FakeGenerationClient(GenerationClient):
    """Fake generation client returning fixed text or raising."""

    text: str = field(default_factory=lambda: json.dumps(GOOD_RECOMMENDATION))
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def make_product(**overrides: object) -> ProductRecord:
    """Build a product record with sensible defaults."""
    values: dict[str, object] = {
        "brand": "Test Brand",
        "name": "Test Fish Oil",
        "source": "test",
        "price": 20.0,
        "currency": "USD",
        "softgels": 100,
        "serving_softgels": 2,
        "omega3_per_serving_mg": 1000.0,
        "epa_per_serving_mg": 500.0,
        "dha_per_serving_mg": 250.0,
    }
    values.update(overrides)
    return ProductRecord(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(age=34, gender="female", budget="$30/month")


@pytest.fixture
def catalog() -> StaticProductCatalog:
    return StaticProductCatalog.create()


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def comparison_service(
    settings: Settings,
    catalog: StaticProductCatalog,
    generation_client: FakeGenerationClient,
) -> ComparisonService:
    return ComparisonService(
        catalog=catalog,
        remote_producer=RemoteRecommendationProducer(
            client=generation_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        local_producer=LocalRecommendationProducer(),
    )


@pytest.fixture
def container(
    settings: Settings,
    catalog: StaticProductCatalog,
    comparison_service: ComparisonService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        comparison_service=comparison_service,
        close_resources=close_resources,
    )
