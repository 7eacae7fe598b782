"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supplement_compare.adapters.openai_generation_client import (
    OpenAIGenerationClient,
)
from supplement_compare.adapters.static_catalog import StaticProductCatalog
from supplement_compare.config import Settings
from supplement_compare.services.catalog import ProductCatalog
from supplement_compare.services.comparison import ComparisonService
from supplement_compare.services.recommendation import (
    LocalRecommendationProducer,
    RemoteRecommendationProducer,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: ProductCatalog
    comparison_service: ComparisonService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = StaticProductCatalog.create()
    openai_client = OpenAIGenerationClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
        max_retries=resolved_settings.openai_max_retries,
    )
    comparison_service = ComparisonService(
        catalog=catalog,
        remote_producer=RemoteRecommendationProducer(
            client=openai_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        ),
        local_producer=LocalRecommendationProducer(),
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        comparison_service=comparison_service,
        close_resources=close_resources,
    )
