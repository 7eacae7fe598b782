"""Product comparison orchestration."""

import logging
from dataclasses import dataclass, field

from supplement_compare.domain.products import (
    DerivedMetrics,
    ProductRecord,
    ScoredProduct,
)
from supplement_compare.domain.profile import UserProfile
from supplement_compare.domain.recommendation import RecommendationOutcome
from supplement_compare.services.catalog import ProductCatalog
from supplement_compare.services.metrics import build_metrics
from supplement_compare.services.normalizer import NormalizationError
from supplement_compare.services.recommendation import (
    LocalRecommendationProducer,
    RecommendationContext,
    RecommendationProducer,
)
from supplement_compare.services.scoring import calc_decision_score, pick_winner

_logger = logging.getLogger(__name__)


class UnknownProductError(Exception):
    """Raised when a requested product key is not in the catalog."""

    def __init__(self, keys: list[str]) -> None:
        super().__init__(f"Unknown product keys: {', '.join(keys)}")
        self.keys = keys


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two products for a profile."""

    profile: UserProfile
    first: ScoredProduct
    second: ScoredProduct
    winner_from_score_model: str
    recommendation: RecommendationOutcome


@dataclass
class ComparisonService:
    """Computes metrics and scores and obtains a recommendation."""

    catalog: ProductCatalog
    remote_producer: RecommendationProducer
    local_producer: RecommendationProducer = field(
        default_factory=LocalRecommendationProducer
    )

    def list_products(self) -> list[DerivedMetrics]:
        """Return derived metrics for every catalog product."""
        return [build_metrics(key, product) for key, product in self.catalog.items()]

    async def compare(
        self, profile: UserProfile, product_a: str, product_b: str
    ) -> ComparisonResult:
        """Compare two catalog products for the given profile."""
        record_a = self.catalog.get(product_a)
        record_b = self.catalog.get(product_b)
        if record_a is None or record_b is None:
            missing = [
                key
                for key, record in ((product_a, record_a), (product_b, record_b))
                if record is None
            ]
            raise UnknownProductError(missing)

        first = _score(product_a, record_a)
        second = _score(product_b, record_b)
        winner = pick_winner(first.key, first.score, second.key, second.score)
        context = RecommendationContext(
            profile=profile, first=first, second=second, winner=winner
        )
        recommendation = await self._recommend(context)
        return ComparisonResult(
            profile=profile,
            first=first,
            second=second,
            winner_from_score_model=winner,
            recommendation=recommendation,
        )

    async def _recommend(self, context: RecommendationContext) -> RecommendationOutcome:
        """Use the remote producer, switching to the local one on any failure."""
        try:
            return await self.remote_producer.produce(context)
        except Exception as exc:
            error = _describe_failure(exc)
            _logger.warning("Recommendation fallback used: %s", error)
            fallback = await self.local_producer.produce(context)
            raw = fallback.raw
            if isinstance(exc, NormalizationError) and exc.cleaned:
                raw = exc.cleaned
            return RecommendationOutcome(
                result=fallback.result, raw=raw, used_fallback=True, error=error
            )


def _score(key: str, product: ProductRecord) -> ScoredProduct:
    metrics = build_metrics(key, product)
    return ScoredProduct(key=key, metrics=metrics, score=calc_decision_score(metrics))


def _describe_failure(exc: Exception) -> str:
    """Human-readable cause of a remote recommendation failure."""
    if isinstance(exc, NormalizationError):
        return f"OpenAI returned non-JSON: {exc.message}"
    return str(exc) or type(exc).__name__
