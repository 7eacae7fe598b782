"""Recommendation producers: remote generation and local fallback."""

import json
from dataclasses import dataclass
from typing import Protocol

from supplement_compare.domain.products import ScoredProduct
from supplement_compare.domain.profile import UserProfile
from supplement_compare.domain.recommendation import RecommendationOutcome
from supplement_compare.services.fallback import build_fallback_recommendation
from supplement_compare.services.normalizer import normalize_recommendation
from supplement_compare.services.prompts import build_recommendation_prompt


class GenerationClient(Protocol):
    """Interface for the text generation service."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return raw model text for a prompt."""


@dataclass(frozen=True)
class RecommendationContext:
    """Everything a producer needs to recommend one of two products."""

    profile: UserProfile
    first: ScoredProduct
    second: ScoredProduct
    winner: str

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.first.key, self.second.key)


class RecommendationProducer(Protocol):
    """Strategy that turns a comparison context into a recommendation."""

    async def produce(self, context: RecommendationContext) -> RecommendationOutcome:
        """Return a recommendation or raise when it cannot be produced."""


@dataclass
class RemoteRecommendationProducer(RecommendationProducer):
    """Asks the generation service and normalizes its answer."""

    client: GenerationClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def produce(self, context: RecommendationContext) -> RecommendationOutcome:
        """Call the generation service once and parse the result."""
        prompt = build_recommendation_prompt(
            context.profile, context.first, context.second, context.winner
        )
        raw = await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
        )
        result, _ = normalize_recommendation(raw, context.keys)
        return RecommendationOutcome(result=result, raw=raw)


@dataclass
class LocalRecommendationProducer(RecommendationProducer):
    """Builds the deterministic recommendation without external calls."""

    async def produce(self, context: RecommendationContext) -> RecommendationOutcome:
        """Return the metric-based recommendation."""
        result = build_fallback_recommendation(
            context.winner, context.first, context.second, context.profile
        )
        raw = json.dumps(
            result.model_dump(by_alias=True), indent=2, ensure_ascii=False
        )
        return RecommendationOutcome(result=result, raw=raw, used_fallback=True)
