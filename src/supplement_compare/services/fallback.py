"""Deterministic recommendation used when remote generation fails."""

import math

from supplement_compare.domain.products import ScoredProduct
from supplement_compare.domain.profile import UserProfile
from supplement_compare.domain.recommendation import RecommendationResult

FALLBACK_CAUTIONS = (
    "If you take any medications (especially anticoagulants), "
    "talk to a healthcare professional before starting.",
    "Some people get an upset stomach or fishy burps; "
    "consider taking it with a meal.",
)
VALUE_METRIC_NOTE = "Value metric used: price per 1000mg omega-3 (lower is better)"


def build_fallback_recommendation(
    winner: str,
    first: ScoredProduct,
    second: ScoredProduct,
    profile: UserProfile,
) -> RecommendationResult:
    """Build a recommendation purely from metrics and scores."""
    budget = f"budget ({profile.budget})" if profile.budget else "budget"
    cheaper = _cheaper_key(first, second)
    more_potent = _more_potent_key(first, second)
    reason = (
        "The AI recommendation could not be generated, so this result is based "
        f"on the quantitative metrics. From a {budget} perspective, {cheaper} "
        "offers better value (price per 1000mg omega-3), while in terms of "
        f"intake strength (omega-3 per serving), {more_potent} comes out ahead."
    )
    return RecommendationResult(
        winner=winner,
        reason=reason,
        value_summary=[
            f"Scores (higher is better): {first.key}={first.score:.2f}, "
            f"{second.key}={second.score:.2f}",
            VALUE_METRIC_NOTE,
        ],
        cautions=list(FALLBACK_CAUTIONS),
    )


def _cheaper_key(first: ScoredProduct, second: ScoredProduct) -> str:
    """Key with the lower price per 1000mg omega-3; a missing value loses."""
    first_price = _or_inf(first.metrics.price_per_1000mg_omega3)
    second_price = _or_inf(second.metrics.price_per_1000mg_omega3)
    return first.key if first_price < second_price else second.key


def _more_potent_key(first: ScoredProduct, second: ScoredProduct) -> str:
    """Key with more omega-3 per serving; a missing value counts as zero."""
    first_mg = first.metrics.omega3_per_serving_mg or 0.0
    second_mg = second.metrics.omega3_per_serving_mg or 0.0
    return first.key if first_mg > second_mg else second.key


def _or_inf(value: float | None) -> float:
    return math.inf if value is None else value
