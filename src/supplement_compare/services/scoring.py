"""Weighted decision score for product comparison."""

import math

from supplement_compare.domain.products import DerivedMetrics

OMEGA3_WEIGHT = 0.25
EPA_WEIGHT = 0.25
DHA_WEIGHT = 0.15
VALUE_WEIGHT = 0.35
VALUE_SCALE = 100


def calc_value_factor(price_per_1000mg_omega3: float | None) -> float:
    """Return the inverse cost per 1000 mg omega-3, or 0 when unusable."""
    if price_per_1000mg_omega3 is None:
        return 0.0
    if not math.isfinite(price_per_1000mg_omega3) or price_per_1000mg_omega3 <= 0:
        return 0.0
    return 1 / price_per_1000mg_omega3


def calc_decision_score(metrics: DerivedMetrics) -> float:
    """Combine potency and value into a single score; higher is better."""
    value_factor = calc_value_factor(metrics.price_per_1000mg_omega3)
    return (
        (metrics.omega3_per_serving_mg or 0.0) * OMEGA3_WEIGHT
        + (metrics.epa_per_serving_mg or 0.0) * EPA_WEIGHT
        + (metrics.dha_per_serving_mg or 0.0) * DHA_WEIGHT
        + value_factor * VALUE_SCALE * VALUE_WEIGHT
    )


def pick_winner(key_a: str, score_a: float, key_b: str, score_b: float) -> str:
    """Return the key with the higher score; the first product wins ties."""
    return key_a if score_a >= score_b else key_b
