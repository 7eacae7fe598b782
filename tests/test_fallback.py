"""Tests for the deterministic fallback recommendation."""

from supplement_compare.domain.products import ScoredProduct
from supplement_compare.domain.profile import UserProfile
from supplement_compare.services.fallback import (
    FALLBACK_CAUTIONS,
    VALUE_METRIC_NOTE,
    build_fallback_recommendation,
)
from supplement_compare.services.metrics import build_metrics
from tests.conftest import make_product


def _scored(key: str, score: float, **overrides: object) -> ScoredProduct:
    return ScoredProduct(
        key=key, metrics=build_metrics(key, make_product(**overrides)), score=score
    )


def test_fallback_uses_given_winner_and_fixed_shape() -> None:
    first = _scored("A", 600.0, price=10.0)
    second = _scored("B", 500.0, price=20.0)

    result = build_fallback_recommendation(
        "A", first, second, UserProfile(age=30, gender="female")
    )

    assert result.winner == "A"
    assert result.value_summary == [
        "Scores (higher is better): A=600.00, B=500.00",
        VALUE_METRIC_NOTE,
    ]
    assert result.cautions == list(FALLBACK_CAUTIONS)
    assert len(result.cautions) == 2


def test_fallback_reason_names_cheaper_and_more_potent() -> None:
    first = _scored("A", 1.0, price=5.0, omega3_per_serving_mg=500.0)
    second = _scored("B", 2.0, price=10.0, omega3_per_serving_mg=800.0)

    result = build_fallback_recommendation(
        "B", first, second, UserProfile(age=30, gender="female", budget="$25")
    )

    assert "budget ($25) perspective, A offers better value" in result.reason
    assert "B comes out ahead" in result.reason


def test_missing_value_metric_loses() -> None:
    first = _scored("A", 1.0, serving_softgels=None)
    second = _scored("B", 1.0, price=999.0)

    result = build_fallback_recommendation(
        "A", first, second, UserProfile(age=30, gender="female")
    )

    assert "budget perspective, B offers better value" in result.reason


def test_missing_potency_counts_as_zero() -> None:
    first = _scored("A", 1.0, omega3_per_serving_mg=None)
    second = _scored("B", 1.0, omega3_per_serving_mg=1.0)

    result = build_fallback_recommendation(
        "A", first, second, UserProfile(age=30, gender="female")
    )

    assert "B comes out ahead" in result.reason


def test_exact_ties_name_second_product() -> None:
    first = _scored("A", 1.0)
    second = _scored("B", 1.0)

    result = build_fallback_recommendation(
        "A", first, second, UserProfile(age=30, gender="female")
    )

    assert "B offers better value" in result.reason
    assert "B comes out ahead" in result.reason
