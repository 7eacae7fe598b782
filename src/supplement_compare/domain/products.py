"""Product domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductRecord:
    """Catalog facts for a single supplement product.

    Unknown counts or nutrient amounts are ``None`` rather than ``0`` so that
    "missing" stays distinguishable from "zero".
    """

    brand: str
    name: str
    source: str
    price: float
    currency: str
    softgels: int | None
    serving_softgels: int | None
    omega3_per_serving_mg: float | None
    epa_per_serving_mg: float | None
    dha_per_serving_mg: float | None


@dataclass(frozen=True)
class DerivedMetrics:
    """Per-unit metrics derived from a product record."""

    key: str
    display_name: str
    source: str
    price: float
    currency: str
    softgels: int | None
    serving_softgels: int | None
    omega3_per_serving_mg: float | None
    epa_per_serving_mg: float | None
    dha_per_serving_mg: float | None
    servings_per_bottle: float | None
    total_omega3_mg_per_bottle: float | None
    price_per_softgel: float | None
    price_per_serving: float | None
    price_per_1000mg_omega3: float | None


@dataclass(frozen=True)
class ScoredProduct:
    """A compared product with its metrics and decision score."""

    key: str
    metrics: DerivedMetrics
    score: float
