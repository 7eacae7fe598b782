"""Derived per-unit metrics for supplement products."""

import math

from supplement_compare.domain.products import DerivedMetrics, ProductRecord


def safe_div(numerator: float | None, denominator: float | None) -> float | None:
    """Divide, returning None for a missing or zero divisor.

    A missing numerator or a non-finite quotient also yields None, so derived
    metrics are always either finite or absent.
    """
    if numerator is None or not denominator:
        return None
    result = numerator / denominator
    if not math.isfinite(result):
        return None
    return result


def calc_servings(product: ProductRecord) -> float | None:
    """Return servings per container."""
    return safe_div(product.softgels, product.serving_softgels)


def calc_total_omega3_mg(product: ProductRecord) -> float | None:
    """Return the total omega-3 mg per container."""
    servings = calc_servings(product)
    if servings is None or product.omega3_per_serving_mg is None:
        return None
    return servings * product.omega3_per_serving_mg


def calc_price_per_softgel(product: ProductRecord) -> float | None:
    """Return the price of a single softgel."""
    return safe_div(product.price, product.softgels)


def calc_price_per_serving(product: ProductRecord) -> float | None:
    """Return the price of one serving."""
    return safe_div(product.price, calc_servings(product))


def calc_price_per_1000mg_omega3(product: ProductRecord) -> float | None:
    """Return the price per 1000 mg of omega-3."""
    total_omega3_mg = calc_total_omega3_mg(product)
    if total_omega3_mg is None:
        return None
    return safe_div(product.price, total_omega3_mg / 1000)


def build_metrics(key: str, product: ProductRecord) -> DerivedMetrics:
    """Build the derived metrics for a catalog product."""
    return DerivedMetrics(
        key=key,
        display_name=product.name,
        source=product.source,
        price=product.price,
        currency=product.currency,
        softgels=product.softgels,
        serving_softgels=product.serving_softgels,
        omega3_per_serving_mg=product.omega3_per_serving_mg,
        epa_per_serving_mg=product.epa_per_serving_mg,
        dha_per_serving_mg=product.dha_per_serving_mg,
        servings_per_bottle=calc_servings(product),
        total_omega3_mg_per_bottle=calc_total_omega3_mg(product),
        price_per_softgel=calc_price_per_softgel(product),
        price_per_serving=calc_price_per_serving(product),
        price_per_1000mg_omega3=calc_price_per_1000mg_omega3(product),
    )
