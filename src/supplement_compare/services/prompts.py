"""Prompt construction for the recommendation model."""

from supplement_compare.domain.products import ScoredProduct
from supplement_compare.domain.profile import UserProfile

_MISSING = "n/a"


def build_recommendation_prompt(
    profile: UserProfile,
    first: ScoredProduct,
    second: ScoredProduct,
    winner: str,
) -> str:
    """Build the prompt asking the model for a JSON recommendation."""
    margin = abs(first.score - second.score)
    winner_options = f'"{first.key}" | "{second.key}"'
    sections = [
        "You are a supplement decision assistant.",
        "Use the provided facts only (do NOT invent new facts). "
        "Keep it practical and consumer-focused.",
        "",
        "User profile:",
        f"- Age: {profile.age}",
        f"- Gender: {profile.display(profile.gender)}",
        f"- Current meds: {profile.display(profile.meds)}",
        f"- Health concerns: {profile.display(profile.concerns)}",
        f"- Budget: {profile.display(profile.budget)}",
        f"- Current supplements: {profile.display(profile.current_supplements)}",
        "",
        *_format_facts("A", first),
        "",
        *_format_facts("B", second),
        "",
        f"Quantitative decision model suggests winner: {winner}",
        f"(Score A={first.score:.2f}, Score B={second.score:.2f}, "
        f"margin={margin:.2f})",
        "",
        "Return JSON ONLY (no markdown, no code fences):",
        "{",
        f'  "winner": {winner_options},',
        '  "reason": "2-4 sentences personalized to the user '
        '(mention budget/value if relevant)",',
        '  "valueSummary": [',
        '    "1 bullet about value (price per 1000mg omega-3)",',
        '    "1 bullet about potency (omega-3/EPA/DHA per serving)"',
        "  ],",
        '  "cautions": [',
        '    "1-2 short cautions (no medical claims)"',
        "  ]",
        "}",
    ]
    return "\n".join(sections) + "\n"


def _format_facts(label: str, product: ScoredProduct) -> list[str]:
    """Render every metric fact of a product as prompt bullets."""
    metrics = product.metrics
    return [
        f"Facts ({label}):",
        f"- key: {metrics.key}",
        f"- name: {metrics.display_name}",
        f"- price: {metrics.price} {metrics.currency}",
        f"- count: {_fmt(metrics.softgels)} softgels",
        f"- serving: {_fmt(metrics.serving_softgels)} softgels",
        f"- omega-3 per serving: {_fmt(metrics.omega3_per_serving_mg)} mg",
        f"- EPA per serving: {_fmt(metrics.epa_per_serving_mg)} mg",
        f"- DHA per serving: {_fmt(metrics.dha_per_serving_mg)} mg",
        f"- servings per bottle: {_fmt(metrics.servings_per_bottle)}",
        f"- total omega-3 per bottle: {_fmt(metrics.total_omega3_mg_per_bottle)} mg",
        f"- $ per softgel: {_fmt(metrics.price_per_softgel)}",
        f"- $ per serving: {_fmt(metrics.price_per_serving)}",
        f"- $ per 1000mg omega-3: {_fmt(metrics.price_per_1000mg_omega3)}",
        f"- decision score: {product.score:.2f}",
    ]


def _fmt(value: float | None) -> str:
    if value is None:
        return _MISSING
    if isinstance(value, float):
        return f"{value:.4g}" if not value.is_integer() else str(int(value))
    return str(value)
