"""Normalization of free-form model output into recommendations."""

import json
import re
from dataclasses import dataclass

from pydantic import ValidationError

from supplement_compare.domain.recommendation import RecommendationResult

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")


class NormalizationError(Exception):
    """Raised when model output cannot be turned into a recommendation."""

    def __init__(self, message: str, cleaned: str) -> None:
        super().__init__(message)
        self.message = message
        self.cleaned = cleaned


@dataclass(frozen=True)
class ParsedPayload:
    """JSON payload recovered from model output and the text it came from."""

    payload: object
    cleaned: str


def strip_code_fences(text: str | None) -> str:
    """Remove a surrounding markdown code fence and trim whitespace."""
    if not text:
        return ""
    without_leading = _LEADING_FENCE.sub("", text.strip())
    return _TRAILING_FENCE.sub("", without_leading).strip()


def parse_json_payload(text: str | None) -> ParsedPayload:
    """Parse model output as JSON, recovering an embedded object if needed.

    The cleaned text is parsed directly first. If that fails, the span from
    the first ``{`` to the last ``}`` is parsed instead, which tolerates prose
    around the object. Anything else raises ``NormalizationError``.
    """
    cleaned = strip_code_fences(text)
    try:
        return ParsedPayload(payload=json.loads(cleaned), cleaned=cleaned)
    except json.JSONDecodeError as exc:
        start = cleaned.find("{")
        end = cleaned.rfind("}")
        if start == -1 or end == -1 or end <= start:
            raise NormalizationError(str(exc), cleaned) from exc

    fragment = cleaned[start : end + 1]
    try:
        return ParsedPayload(payload=json.loads(fragment), cleaned=fragment)
    except json.JSONDecodeError as exc:
        raise NormalizationError(str(exc), cleaned) from exc


def normalize_recommendation(
    text: str | None, allowed_winners: tuple[str, ...]
) -> tuple[RecommendationResult, str]:
    """Return the validated recommendation and the text that produced it."""
    parsed = parse_json_payload(text)
    if not isinstance(parsed.payload, dict):
        raise NormalizationError("expected a JSON object", parsed.cleaned)
    try:
        result = RecommendationResult.model_validate(parsed.payload)
    except ValidationError as exc:
        raise NormalizationError(_summarize_validation(exc), parsed.cleaned) from exc
    if result.winner not in allowed_winners:
        raise NormalizationError(
            f"winner {result.winner!r} is not one of {list(allowed_winners)}",
            parsed.cleaned,
        )
    return result, parsed.cleaned


def _summarize_validation(exc: ValidationError) -> str:
    """Condense pydantic errors into a single readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts) or "invalid recommendation payload"
