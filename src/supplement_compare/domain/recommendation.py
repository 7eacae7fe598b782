"""Models for recommendation results."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class RecommendationResult(BaseModel):
    """Structured recommendation, either generated remotely or locally."""

    model_config = ConfigDict(populate_by_name=True)

    winner: str
    reason: str
    value_summary: list[str] = Field(alias="valueSummary")
    cautions: list[str]


@dataclass(frozen=True)
class RecommendationOutcome:
    """A recommendation together with how it was produced."""

    result: RecommendationResult
    raw: str
    used_fallback: bool = False
    error: str | None = None
