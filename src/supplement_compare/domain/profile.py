"""User profile domain model."""

from dataclasses import dataclass

NONE_SENTINEL = "none"


@dataclass(frozen=True)
class UserProfile:
    """Profile supplied by the user for a single comparison."""

    age: int
    gender: str
    meds: str | None = None
    concerns: str | None = None
    budget: str | None = None
    current_supplements: str | None = None

    def display(self, value: str | None) -> str:
        """Render an optional free-text field, using the sentinel when empty."""
        if value is None or not value.strip():
            return NONE_SENTINEL
        return value
