"""Pydantic models for the comparison API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from supplement_compare.domain.profile import UserProfile


class ProfilePayload(BaseModel):
    """User profile payload."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    age: int
    gender: str
    meds: str | None = None
    concerns: str | None = None
    budget: str | None = None
    current_supplements: str | None = Field(default=None, alias="currentSupplements")

    def to_domain(self) -> UserProfile:
        """Convert the payload into a domain profile."""
        return UserProfile(
            age=self.age,
            gender=self.gender,
            meds=self.meds,
            concerns=self.concerns,
            budget=self.budget,
            current_supplements=self.current_supplements,
        )


class CompareRequest(BaseModel):
    """Comparison request payload."""

    model_config = ConfigDict(populate_by_name=True)

    profile: ProfilePayload | None = None
    product_a: str | None = Field(default=None, alias="productA")
    product_b: str | None = Field(default=None, alias="productB")
