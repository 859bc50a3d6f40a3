"""Candidate record (TMA pool) as read by the matching engine."""

from pydantic import BaseModel, field_validator

QUALITY_TAGS = ("A", "B", "C")


class Candidate(BaseModel):
    """A temporary-staffing candidate. Read-only for matching."""
    id: str
    first_name: str = ""
    last_name: str = ""
    position_title: str | None = None
    city: str | None = None
    canton: str | None = None
    postal_code: str | None = None
    street: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    experience_level: str | None = None  # more_than_3, more_than_1, less_than_1
    driving_license: str | None = None  # none, b, be, b_car, be_car
    short_profile_url: str | None = None
    notes: str | None = None
    quality_note: str | None = None
    status_tags: list[str] = []  # subset of A/B/C
    status: str | None = None  # legacy single quality tag
    activity: str | None = None  # active, inactive
    team_id: str | None = None

    @field_validator("status_tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return value or []

    @property
    def quality_tags(self) -> list[str]:
        """Multi-select tags, falling back to the legacy single tag."""
        if self.status_tags:
            return list(self.status_tags)
        return [self.status] if self.status else []

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
