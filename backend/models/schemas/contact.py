"""Hiring company (contact) and open role reference data."""

from pydantic import BaseModel


class Contact(BaseModel):
    """A company being called. Supplies the destination point for distances."""
    id: str
    company_name: str = ""
    city: str | None = None
    canton: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    team_id: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class Role(BaseModel):
    """An open job category, e.g. "Elektroinstallateur EFZ"."""
    id: str
    name: str
    color: str = ""
    team_id: str | None = None
    note: str | None = None
