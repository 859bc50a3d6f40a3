from pydantic import BaseModel, ConfigDict, Field


class MatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contact_id: str = Field(..., alias="contactId", min_length=1, max_length=64)
    role_name: str = Field(..., alias="roleName", max_length=200, description="Role to fill, e.g. 'Zimmermann EFZ'")
    method: str = Field("points", description="'points' or 'ai'")


class ContactMatchRequest(BaseModel):
    """Body of the contact-scoped route; the contact id comes from the path."""
    model_config = ConfigDict(populate_by_name=True)

    role_name: str = Field(..., alias="roleName", max_length=200)
    method: str = "points"


class TeamCandidatesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_candidate_id: str = Field(..., alias="selectedCandidateId", min_length=1, max_length=64)
