from pydantic import BaseModel, ConfigDict, Field

_by_name = ConfigDict(populate_by_name=True)


class ScoreBreakdown(BaseModel):
    model_config = _by_name

    role_match: int = Field(0, alias="roleMatch")
    quality: int = 0
    experience: int = 0
    docs_bonus: int = Field(0, alias="docsBonus")
    notes_bonus: int = Field(0, alias="notesBonus")
    total: int = 0


class MatchedCandidate(BaseModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    position_title: str | None = None
    city: str | None = None
    canton: str | None = None
    postal_code: str | None = None
    experience_level: str | None = None
    driving_license: str | None = None
    short_profile_url: str | None = None
    quality_note: str | None = None
    notes: str | None = None
    distance_km: float | None = None  # None means unknown, never 0
    points_score: int = 0
    score_breakdown: ScoreBreakdown = ScoreBreakdown()
    status_tags: list[str] = []
    # AI method only
    ai_score: float | None = None
    match_reason: str | None = None


class ContactSummary(BaseModel):
    id: str
    company_name: str = ""
    city: str | None = None


class MatchResponse(BaseModel):
    model_config = _by_name

    matches: list[MatchedCandidate] = []
    method: str = "points"
    contact: ContactSummary | None = None
    role_name: str = Field("", alias="roleName")


class RoleSummary(BaseModel):
    id: str
    name: str
    color: str = ""


class TeamCandidate(BaseModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    position_title: str | None = None
    city: str | None = None
    status_tags: list[str] = []
    short_profile_url: str
    distance_km: float | None = None
    role: RoleSummary


class ErrorResponse(BaseModel):
    kind: str  # NotFound | InvalidInput | UpstreamFailure
    message: str
