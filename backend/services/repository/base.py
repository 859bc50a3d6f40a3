"""Abstract candidate/contact repository consumed by the matching services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services.role_match import resolve_role


@dataclass(frozen=True)
class EligibilityCriteria:
    """Which candidates may be proposed at all."""
    activity: str | None = "active"
    team_id: str | None = None
    require_profile: bool = False
    exclude_ids: tuple[str, ...] = field(default_factory=tuple)


class CandidateRepository(ABC):
    """Read-only access to contacts, roles and the candidate pool.

    Implementations return None for absent records and raise
    UpstreamFailure when the backing store cannot be read.
    """

    name: str = ""

    @abstractmethod
    def get_contact(self, contact_id: str) -> Contact | None:
        """Fetch one hiring company."""

    @abstractmethod
    def list_roles(self, team_id: str | None = None) -> list[Role]:
        """All known roles, optionally limited to one team."""

    @abstractmethod
    def get_candidate(self, candidate_id: str) -> Candidate | None:
        """Fetch one candidate."""

    @abstractmethod
    def list_eligible_candidates(self, criteria: EligibilityCriteria) -> list[Candidate]:
        """Candidates matching the eligibility criteria."""

    def get_role(self, name: str) -> Role | None:
        return resolve_role(name, self.list_roles())
