"""Dict-backed repository for local runs and tests."""

import json
import logging
from pathlib import Path

from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services.repository.base import CandidateRepository, EligibilityCriteria

logger = logging.getLogger(__name__)


class InMemoryRepository(CandidateRepository):
    name = "memory"

    def __init__(
        self,
        contacts: list[Contact] | None = None,
        roles: list[Role] | None = None,
        candidates: list[Candidate] | None = None,
    ) -> None:
        self.contacts = {c.id: c for c in contacts or []}
        self.roles = list(roles or [])
        self.candidates = {c.id: c for c in candidates or []}

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryRepository":
        """Load {"contacts": [...], "roles": [...], "candidates": [...]} from JSON."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        repo = cls(
            contacts=[Contact.model_validate(c) for c in data.get("contacts", [])],
            roles=[Role.model_validate(r) for r in data.get("roles", [])],
            candidates=[Candidate.model_validate(c) for c in data.get("candidates", [])],
        )
        logger.info(
            "Loaded %d contacts, %d roles, %d candidates from %s",
            len(repo.contacts), len(repo.roles), len(repo.candidates), path,
        )
        return repo

    def get_contact(self, contact_id: str) -> Contact | None:
        return self.contacts.get(contact_id)

    def list_roles(self, team_id: str | None = None) -> list[Role]:
        roles = [r for r in self.roles if team_id is None or r.team_id == team_id]
        return sorted(roles, key=lambda r: r.name.lower())

    def get_candidate(self, candidate_id: str) -> Candidate | None:
        return self.candidates.get(candidate_id)

    def list_eligible_candidates(self, criteria: EligibilityCriteria) -> list[Candidate]:
        excluded = set(criteria.exclude_ids)
        result = []
        for candidate in self.candidates.values():
            if criteria.activity and candidate.activity != criteria.activity:
                continue
            if criteria.team_id and candidate.team_id != criteria.team_id:
                continue
            if criteria.require_profile and not candidate.short_profile_url:
                continue
            if candidate.id in excluded:
                continue
            result.append(candidate)
        return result
