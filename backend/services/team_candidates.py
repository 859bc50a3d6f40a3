"""Available candidates from a selected candidate's team, nearest first.

Used when a recruiter pitches one candidate to a company and wants the
team's other ready-to-send profiles (short profile present) as alternatives.
"""

import logging

from models.responses import RoleSummary, TeamCandidate
from services import geo, scoring
from services.errors import InvalidInput, NotFound
from services.matcher import call_repository
from services.repository.base import CandidateRepository, EligibilityCriteria
from services.role_match import find_best_matching_role

logger = logging.getLogger(__name__)


def _sort_key(row: TeamCandidate) -> tuple:
    quality = scoring.quality_points(row.status_tags)
    return (
        row.distance_km is None,
        row.distance_km if row.distance_km is not None else 0.0,
        -quality,
        f"{row.last_name} {row.first_name}".lower(),
    )


async def team_candidates(
    contact_id: str,
    selected_candidate_id: str,
    repository: CandidateRepository,
) -> list[TeamCandidate]:
    selected = await call_repository(repository.get_candidate, selected_candidate_id)
    if selected is None:
        raise NotFound(f"Candidate {selected_candidate_id} not found")
    if not selected.team_id:
        raise InvalidInput("Selected candidate has no team")

    contact = await call_repository(repository.get_contact, contact_id)
    if contact is None:
        raise NotFound(f"Contact {contact_id} not found")

    roles = await call_repository(repository.list_roles, selected.team_id)
    if not roles:
        return []

    criteria = EligibilityCriteria(
        activity="active",
        team_id=selected.team_id,
        require_profile=True,
        exclude_ids=(selected.id,),
    )
    candidates = await call_repository(repository.list_eligible_candidates, criteria)

    rows = []
    for candidate, distance in zip(candidates, geo.pool_distances(contact, candidates)):
        role = find_best_matching_role(candidate.position_title, roles)
        if role is None:
            continue
        rows.append(
            TeamCandidate(
                id=candidate.id,
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                position_title=candidate.position_title,
                city=candidate.city,
                status_tags=candidate.quality_tags,
                short_profile_url=candidate.short_profile_url,
                distance_km=geo.round_km(distance),
                role=RoleSummary(id=role.id, name=role.name, color=role.color),
            )
        )

    rows.sort(key=_sort_key)
    logger.info("Team %s: %d of %d candidates have a matching role", selected.team_id, len(rows), len(candidates))
    return rows
