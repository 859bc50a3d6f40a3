"""Matching orchestrator: ranks the candidate pool for one contact and role.

Flow:
    contact_id + role_name + method
      ├─ repository.get_contact          → Contact      (NotFound)
      ├─ repository.list_roles           → Role         (InvalidInput)
      ├─ repository.list_eligible_...    → [Candidate]  (empty → no matches)
      ├─ geo.pool_distances + scoring    → [MatchedCandidate]
      │        ↓
      ├─ points: rank by total, distance (unknown last)
      └─ ai:     pre-rank by points, one batched AIScorer call, rank by ai_score
                 ↓
         truncate → MatchResponse
"""

import asyncio
import logging
from typing import Any, Callable

from config import settings
from models.responses import ContactSummary, MatchedCandidate, MatchResponse
from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services import geo, scoring
from services.ai_scorer import AIScorer
from services.errors import InvalidInput, MatchError, NotFound, UpstreamFailure
from services.repository.base import CandidateRepository, EligibilityCriteria
from services.role_match import resolve_role

logger = logging.getLogger(__name__)

METHODS = ("points", "ai")


async def call_repository(func: Callable[..., Any], *args: Any) -> Any:
    """Run a blocking repository call off the event loop, bounded by a timeout."""
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(func, *args),
            timeout=settings.db_timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        logger.error("Repository call %s timed out", getattr(func, "__name__", func))
        raise UpstreamFailure("Database timed out") from e
    except MatchError:
        raise
    except Exception as e:
        logger.error("Repository call %s failed: %s", getattr(func, "__name__", func), e)
        raise UpstreamFailure("Database request failed") from e


def _to_match(candidate: Candidate, distance_km: float | None, role_name: str) -> MatchedCandidate:
    breakdown = scoring.score_candidate(candidate, role_name)
    return MatchedCandidate(
        id=candidate.id,
        first_name=candidate.first_name,
        last_name=candidate.last_name,
        position_title=candidate.position_title,
        city=candidate.city,
        canton=candidate.canton,
        postal_code=candidate.postal_code,
        experience_level=candidate.experience_level,
        driving_license=candidate.driving_license,
        short_profile_url=candidate.short_profile_url,
        quality_note=candidate.quality_note,
        notes=candidate.notes,
        distance_km=distance_km,
        points_score=breakdown.total,
        score_breakdown=breakdown,
        status_tags=candidate.quality_tags,
    )


def score_pool(
    contact: Contact,
    candidates: list[Candidate],
    role_name: str,
    require_role_match: bool = False,
) -> list[MatchedCandidate]:
    """Distance and points breakdown for every candidate of the pool."""
    distances = geo.pool_distances(contact, candidates)
    matches = [_to_match(c, d, role_name) for c, d in zip(candidates, distances)]
    if require_role_match:
        matches = [m for m in matches if m.score_breakdown.role_match > 0]
    return matches


async def _apply_ai_scores(
    scorer: AIScorer,
    role: Role,
    contact: Contact,
    ranked: list[MatchedCandidate],
    pool: dict[str, Candidate],
) -> list[MatchedCandidate]:
    batch = ranked[: settings.ai_candidate_limit]
    if not batch:
        return []

    scores = await scorer.score(
        role,
        contact,
        [pool[m.id] for m in batch],
        [m.distance_km for m in batch],
    )
    by_id = {m.id: m for m in batch}
    returned = [s.candidate_id for s in scores]
    if len(returned) != len(set(returned)) or set(returned) != by_id.keys():
        logger.error(
            "AI scorer %s returned %d scores for a batch of %d",
            scorer.name or type(scorer).__name__, len(returned), len(batch),
        )
        raise UpstreamFailure("AI scores do not match the candidate batch")

    result = []
    for s in scores:
        match = by_id[s.candidate_id].model_copy(
            update={"ai_score": s.ai_score, "match_reason": s.match_reason}
        )
        result.append(match)
    # stable sort: equal ai_score keeps the scorer's order
    result.sort(key=lambda m: -m.ai_score)
    return result


async def match_candidates(
    contact_id: str,
    role_name: str,
    method: str,
    repository: CandidateRepository,
    scorer: AIScorer | None = None,
) -> MatchResponse:
    """Rank eligible candidates for a hiring contact and role.

    Read-only. Raises NotFound, InvalidInput or UpstreamFailure; an empty
    eligible pool is not an error.
    """
    method = (method or "").strip().lower()
    if method not in METHODS:
        raise InvalidInput(f"Unknown method '{method}', expected one of: {', '.join(METHODS)}")
    if not role_name or not role_name.strip():
        raise InvalidInput("roleName is required")
    if method == "ai" and scorer is None:
        raise UpstreamFailure("AI scoring is not available")

    contact = await call_repository(repository.get_contact, contact_id)
    if contact is None:
        raise NotFound(f"Contact {contact_id} not found")

    roles = await call_repository(repository.list_roles)
    role = resolve_role(role_name, roles)
    if role is None:
        raise InvalidInput(f"Unknown role '{role_name}'")

    candidates = await call_repository(
        repository.list_eligible_candidates, EligibilityCriteria(activity="active")
    )

    matches = score_pool(contact, candidates, role.name, settings.match_require_role_match)
    ranked = scoring.rank(matches)

    if method == "ai":
        pool = {c.id: c for c in candidates}
        ranked = await _apply_ai_scores(scorer, role, contact, ranked, pool)

    top = [
        m.model_copy(update={"distance_km": geo.round_km(m.distance_km)})
        for m in ranked[: settings.match_result_limit]
    ]

    logger.info(
        "Matched %d/%d candidates for contact %s, role %s (%s)",
        len(top), len(candidates), contact.id, role.name, method,
    )
    return MatchResponse(
        matches=top,
        method=method,
        contact=ContactSummary(id=contact.id, company_name=contact.company_name, city=contact.city),
        role_name=role.name,
    )
