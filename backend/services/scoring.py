"""Points scoring: deterministic, explainable fit of one candidate to one role.

Sub-scores (max):
    role_match   40  core role names relate
    quality      30  best A/B/C tag
    experience   15  experience level
    docs_bonus   10  short profile document exists (can be sent as attachment)
    notes_bonus   5  recruiter notes present
"""

import math

from models.responses import MatchedCandidate, ScoreBreakdown
from models.schemas.candidate import Candidate
from services.role_match import roles_match

ROLE_MATCH_POINTS = 40
QUALITY_POINTS = {"A": 30, "B": 20, "C": 10}
EXPERIENCE_POINTS = {
    "more_than_3": 15,
    "more_than_1": 8,
    "less_than_1": 3,
}
DOCS_BONUS = 10
NOTES_BONUS = 5


def quality_points(tags: list[str]) -> int:
    """Best tag wins; 0 without a known tag."""
    return max((QUALITY_POINTS.get(t, 0) for t in tags), default=0)


def score_candidate(candidate: Candidate, role_name: str) -> ScoreBreakdown:
    """Score a candidate against a role. Never raises on missing optional fields."""
    role_match = ROLE_MATCH_POINTS if roles_match(candidate.position_title, role_name) else 0
    quality = quality_points(candidate.quality_tags)
    experience = EXPERIENCE_POINTS.get(candidate.experience_level or "", 0)
    docs_bonus = DOCS_BONUS if candidate.short_profile_url else 0
    has_notes = bool((candidate.notes or "").strip() or (candidate.quality_note or "").strip())
    notes_bonus = NOTES_BONUS if has_notes else 0

    return ScoreBreakdown(
        role_match=role_match,
        quality=quality,
        experience=experience,
        docs_bonus=docs_bonus,
        notes_bonus=notes_bonus,
        total=role_match + quality + experience + docs_bonus + notes_bonus,
    )


def ranking_key(match: MatchedCandidate) -> tuple:
    """Sort key: total desc, then distance asc with unknown distances last, then name."""
    distance = match.distance_km if match.distance_km is not None else math.inf
    return (
        -match.points_score,
        match.distance_km is None,
        distance,
        f"{match.last_name} {match.first_name}".lower(),
    )


def rank(matches: list[MatchedCandidate]) -> list[MatchedCandidate]:
    return sorted(matches, key=ranking_key)
