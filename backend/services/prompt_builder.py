"""Prompt templates for Gemini API calls."""

from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role

EXPERIENCE_LABELS = {
    "more_than_3": "more than 3 years",
    "more_than_1": "1-3 years",
    "less_than_1": "less than 1 year",
}

LICENSE_LABELS = {
    "none": "no driving licence",
    "b": "cat. B, no own car",
    "be": "cat. BE, no own car",
    "b_car": "cat. B + own car",
    "be_car": "cat. BE + own car",
}

QUALITY_LABELS = {"A": "A (top)", "B": "B (ok)", "C": "C (flop)"}

NOTES_MAX_CHARS = 500


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def describe_candidate(
    index: int,
    candidate: Candidate,
    distance_km: float | None,
    profile_text: str | None = None,
) -> str:
    """One numbered candidate block with every field the model may weigh."""
    location = ", ".join(
        p for p in (candidate.street, candidate.postal_code, candidate.city, candidate.canton) if p
    )
    distance = f"{round(distance_km)} km" if distance_km is not None else "unknown"
    quality = ", ".join(QUALITY_LABELS.get(t, t) for t in candidate.quality_tags)

    lines = [
        f"{index}. {candidate.full_name} (ID: {candidate.id})",
        f"   - Position: {candidate.position_title or 'not given'}",
        f"   - Address: {location or 'unknown'}",
        f"   - Distance to company: {distance}",
        f"   - Experience: {EXPERIENCE_LABELS.get(candidate.experience_level or '', 'not given')}",
        f"   - Driving licence: {LICENSE_LABELS.get(candidate.driving_license or '', 'not given')}",
        f"   - Quality rating: {quality or 'not rated'}",
    ]
    if candidate.quality_note:
        lines.append(f"   - Rating note: {candidate.quality_note}")
    if candidate.notes:
        lines.append(f"   - Notes: {_truncate(candidate.notes, NOTES_MAX_CHARS)}")
    if profile_text:
        lines.append(f"   - Short profile (PDF): {profile_text}")
    return "\n".join(lines)


def build_match_prompt(
    role: Role,
    contact: Contact,
    candidates: list[Candidate],
    distances: list[float | None],
    profile_texts: list[str | None] | None = None,
) -> str:
    """Single batched scoring call covering every candidate in the pool."""
    profile_texts = profile_texts or [None] * len(candidates)
    blocks = "\n\n".join(
        describe_candidate(i + 1, c, d, p)
        for i, (c, d, p) in enumerate(zip(candidates, distances, profile_texts))
    )
    company_place = contact.city or contact.canton or "Switzerland"

    return f"""You are a recruiting expert at a Swiss staffing agency (electrical, timber
construction, landscaping, construction and other trades).

Score every candidate below for the open role at this company.

COMPANY: {contact.company_name or 'unknown'} ({company_place})
ROLE: {role.name}

CRITERIA (most important first):
1. Professional fit - does the position/trade match the role?
2. Experience - enough years in the trade?
3. Regional proximity - acceptable commute distance?
4. Driving licence / car
5. Internal quality rating
6. Anything relevant in notes or short profile

SCORING RUBRIC (follow strictly):
- 85-100: Very good match - trade fits, experienced, good quality
- 70-84:  Good match - trade mostly fits, acceptable distance
- 55-69:  Moderate match - some overlap but gaps
- 40-54:  Weak match - little overlap
- 0-39:   Not suitable

RULES:
- Score EVERY candidate, including those without a short profile
- Give a concrete reason of 1-2 sentences, no filler, no emojis

CANDIDATES ({len(candidates)}):
{blocks}

Respond with ONLY a valid JSON array (no markdown, no code fences), one entry per candidate:
[
  {{"candidate_id": "<id from the list>", "ai_score": <integer 0-100>, "match_reason": "<short reason>"}}
]"""
