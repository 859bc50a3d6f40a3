"""AI scoring adapter: delegates the ranking judgment to an LLM.

The whole candidate batch goes out in one call. A reply that is late,
unparseable or incomplete fails the request; AI scores are never mixed with
missing or made-up values.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from config import settings
from models.schemas.ai_score import AIScore
from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services import gemini_client, pdf_parser, prompt_builder
from services.errors import UpstreamFailure

logger = logging.getLogger(__name__)


class AIScorer(ABC):
    """Scores a candidate batch for one role at one company."""

    name: str = ""

    @abstractmethod
    async def score(
        self,
        role: Role,
        contact: Contact,
        candidates: list[Candidate],
        distances: list[float | None],
    ) -> list[AIScore]:
        """Return exactly one AIScore per candidate, or raise UpstreamFailure."""


def parse_scores(raw: Any, candidate_ids: list[str]) -> list[AIScore]:
    """Validate a model reply against the batch that was sent.

    Keeps the model's ordering. Unknown ids are ignored, duplicates keep the
    first entry, and any candidate left unscored fails the whole batch.
    """
    if isinstance(raw, dict):
        raw = raw.get("scores", raw.get("results"))
    if not isinstance(raw, list):
        raise UpstreamFailure("AI reply is not a list of scores")

    wanted = set(candidate_ids)
    scores: dict[str, AIScore] = {}
    for item in raw:
        try:
            parsed = AIScore.model_validate(item)
        except ValidationError as e:
            logger.error("Malformed AI score entry %r: %s", item, e)
            raise UpstreamFailure("AI reply contains a malformed score") from e
        if parsed.candidate_id not in wanted:
            logger.warning("AI scored unknown candidate %s, ignoring", parsed.candidate_id)
            continue
        scores.setdefault(parsed.candidate_id, parsed)

    missing = wanted - scores.keys()
    if missing:
        logger.error("AI reply is missing %d of %d candidates", len(missing), len(wanted))
        raise UpstreamFailure(
            f"AI reply scored {len(scores)} of {len(wanted)} candidates"
        )
    return list(scores.values())


class GeminiScorer(AIScorer):
    name = "gemini"

    def __init__(
        self,
        timeout_seconds: float | None = None,
        include_profiles: bool | None = None,
    ) -> None:
        self.timeout_seconds = (
            settings.ai_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self.include_profiles = (
            settings.ai_include_profiles if include_profiles is None else include_profiles
        )

    async def _profile_texts(self, candidates: list[Candidate]) -> list[str | None]:
        if not self.include_profiles:
            return [None] * len(candidates)

        async def fetch(candidate: Candidate) -> str | None:
            if not candidate.short_profile_url:
                return None
            return await asyncio.to_thread(
                pdf_parser.fetch_profile_text,
                candidate.short_profile_url,
                settings.profile_text_max_chars,
            )

        return list(await asyncio.gather(*(fetch(c) for c in candidates)))

    async def score(
        self,
        role: Role,
        contact: Contact,
        candidates: list[Candidate],
        distances: list[float | None],
    ) -> list[AIScore]:
        if not candidates:
            return []
        if gemini_client.get_client() is None:
            raise UpstreamFailure("AI scoring is not configured")

        async def run() -> Any:
            profile_texts = await self._profile_texts(candidates)
            prompt = prompt_builder.build_match_prompt(role, contact, candidates, distances, profile_texts)
            return await gemini_client.generate_json(prompt)

        # profile downloads count against the same budget as the model call
        try:
            raw = await asyncio.wait_for(run(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.error("AI scoring timed out after %.1fs", self.timeout_seconds)
            raise UpstreamFailure("AI scoring timed out") from e

        if raw is None:
            raise UpstreamFailure("AI scoring failed")

        return parse_scores(raw, [c.id for c in candidates])
