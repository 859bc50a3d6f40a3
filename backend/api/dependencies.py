"""Shared dependencies for API routes."""

from services.ai_scorer import AIScorer, GeminiScorer
from services.errors import UpstreamFailure
from services.repository.base import CandidateRepository
from services.repository.registry import get_repository


def get_candidate_repository() -> CandidateRepository:
    try:
        return get_repository()
    except ValueError as e:
        raise UpstreamFailure(f"Candidate database is not configured: {e}") from e


def get_ai_scorer() -> AIScorer:
    return GeminiScorer()
