from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_ai_scorer, get_candidate_repository
from config import settings
from models.requests import ContactMatchRequest, MatchRequest, TeamCandidatesRequest
from models.responses import ErrorResponse, MatchResponse, TeamCandidate
from models.schemas.contact import Role
from services import matcher
from services.ai_scorer import AIScorer
from services.repository.base import CandidateRepository
from services.team_candidates import team_candidates

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}
RATE_LIMITED_RESPONSES = {**ERROR_RESPONSES, 429: {"model": ErrorResponse}}


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "repository": settings.repository_backend,
    }


@router.get("/roles", response_model=list[Role], responses=ERROR_RESPONSES)
async def roles(repository: CandidateRepository = Depends(get_candidate_repository)):
    return await matcher.call_repository(repository.list_roles)


@router.post("/match", response_model=MatchResponse, responses=RATE_LIMITED_RESPONSES)
@limiter.limit(settings.match_rate_limit)
async def match(
    request: Request,
    body: MatchRequest,
    repository: CandidateRepository = Depends(get_candidate_repository),
    scorer: AIScorer = Depends(get_ai_scorer),
):
    return await matcher.match_candidates(
        body.contact_id, body.role_name, body.method, repository, scorer
    )


@router.post(
    "/contacts/{contact_id}/match-candidates",
    response_model=MatchResponse,
    responses=RATE_LIMITED_RESPONSES,
)
@limiter.limit(settings.match_rate_limit)
async def contact_match_candidates(
    request: Request,
    contact_id: str,
    body: ContactMatchRequest,
    repository: CandidateRepository = Depends(get_candidate_repository),
    scorer: AIScorer = Depends(get_ai_scorer),
):
    return await matcher.match_candidates(
        contact_id, body.role_name, body.method, repository, scorer
    )


@router.post(
    "/contacts/{contact_id}/team-candidates",
    response_model=list[TeamCandidate],
    responses=ERROR_RESPONSES,
)
async def contact_team_candidates(
    contact_id: str,
    body: TeamCandidatesRequest,
    repository: CandidateRepository = Depends(get_candidate_repository),
):
    return await team_candidates(contact_id, body.selected_candidate_id, repository)
