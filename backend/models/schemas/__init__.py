"""Domain records shared by the repository, scoring and AI layers."""

from models.schemas.ai_score import AIScore
from models.schemas.candidate import QUALITY_TAGS, Candidate
from models.schemas.contact import Contact, Role

__all__ = [
    "AIScore",
    "Candidate",
    "Contact",
    "QUALITY_TAGS",
    "Role",
]
