from services.repository.base import CandidateRepository, EligibilityCriteria
from services.repository.memory import InMemoryRepository

__all__ = ["CandidateRepository", "EligibilityCriteria", "InMemoryRepository"]
