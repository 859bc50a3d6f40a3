"""Lazily built repository singleton, chosen by settings.repository_backend."""

import logging

from config import settings
from services.repository.base import CandidateRepository

logger = logging.getLogger(__name__)

_repository: CandidateRepository | None = None


def _create_repository(backend: str) -> CandidateRepository:
    """Factory with deferred imports."""
    if backend == "supabase":
        from services.repository.supabase import SupabaseRepository
        return SupabaseRepository(
            settings.supabase_url,
            settings.supabase_service_key,
            timeout=settings.db_timeout_seconds,
        )
    elif backend == "memory":
        from services.repository.memory import InMemoryRepository
        if settings.memory_fixture_path:
            return InMemoryRepository.from_file(settings.memory_fixture_path)
        return InMemoryRepository()
    else:
        raise ValueError(f"Unknown repository backend: {backend}")


def get_repository() -> CandidateRepository:
    """Get the configured repository, creating it on first access."""
    global _repository
    if _repository is None:
        _repository = _create_repository(settings.repository_backend)
        logger.info("Repository backend: %s", _repository.name)
    return _repository


def set_repository(repository: CandidateRepository | None) -> None:
    """Install a specific repository (or None to rebuild from settings)."""
    global _repository
    _repository = repository


def clear() -> None:
    """Drop the cached repository. Useful for testing."""
    set_repository(None)
