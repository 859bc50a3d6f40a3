"""Shared test configuration, markers and sample data."""

import pytest

from api.router import limiter
from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services.repository.memory import InMemoryRepository
from services.repository.registry import clear as clear_repository


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: talks to a real Supabase project or Gemini (needs credentials)"
    )


@pytest.fixture(autouse=True)
def _no_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture(autouse=True)
def _reset_repository():
    clear_repository()
    yield
    clear_repository()


@pytest.fixture
def acme() -> Contact:
    return Contact(
        id="c-acme",
        company_name="Acme AG",
        city="Zurich",
        canton="ZH",
        latitude=47.3769,
        longitude=8.5417,
        team_id="t-holz",
    )


@pytest.fixture
def roles() -> list[Role]:
    return [
        Role(id="r-zim", name="Zimmermann EFZ", color="#8B4513", team_id="t-holz"),
        Role(id="r-mal", name="Maler EFZ", color="#1E90FF", team_id="t-holz"),
        Role(id="r-elek", name="Elektroinstallateur EFZ", color="#FFD700", team_id="t-elektro"),
    ]


@pytest.fixture
def candidate_x() -> Candidate:
    return Candidate(
        id="cand-x",
        first_name="Xaver",
        last_name="Huber",
        position_title="Zimmermann",
        city="Zurich",
        canton="ZH",
        postal_code="8004",
        latitude=47.38,
        longitude=8.54,
        experience_level="more_than_3",
        short_profile_url="https://files.example.ch/profiles/x.pdf",
        notes="Reliable, wants to start next month",
        status_tags=["A"],
        activity="active",
        team_id="t-holz",
    )


@pytest.fixture
def candidate_y() -> Candidate:
    return Candidate(
        id="cand-y",
        first_name="Yves",
        last_name="Rochat",
        position_title="Maler",
        city="Geneve",
        canton="GE",
        latitude=46.2,
        longitude=6.15,
        activity="active",
        team_id="t-holz",
    )


@pytest.fixture
def repo(acme, roles, candidate_x, candidate_y) -> InMemoryRepository:
    return InMemoryRepository(contacts=[acme], roles=roles, candidates=[candidate_y, candidate_x])


@pytest.fixture
def empty_repo(acme, roles) -> InMemoryRepository:
    return InMemoryRepository(contacts=[acme], roles=roles, candidates=[])
