import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False

    # Candidate repository
    repository_backend: str = "supabase"  # "supabase" | "memory"
    supabase_url: str = ""
    supabase_service_key: str = ""
    db_timeout_seconds: float = 10.0
    memory_fixture_path: str = ""  # JSON file loaded by the memory backend

    # Matching
    match_result_limit: int = 50
    match_require_role_match: bool = False  # drop candidates with roleMatch == 0
    match_rate_limit: str = "30/minute"

    # AI scoring
    match_model: str = "gemini-2.5-flash"
    ai_timeout_seconds: float = 30.0
    ai_candidate_limit: int = 15  # top-N by points sent in the single batch call
    ai_include_profiles: bool = True
    profile_text_max_chars: int = 2000
    profile_fetch_timeout_seconds: float = 10.0  # whole download, per profile
    profile_max_bytes: int = 5 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
