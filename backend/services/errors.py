"""Structured failures surfaced by the matching services.

Each error carries a ``kind`` the API maps to a status code, so callers can
tell a bad selection from a missing record from a transient outage.
"""


class MatchError(Exception):
    kind: str = "MatchError"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class NotFound(MatchError):
    kind = "NotFound"
    status_code = 404


class InvalidInput(MatchError):
    kind = "InvalidInput"
    status_code = 400


class UpstreamFailure(MatchError):
    """Database or AI endpoint unreachable, timed out or returned bad data."""
    kind = "UpstreamFailure"
    status_code = 502


class RateLimited(MatchError):
    kind = "RateLimited"
    status_code = 429
