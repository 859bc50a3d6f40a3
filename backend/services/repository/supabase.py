"""Supabase (PostgREST) repository over plain HTTPS."""

import logging
from typing import Any

import requests
from pydantic import BaseModel, ValidationError

from models.schemas.candidate import Candidate
from models.schemas.contact import Contact, Role
from services.errors import UpstreamFailure
from services.repository.base import CandidateRepository, EligibilityCriteria

logger = logging.getLogger(__name__)

CONTACT_COLUMNS = "id,company_name,city,canton,latitude,longitude,team_id"
ROLE_COLUMNS = "id,name,color,team_id,note"
CANDIDATE_COLUMNS = (
    "id,first_name,last_name,position_title,city,canton,postal_code,street,"
    "latitude,longitude,experience_level,driving_license,short_profile_url,"
    "status_tags,status,quality_note,notes,activity,team_id"
)


class SupabaseRepository(CandidateRepository):
    """Reads contacts, tma_roles and tma_candidates with the service key."""

    name = "supabase"

    def __init__(self, base_url: str, service_key: str, timeout: float = 10.0) -> None:
        if not base_url or not service_key:
            raise ValueError("Supabase URL and service key are required")
        self.rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self.service_key = service_key
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, table: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        headers = {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Accept": "application/json",
        }
        try:
            response = self.session.get(
                f"{self.rest_url}/{table}",
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            logger.error("Supabase request to %s timed out", table)
            raise UpstreamFailure(f"Database timed out reading {table}") from exc
        except requests.RequestException as exc:
            logger.error("Supabase request to %s failed: %s", table, exc)
            raise UpstreamFailure(f"Database unreachable reading {table}") from exc

        if response.status_code >= 400:
            logger.error("Supabase %s returned %s: %s", table, response.status_code, response.text[:200])
            raise UpstreamFailure(f"Database error reading {table} ({response.status_code})")

        try:
            rows = response.json()
        except ValueError as exc:
            raise UpstreamFailure(f"Database returned invalid JSON for {table}") from exc
        if not isinstance(rows, list):
            raise UpstreamFailure(f"Database returned unexpected payload for {table}")
        return rows

    @staticmethod
    def _parse(model: type[BaseModel], rows: list[dict[str, Any]]) -> list:
        try:
            return [model.model_validate(row) for row in rows]
        except ValidationError as exc:
            logger.error("Undecodable %s row: %s", model.__name__, exc)
            raise UpstreamFailure(f"Database returned malformed {model.__name__} data") from exc

    def _first(self, model: type[BaseModel], table: str, columns: str, record_id: str) -> Any | None:
        rows = self._request(table, {"select": columns, "id": f"eq.{record_id}", "limit": 1})
        parsed = self._parse(model, rows)
        return parsed[0] if parsed else None

    def get_contact(self, contact_id: str) -> Contact | None:
        return self._first(Contact, "contacts", CONTACT_COLUMNS, contact_id)

    def get_candidate(self, candidate_id: str) -> Candidate | None:
        return self._first(Candidate, "tma_candidates", CANDIDATE_COLUMNS, candidate_id)

    def list_roles(self, team_id: str | None = None) -> list[Role]:
        params = {"select": ROLE_COLUMNS, "order": "name.asc"}
        if team_id:
            params["team_id"] = f"eq.{team_id}"
        return self._parse(Role, self._request("tma_roles", params))

    def list_eligible_candidates(self, criteria: EligibilityCriteria) -> list[Candidate]:
        params: dict[str, Any] = {"select": CANDIDATE_COLUMNS}
        if criteria.activity:
            params["activity"] = f"eq.{criteria.activity}"
        if criteria.team_id:
            params["team_id"] = f"eq.{criteria.team_id}"
        if criteria.require_profile:
            params["short_profile_url"] = "not.is.null"
        if criteria.exclude_ids:
            params["id"] = f"not.in.({','.join(criteria.exclude_ids)})"
        return self._parse(Candidate, self._request("tma_candidates", params))
