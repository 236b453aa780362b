from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from . import queries
from .client import LinearClient, LinearClientError
from .errors import AuthenticationError

log = logging.getLogger("linear_mcp.core.adapter")


@dataclass(frozen=True)
class AdapterResult:
    """Either an upstream payload or the upstream error message, never both."""

    payload: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Dict[str, Any]) -> "AdapterResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, message: str) -> "AdapterResult":
        return cls(error=message)


class IssueTrackerAdapter(Protocol):
    """Typed calls into the upstream issue tracker, one per upstream operation."""

    async def get_teams(self) -> AdapterResult: ...

    async def search_issues(
        self, issue_filter: Dict[str, Any], first: int
    ) -> AdapterResult: ...

    async def get_cycles(self, team_id: str) -> AdapterResult: ...

    async def get_team_projects(self, team_id: str, first: int) -> AdapterResult: ...

    async def get_projects(self, first: int) -> AdapterResult: ...

    async def create_issue(self, issue_input: Dict[str, Any]) -> AdapterResult: ...

    async def update_issue(
        self, issue_id: str, issue_input: Dict[str, Any]
    ) -> AdapterResult: ...


class LinearAdapter:
    """
    IssueTrackerAdapter backed by the Linear GraphQL API.

    Holds the one authenticated client for the process. ``authenticate`` is
    called once before serving; the same session is reused for every call.
    Client errors are returned as failed AdapterResults with their message intact.
    """

    def __init__(self, client: LinearClient):
        self.client = client
        self.viewer: Optional[Dict[str, Any]] = None

    @property
    def authenticated(self) -> bool:
        return self.viewer is not None

    async def authenticate(self) -> Dict[str, Any]:
        try:
            data = await self.client.execute(queries.VIEWER_QUERY, operation="viewer")
        except LinearClientError as exc:
            raise AuthenticationError(
                f"Failed to authenticate with Linear: {exc}"
            ) from exc

        viewer = data.get("viewer")
        if not isinstance(viewer, dict) or not viewer.get("id"):
            raise AuthenticationError(
                "Failed to authenticate with Linear: no viewer returned"
            )
        self.viewer = viewer
        log.info("Authenticated with Linear as %s", viewer.get("name") or viewer["id"])
        return viewer

    async def _execute(
        self, query: str, variables: Optional[Dict[str, Any]], operation: str
    ) -> Dict[str, Any]:
        return await self.client.execute(query, variables, operation=operation)

    async def get_teams(self) -> AdapterResult:
        try:
            data = await self._execute(queries.TEAMS_QUERY, None, "teams")
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        return AdapterResult.success(data.get("teams") or {})

    async def search_issues(
        self, issue_filter: Dict[str, Any], first: int
    ) -> AdapterResult:
        try:
            data = await self._execute(
                queries.SEARCH_ISSUES_QUERY,
                {"filter": issue_filter, "first": first},
                "issues",
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        return AdapterResult.success(data.get("issues") or {})

    async def get_cycles(self, team_id: str) -> AdapterResult:
        try:
            data = await self._execute(
                queries.TEAM_CYCLES_QUERY, {"teamId": team_id}, "team.cycles"
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        team = data.get("team")
        if not isinstance(team, dict):
            return AdapterResult.failure(f"Team not found: {team_id}")
        return AdapterResult.success(team.get("cycles") or {})

    async def get_team_projects(self, team_id: str, first: int) -> AdapterResult:
        try:
            data = await self._execute(
                queries.TEAM_PROJECTS_QUERY,
                {"teamId": team_id, "first": first},
                "team.projects",
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        team = data.get("team")
        if not isinstance(team, dict):
            return AdapterResult.failure(f"Team not found: {team_id}")
        return AdapterResult.success(team.get("projects") or {})

    async def get_projects(self, first: int) -> AdapterResult:
        try:
            data = await self._execute(
                queries.PROJECTS_QUERY, {"first": first}, "projects"
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        return AdapterResult.success(data.get("projects") or {})

    async def create_issue(self, issue_input: Dict[str, Any]) -> AdapterResult:
        try:
            data = await self._execute(
                queries.CREATE_ISSUE_MUTATION, {"input": issue_input}, "issueCreate"
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        return AdapterResult.success(data.get("issueCreate") or {})

    async def update_issue(
        self, issue_id: str, issue_input: Dict[str, Any]
    ) -> AdapterResult:
        try:
            data = await self._execute(
                queries.UPDATE_ISSUE_MUTATION,
                {"id": issue_id, "input": issue_input},
                "issueUpdate",
            )
        except LinearClientError as exc:
            return AdapterResult.failure(str(exc))
        return AdapterResult.success(data.get("issueUpdate") or {})


__all__ = ["AdapterResult", "IssueTrackerAdapter", "LinearAdapter"]
