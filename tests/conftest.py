from typing import Any, Dict, List, Optional, Tuple

import pytest
from linear_mcp.core.adapter import AdapterResult


class FakeAdapter:
    """Records adapter calls; returns canned payloads or a canned failure."""

    def __init__(
        self,
        payloads: Optional[Dict[str, Dict[str, Any]]] = None,
        error: Optional[str] = None,
    ):
        self.payloads = payloads or {}
        self.error = error
        self.calls: List[Tuple[str, tuple]] = []

    async def _record(self, method: str, *args: Any) -> AdapterResult:
        self.calls.append((method, args))
        if self.error is not None:
            return AdapterResult.failure(self.error)
        return AdapterResult.success(self.payloads.get(method, {"nodes": []}))

    async def get_teams(self):
        return await self._record("get_teams")

    async def search_issues(self, issue_filter, first):
        return await self._record("search_issues", issue_filter, first)

    async def get_cycles(self, team_id):
        return await self._record("get_cycles", team_id)

    async def get_team_projects(self, team_id, first):
        return await self._record("get_team_projects", team_id, first)

    async def get_projects(self, first):
        return await self._record("get_projects", first)

    async def create_issue(self, issue_input):
        return await self._record("create_issue", issue_input)

    async def update_issue(self, issue_id, issue_input):
        return await self._record("update_issue", issue_id, issue_input)

    @property
    def methods_called(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_adapter():
    return FakeAdapter()


@pytest.fixture
def make_adapter():
    """Factory for FakeAdapters with canned payloads or a canned failure."""

    def _make(
        payloads: Optional[Dict[str, Dict[str, Any]]] = None,
        error: Optional[str] = None,
    ) -> FakeAdapter:
        return FakeAdapter(payloads=payloads, error=error)

    return _make
