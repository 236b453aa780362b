from __future__ import annotations

from linear_mcp.core.adapter import AdapterResult, IssueTrackerAdapter
from linear_mcp.core.models import (
    CreateIssueRequest,
    SearchIssuesRequest,
    UpdateIssueRequest,
)


async def search_issues(
    adapter: IssueTrackerAdapter, request: SearchIssuesRequest
) -> AdapterResult:
    """
    Search issues by free text and/or team membership.
    Text matches case-insensitively on the title or the description.
    With no criteria the filter is empty and the first ``first`` issues are returned.
    """
    return await adapter.search_issues(request.to_filter(), request.first)


async def create_issue(
    adapter: IssueTrackerAdapter, request: CreateIssueRequest
) -> AdapterResult:
    return await adapter.create_issue(request.to_input())


async def update_issue(
    adapter: IssueTrackerAdapter, request: UpdateIssueRequest
) -> AdapterResult:
    # An empty input is still sent; Linear treats it as a no-op update.
    return await adapter.update_issue(request.issue_id, request.to_input())
