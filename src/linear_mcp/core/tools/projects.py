from linear_mcp.core.adapter import AdapterResult, IssueTrackerAdapter
from linear_mcp.core.models import GetProjectsRequest


async def get_projects(
    adapter: IssueTrackerAdapter, request: GetProjectsRequest
) -> AdapterResult:
    """
    Projects visible to the viewer.
    With a team id, only that team's projects are fetched (team-scoped query);
    otherwise the workspace-wide project list is used.
    """
    if request.team_id:
        return await adapter.get_team_projects(request.team_id, request.first)
    return await adapter.get_projects(request.first)
