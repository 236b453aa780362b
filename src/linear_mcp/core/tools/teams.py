from linear_mcp.core.adapter import AdapterResult, IssueTrackerAdapter
from linear_mcp.core.models import GetTeamsRequest


async def get_teams(
    adapter: IssueTrackerAdapter, request: GetTeamsRequest
) -> AdapterResult:
    """All teams in the workspace, with their workflow states and labels."""
    return await adapter.get_teams()
