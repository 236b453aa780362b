from linear_mcp.core.adapter import AdapterResult, IssueTrackerAdapter
from linear_mcp.core.models import GetCyclesRequest


async def get_cycles(
    adapter: IssueTrackerAdapter, request: GetCyclesRequest
) -> AdapterResult:
    return await adapter.get_cycles(request.team_id)
