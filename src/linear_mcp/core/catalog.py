"""
Static catalog of the operations this server advertises.

Each descriptor binds its wire name and JSON schema to the typed request model
and the handler that serves it, so advertised and dispatchable names are the
same set by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type

from .adapter import AdapterResult
from .models import (
    CreateIssueRequest,
    GetCyclesRequest,
    GetProjectsRequest,
    GetTeamsRequest,
    OperationRequest,
    SearchIssuesRequest,
    UpdateIssueRequest,
)
from .tools import (
    create_issue,
    get_cycles,
    get_projects,
    get_teams,
    search_issues,
    update_issue,
)

TOOL_PREFIX = "linear_"

Handler = Callable[[Any, Any], Awaitable[AdapterResult]]


@dataclass(frozen=True)
class OperationDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any]
    request_model: Type[OperationRequest]
    handler: Handler
    # Key wrapping the payload in the success text, e.g. {"teams": ...}
    result_key: str
    # Used in failure messages: "Failed to <action>: ..."
    action: str

    @property
    def kind(self) -> str:
        return self.request_model.kind

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _string_array(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _object_schema(
    properties: Dict[str, Any], required: Tuple[str, ...] = ()
) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


def _issue_properties(verb: str) -> Dict[str, Any]:
    return {
        "description": _string(f"{verb} description of the issue (markdown)"),
        "assigneeId": _string("ID of the user to assign the issue to"),
        "stateId": _string("ID of the workflow state to set for the issue"),
        "priority": _number(
            "Priority of the issue: 0 = none, 1 = urgent, 2 = high, 3 = medium, 4 = low"
        ),
        "estimate": _number("Estimate of the issue, in the team's estimate points"),
        "cycleId": _string("ID of the cycle to add the issue to"),
        "projectId": _string("ID of the project to add the issue to"),
        "labelIds": _string_array("IDs of labels to set on the issue"),
    }


_OPERATIONS: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name=TOOL_PREFIX + GetTeamsRequest.kind,
        description="Get all teams with their states and labels",
        input_schema=_object_schema({}),
        request_model=GetTeamsRequest,
        handler=get_teams,
        result_key="teams",
        action="get teams",
    ),
    OperationDescriptor(
        name=TOOL_PREFIX + SearchIssuesRequest.kind,
        description="Search for issues with filtering and pagination",
        input_schema=_object_schema(
            {
                "query": _string("Text to match against issue titles and descriptions"),
                "teamIds": _string_array("Only return issues from these team IDs"),
                "first": {
                    "type": "integer",
                    "description": "Number of issues to return (default: 50)",
                    "default": 50,
                },
            }
        ),
        request_model=SearchIssuesRequest,
        handler=search_issues,
        result_key="issues",
        action="search issues",
    ),
    OperationDescriptor(
        name=TOOL_PREFIX + GetCyclesRequest.kind,
        description="Get all cycles for a team",
        input_schema=_object_schema(
            {"teamId": _string("Team ID to get cycles for")}, required=("teamId",)
        ),
        request_model=GetCyclesRequest,
        handler=get_cycles,
        result_key="cycles",
        action="get cycles",
    ),
    OperationDescriptor(
        name=TOOL_PREFIX + GetProjectsRequest.kind,
        description="Get all projects, optionally only those of one team",
        input_schema=_object_schema(
            {
                "teamId": _string("Optional team ID to filter projects by"),
                "first": {
                    "type": "integer",
                    "description": "Number of projects to return (default: 50)",
                    "default": 50,
                },
            }
        ),
        request_model=GetProjectsRequest,
        handler=get_projects,
        result_key="projects",
        action="get projects",
    ),
    OperationDescriptor(
        name=TOOL_PREFIX + CreateIssueRequest.kind,
        description="Create a new issue",
        input_schema=_object_schema(
            {
                "teamId": _string("Team ID to create the issue in"),
                "title": _string("Title of the issue"),
                **_issue_properties("Initial"),
            },
            required=("teamId", "title"),
        ),
        request_model=CreateIssueRequest,
        handler=create_issue,
        result_key="issuePayload",
        action="create issue",
    ),
    OperationDescriptor(
        name=TOOL_PREFIX + UpdateIssueRequest.kind,
        description="Update an existing issue; only the given fields change",
        input_schema=_object_schema(
            {
                "issueId": _string("ID or identifier (e.g. ENG-123) of the issue"),
                "title": _string("New title of the issue"),
                **_issue_properties("New"),
            },
            required=("issueId",),
        ),
        request_model=UpdateIssueRequest,
        handler=update_issue,
        result_key="issuePayload",
        action="update issue",
    ),
)

_BY_NAME: Dict[str, OperationDescriptor] = {op.name: op for op in _OPERATIONS}

if len(_BY_NAME) != len(_OPERATIONS):  # pragma: no cover - import-time guard
    raise ValueError("Duplicate operation name in catalog")


def list_operations() -> Tuple[OperationDescriptor, ...]:
    """All operations, in the order they are advertised."""
    return _OPERATIONS


def get_operation(name: str) -> Optional[OperationDescriptor]:
    return _BY_NAME.get(name)


__all__ = [
    "TOOL_PREFIX",
    "OperationDescriptor",
    "list_operations",
    "get_operation",
]
