"""
Typed request models, one per operation.

Argument bags arrive as untyped JSON objects. Each operation decodes its bag
into one of these models exactly once, at the dispatch boundary; handlers only
ever see the typed request. Required fields get a presence check only: any
truthy value is accepted and forwarded as given. Optional search and paging
fields fall back to their defaults when the value has the wrong shape, and the
free-form issue fields are passed through to Linear untouched.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .errors import InvalidArgumentsError

DEFAULT_PAGE_SIZE = 50

Number = Union[int, float]

R = TypeVar("R", bound="OperationRequest")


class OperationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Operation kind; the advertised name is the prefix plus this.
    kind: ClassVar[str]


def _page_size(value: Any) -> Number:
    # bool is an int subclass but never a page size
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return DEFAULT_PAGE_SIZE


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _required(value: Any) -> Any:
    if not value:
        raise PydanticCustomError("missing_argument", "Field required")
    return value


class GetTeamsRequest(OperationRequest):
    kind: ClassVar[str] = "get_teams"


class SearchIssuesRequest(OperationRequest):
    kind: ClassVar[str] = "search_issues"

    query: Optional[str] = None
    team_ids: Optional[List[Any]] = Field(default=None, alias="teamIds")
    first: Number = DEFAULT_PAGE_SIZE

    @field_validator("query", mode="before")
    @classmethod
    def drop_non_string_query(cls, value: Any) -> Optional[str]:
        return _string_or_none(value)

    @field_validator("team_ids", mode="before")
    @classmethod
    def drop_non_list_team_ids(cls, value: Any) -> Optional[List[Any]]:
        return value if isinstance(value, list) else None

    @field_validator("first", mode="before")
    @classmethod
    def default_first(cls, value: Any) -> Number:
        return _page_size(value)

    def to_filter(self) -> Dict[str, Any]:
        """Linear IssueFilter; case-insensitive text match on title or description."""
        issue_filter: Dict[str, Any] = {}
        if self.query:
            issue_filter["or"] = [
                {"title": {"containsIgnoreCase": self.query}},
                {"description": {"containsIgnoreCase": self.query}},
            ]
        if self.team_ids is not None:
            issue_filter["team"] = {"id": {"in": list(self.team_ids)}}
        return issue_filter


class GetCyclesRequest(OperationRequest):
    kind: ClassVar[str] = "get_cycles"

    team_id: Any = Field(alias="teamId")

    @field_validator("team_id", mode="before")
    @classmethod
    def require_team_id(cls, value: Any) -> Any:
        return _required(value)


class GetProjectsRequest(OperationRequest):
    kind: ClassVar[str] = "get_projects"

    team_id: Optional[str] = Field(default=None, alias="teamId")
    first: Number = DEFAULT_PAGE_SIZE

    @field_validator("team_id", mode="before")
    @classmethod
    def drop_non_string_team_id(cls, value: Any) -> Optional[str]:
        return _string_or_none(value)

    @field_validator("first", mode="before")
    @classmethod
    def default_first(cls, value: Any) -> Number:
        return _page_size(value)


class _IssueFields(OperationRequest):
    description: Any = None
    assignee_id: Any = Field(default=None, alias="assigneeId")
    state_id: Any = Field(default=None, alias="stateId")
    priority: Any = None
    estimate: Any = None
    cycle_id: Any = Field(default=None, alias="cycleId")
    project_id: Any = Field(default=None, alias="projectId")
    label_ids: Any = Field(default=None, alias="labelIds")

    def to_input(self) -> Dict[str, Any]:
        """Only the fields that were provided; null and empty strings are omitted."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: value for key, value in data.items() if value != ""}


class CreateIssueRequest(_IssueFields):
    kind: ClassVar[str] = "create_issue"

    team_id: Any = Field(alias="teamId")
    title: Any

    @field_validator("team_id", "title", mode="before")
    @classmethod
    def require_present(cls, value: Any) -> Any:
        return _required(value)


class UpdateIssueRequest(_IssueFields):
    kind: ClassVar[str] = "update_issue"

    issue_id: Any = Field(alias="issueId", exclude=True)
    title: Any = None

    @field_validator("issue_id", mode="before")
    @classmethod
    def require_issue_id(cls, value: Any) -> Any:
        return _required(value)

REQUEST_MODELS: tuple[Type[OperationRequest], ...] = (
    GetTeamsRequest,
    SearchIssuesRequest,
    GetCyclesRequest,
    GetProjectsRequest,
    CreateIssueRequest,
    UpdateIssueRequest,
)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def decode_request(model: Type[R], arguments: Optional[Mapping[str, Any]]) -> R:
    """Decode an untyped argument bag into ``model`` or raise InvalidArgumentsError."""
    try:
        return model.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        missing: List[str] = []
        invalid: List[str] = []
        for err in exc.errors():
            name = _field_name(err.get("loc", ()))
            # Falsy values fail the presence check like absent keys do.
            if err.get("type") in {"missing", "missing_argument"}:
                missing.append(name)
            else:
                invalid.append(f"{name}: {err.get('msg')}")

        parts: List[str] = []
        if missing:
            parts.append(f"missing required argument(s): {', '.join(missing)}")
        if invalid:
            parts.append(f"invalid argument(s): {'; '.join(invalid)}")
        raise InvalidArgumentsError(
            "; ".join(parts) or str(exc), missing=missing
        ) from exc


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "OperationRequest",
    "GetTeamsRequest",
    "SearchIssuesRequest",
    "GetCyclesRequest",
    "GetProjectsRequest",
    "CreateIssueRequest",
    "UpdateIssueRequest",
    "REQUEST_MODELS",
    "decode_request",
]
