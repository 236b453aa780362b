from linear_mcp.core import tools
from linear_mcp.core.catalog import TOOL_PREFIX, get_operation, list_operations
from linear_mcp.core.models import REQUEST_MODELS

EXPECTED_ORDER = [
    "linear_get_teams",
    "linear_search_issues",
    "linear_get_cycles",
    "linear_get_projects",
    "linear_create_issue",
    "linear_update_issue",
]


def test_catalog_order_is_fixed():
    assert [op.name for op in list_operations()] == EXPECTED_ORDER
    assert list_operations() is list_operations()


def test_names_are_unique_and_prefixed():
    names = [op.name for op in list_operations()]
    assert len(names) == len(set(names))
    assert all(name.startswith(TOOL_PREFIX) for name in names)


def test_every_operation_dispatchable_and_vice_versa():
    catalog_kinds = {op.kind for op in list_operations()}
    handler_names = set(tools.__all__)
    model_kinds = {model.kind for model in REQUEST_MODELS}

    assert catalog_kinds == handler_names == model_kinds
    for op in list_operations():
        assert get_operation(op.name) is op
        assert op.handler is getattr(tools, op.kind)
        assert op.name == TOOL_PREFIX + op.kind


def test_get_operation_unknown():
    assert get_operation("linear_delete_issue") is None
    assert get_operation("get_teams") is None


def test_required_fields():
    required = {op.kind: set(op.required) for op in list_operations()}
    assert required == {
        "get_teams": set(),
        "search_issues": set(),
        "get_cycles": {"teamId"},
        "get_projects": set(),
        "create_issue": {"teamId", "title"},
        "update_issue": {"issueId"},
    }


def test_schemas_describe_every_property():
    for op in list_operations():
        schema = op.input_schema
        assert schema["type"] == "object"
        for prop in schema.get("required", []):
            assert prop in schema["properties"]
        for name, prop in schema["properties"].items():
            assert prop.get("description"), f"{op.name}.{name} lacks a description"
            if prop["type"] == "array":
                assert prop["items"] == {"type": "string"}


def test_schema_properties_match_request_models():
    for op in list_operations():
        aliases = {
            field.alias or name for name, field in op.request_model.model_fields.items()
        }
        assert set(op.input_schema["properties"]) == aliases, op.name


def test_issue_schemas():
    create = get_operation("linear_create_issue").input_schema["properties"]
    update = get_operation("linear_update_issue").input_schema["properties"]
    optional = {
        "description",
        "assigneeId",
        "stateId",
        "priority",
        "estimate",
        "cycleId",
        "projectId",
        "labelIds",
    }
    assert set(create) == {"teamId", "title"} | optional
    assert set(update) == {"issueId", "title"} | optional
    assert create["priority"]["type"] == "number"
    assert "0" in create["priority"]["description"]
