"""Core domain surface for linear-mcp (transport-agnostic)."""

from .adapter import AdapterResult, IssueTrackerAdapter, LinearAdapter
from .catalog import (
    TOOL_PREFIX,
    OperationDescriptor,
    get_operation,
    list_operations,
)
from .client import (
    LinearClient,
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
)
from .config import (
    LinearConfig,
    MissingTokenError,
    create_client_from_env,
    load_env_config,
)
from .dispatcher import Dispatcher, InvocationResult
from .errors import (
    AuthenticationError,
    InvalidArgumentsError,
    OperationError,
    UnknownOperationError,
    UpstreamError,
)
from .logging import setup_logging

__all__ = [
    # Client
    "LinearClient",
    # Exceptions
    "LinearClientError",
    "LinearHTTPError",
    "LinearGraphQLError",
    "LinearParseError",
    "OperationError",
    "UnknownOperationError",
    "InvalidArgumentsError",
    "UpstreamError",
    "AuthenticationError",
    # Config helpers
    "LinearConfig",
    "MissingTokenError",
    "load_env_config",
    "create_client_from_env",
    # Adapter
    "AdapterResult",
    "IssueTrackerAdapter",
    "LinearAdapter",
    # Catalog / dispatch
    "TOOL_PREFIX",
    "OperationDescriptor",
    "list_operations",
    "get_operation",
    "Dispatcher",
    "InvocationResult",
    # Logging
    "setup_logging",
]
