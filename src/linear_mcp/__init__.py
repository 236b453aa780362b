"""linear_mcp package exports."""

from .core import (
    AdapterResult,
    AuthenticationError,
    Dispatcher,
    InvalidArgumentsError,
    InvocationResult,
    LinearAdapter,
    LinearClient,
    LinearClientError,
    LinearGraphQLError,
    LinearHTTPError,
    LinearParseError,
    OperationError,
    UnknownOperationError,
    UpstreamError,
    list_operations,
)
from .server import build_server
from .transports.stdio.main import run as run_server

__version__ = "0.1.0"

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
    # Dispatch
    "AdapterResult",
    "LinearAdapter",
    "Dispatcher",
    "InvocationResult",
    "list_operations",
    # Server utilities
    "build_server",
    "run_server",
]
