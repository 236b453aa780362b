from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .adapter import AdapterResult, IssueTrackerAdapter
from .catalog import OperationDescriptor, list_operations
from .errors import (
    InvalidArgumentsError,
    OperationError,
    UnknownOperationError,
    UpstreamError,
)
from .models import decode_request
from .observability import log_event, result_size

log = logging.getLogger("linear_mcp.core.dispatcher")


@dataclass(frozen=True)
class InvocationResult:
    """Success carries the serialized payload text; failure carries the error."""

    text: Optional[str] = None
    error: Optional[OperationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "InvocationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: OperationError) -> "InvocationResult":
        return cls(error=error)


def serialize_payload(result_key: str, payload: Any) -> str:
    return json.dumps({result_key: payload}, indent=2, default=str)


class Dispatcher:
    """
    Route invocations by operation name to their handlers.

    The adapter is passed in explicitly so tests can substitute a fake.
    ``invoke`` never raises: every outcome is an InvocationResult.
    """

    def __init__(
        self,
        adapter: IssueTrackerAdapter,
        operations: Optional[Iterable[OperationDescriptor]] = None,
    ):
        self.adapter = adapter
        ops = tuple(operations) if operations is not None else list_operations()
        self._operations: Dict[str, OperationDescriptor] = {op.name: op for op in ops}
        self._ordered: Tuple[OperationDescriptor, ...] = ops

    def list_operations(self) -> Tuple[OperationDescriptor, ...]:
        return self._ordered

    async def invoke(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> InvocationResult:
        descriptor = self._operations.get(name)
        if descriptor is None:
            error = UnknownOperationError(f"Unknown tool: {name}")
            log_event("op_result", tool=name, status="error", kind=error.kind)
            return InvocationResult.failure(error)

        try:
            request = decode_request(descriptor.request_model, arguments)
        except InvalidArgumentsError as exc:
            error = InvalidArgumentsError(
                f"Failed to {descriptor.action}: {exc.message}", missing=exc.missing
            )
            log_event("op_result", tool=name, status="error", kind=error.kind)
            return InvocationResult.failure(error)

        log_event("op_invoke", tool=name)
        start = time.perf_counter()
        try:
            result: AdapterResult = await descriptor.handler(self.adapter, request)
        except Exception as exc:
            log.exception("Unhandled error in %s", name)
            result = AdapterResult.failure(str(exc) or type(exc).__name__)
        duration_ms = int((time.perf_counter() - start) * 1000)

        if not result.ok:
            error = UpstreamError(f"Failed to {descriptor.action}: {result.error}")
            log_event(
                "op_result",
                level=logging.WARNING,
                tool=name,
                status="error",
                kind=error.kind,
                duration_ms=duration_ms,
            )
            return InvocationResult.failure(error)

        log_event(
            "op_result",
            tool=name,
            status="ok",
            count=result_size(result.payload),
            duration_ms=duration_ms,
        )
        return InvocationResult.success(
            serialize_payload(descriptor.result_key, result.payload)
        )


__all__ = ["Dispatcher", "InvocationResult", "serialize_payload"]
