from __future__ import annotations

import logging
from typing import Any, Dict, Optional

RESERVED_LOG_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Minimal structured logging helper.
    - Passes fields via ``extra`` so the logfmt formatter can render them.
    - Drops reserved LogRecord attributes to avoid collisions.
    """
    log = logger or logging.getLogger("linear_mcp.observability")
    log.log(level, event, extra=_clean_fields(fields))


def result_size(payload: Any) -> Optional[int]:
    """
    Best-effort size of an upstream payload for logging.
    Connections report their node count; other dicts report their key count.
    """
    if isinstance(payload, list):
        return len(payload)
    if not isinstance(payload, dict):
        return None
    nodes = payload.get("nodes")
    if isinstance(nodes, list):
        return len(nodes)
    return len(payload)


__all__ = ["log_event", "result_size"]
