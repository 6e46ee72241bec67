"""
===============================================================================
CRC CARD: user_directory/context.py (Per-call context)
===============================================================================

Responsibilities:
  - Keep call-scoped context in ContextVars (thread- and async-safe).
  - Correlate log lines without threading parameters through the stack.
  - Provide minimal helpers: set_request_context(), operation_scope(),
    get_context_dict(), clear_context().

Collaborators:
  - crosscutting.logger: enriches records with get_context_dict().
  - application.user_service: tags each operation with operation_scope().
  - Callers (web layer, scripts): set request_id per incoming call.

Constraints:
  - Only primitive types (str) for safe serialization.
  - Empty defaults ("") instead of None to keep JSON simple.
===============================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Final, Iterator

# Request / job identifier supplied by the caller.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Name of the service operation currently running (e.g. "users.update").
operation_var: ContextVar[str] = ContextVar("operation", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_OPERATION: Final[str] = "operation"


def set_request_context(*, request_id: str = "") -> None:
    """
    Set the caller-provided request id.

    Rule:
      - Empty string means "not available".
    """
    request_id_var.set(request_id or "")


@contextmanager
def operation_scope(name: str) -> Iterator[None]:
    """Tag every log line emitted inside the block with the operation name."""
    token = operation_var.set(name)
    try:
        yield
    finally:
        operation_var.reset(token)


def get_context_dict() -> dict[str, str]:
    """
    Return the current context as a dict, omitting empty keys.
    """
    ctx: dict[str, str] = {}

    if val := request_id_var.get():
        ctx[_CTX_REQUEST_ID] = val
    if val := operation_var.get():
        ctx[_CTX_OPERATION] = val

    return ctx


def clear_context() -> None:
    """Reset context at the end of a request/job."""
    request_id_var.set("")
    operation_var.set("")
