from __future__ import annotations

from typing import Any

from ventas.application.exceptions import ServerRejected, SessionExpired, ValidationError

GENERIC_FAILURE = "Could not register the sale. Check the connection and try again."
SESSION_FAILURE = "Your session has expired. Log in again to submit the sale."


def describe_failure(error: Exception) -> tuple[str, dict[str, Any] | None]:
    """
    User-facing message plus the backend's field errors, when it sent any.
    Field errors are passed through exactly as received.
    """
    if isinstance(error, ValidationError):
        return str(error), None
    if isinstance(error, SessionExpired):
        return SESSION_FAILURE, None
    if isinstance(error, ServerRejected) and error.field_errors:
        return _flatten(error.field_errors), error.field_errors
    return GENERIC_FAILURE, None


def _flatten(errors: dict[str, Any]) -> str:
    parts = []
    for field, messages in errors.items():
        if isinstance(messages, list):
            messages = " ".join(str(m) for m in messages)
        parts.append(f"{field}: {messages}")
    return "; ".join(parts)
