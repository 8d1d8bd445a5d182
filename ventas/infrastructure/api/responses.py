from __future__ import annotations

from typing import Any

import httpx


def read_body(response: httpx.Response) -> Any:
    """Decoded JSON body when there is one, raw text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(body: Any, default: str) -> str:
    if isinstance(body, dict):
        for key in ("detail", "message", "error"):
            value = body.get(key)
            if value:
                return str(value)
    if isinstance(body, str) and body.strip():
        return body.strip()
    return default


def normalize_list(body: Any) -> list[dict[str, Any]] | None:
    """Accept either a bare array or a paginated {"results": [...]} envelope."""
    if isinstance(body, list):
        return body
    if isinstance(body, dict) and isinstance(body.get("results"), list):
        return body["results"]
    return None
