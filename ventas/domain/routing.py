from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteDecision:
    allow: bool
    redirect_to: str | None = None


ALLOW = RouteDecision(allow=True)


def is_under(path: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def decide(
    path: str,
    session_present: bool,
    login_path: str = "/",
    protected_prefix: str = "/panel",
    landing_path: str = "/panel",
) -> RouteDecision:
    if is_under(path, protected_prefix) and not session_present:
        return RouteDecision(allow=False, redirect_to=login_path)
    if path == login_path and session_present:
        return RouteDecision(allow=False, redirect_to=landing_path)
    return ALLOW
