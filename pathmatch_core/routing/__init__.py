"""Routing module - Path matching and route registry."""

from pathmatch_core.routing.matcher import (
    DEFAULT_PARAMETER_IDENTIFIER,
    MatchResult,
    PathMatcher,
    match,
)
from pathmatch_core.routing.router import Router, Route

__all__ = [
    "DEFAULT_PARAMETER_IDENTIFIER",
    "MatchResult",
    "PathMatcher",
    "match",
    "Router",
    "Route",
]
