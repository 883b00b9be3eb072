"""PathMatch - Route template matching.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

PathMatch resolves a request path against an ordered list of route
templates and extracts named parameters:

- Literal segments match verbatim: /users/me
- Parameter segments bind any value: /users/:id
- Custom parameter identifier: /users/$id
- First match in registration order wins

Request Flow:
1. extract_pathname() turns a request URL into a path
2. match() scans templates in order
3. First template whose segments all match wins
4. Parameter segments are returned as a dict

Usage:
    from pathmatch_core import Router, match

    result = match("/users/42", ["/users/me", "/users/:id"])
    result.match   # "/users/:id"
    result.params  # {"id": "42"}

    router = Router()
    router.add("/orders/:order/items/:item", handler=get_item)
    route, params = router.match_url("/orders/7/items/3?full=1", host="shop.local")
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Routing
from pathmatch_core.routing.matcher import (
    DEFAULT_PARAMETER_IDENTIFIER,
    MatchResult,
    PathMatcher,
    match,
)
from pathmatch_core.routing.router import Router, Route

# Utils
from pathmatch_core.utils.config import Config, load_config
from pathmatch_core.utils.helpers import extract_pathname, trim_separators
from pathmatch_core.utils.log import configure_logging

__all__ = [
    # Version
    "__version__",
    # Routing
    "DEFAULT_PARAMETER_IDENTIFIER",
    "MatchResult",
    "PathMatcher",
    "match",
    "Router",
    "Route",
    # Utils
    "Config",
    "load_config",
    "extract_pathname",
    "trim_separators",
    "configure_logging",
]
