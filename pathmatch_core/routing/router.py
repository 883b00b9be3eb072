"""Router - Ordered route registry.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from pathmatch_core.routing.matcher import PathMatcher
from pathmatch_core.utils.config import Config
from pathmatch_core.utils.helpers import extract_pathname

logger = logging.getLogger(__name__)


@dataclass
class Route:
    """Route definition."""

    template: str
    handler: Optional[Callable] = None
    name: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class Router:
    """Request Router.

    Routes are tried in registration order; the first template that matches
    wins. There is no priority or specificity ranking.

    Usage:
        router = Router()
        router.add("/users/:id", handler=get_user)
        router.add("/users/me", handler=get_me)

        found = router.match("/users/123")
        if found:
            route, params = found
    """

    def __init__(
        self,
        parameter_identifier: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        if parameter_identifier is None:
            parameter_identifier = self.config.parameter_identifier
        self._matcher = PathMatcher(parameter_identifier)
        self._routes: List[Route] = []
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: Config) -> "Router":
        """Create a router using the configured identifier, host and protocol."""
        return cls(config=config)

    @property
    def parameter_identifier(self) -> str:
        return self._matcher.parameter_identifier

    @property
    def templates(self) -> List[str]:
        """Registered templates, in match order."""
        with self._lock:
            return [route.template for route in self._routes]

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)

    def add(
        self,
        template: str,
        handler: Optional[Callable] = None,
        name: str = "",
        **kwargs,
    ) -> "Router":
        """Add a route.

        Args:
            template: Path template
            handler: Request handler function
            name: Route name
        """
        route = Route(
            template=template,
            handler=handler,
            name=name,
            metadata=kwargs,
        )

        with self._lock:
            self._routes.append(route)

        logger.debug(f"Route added: {template} ({name or 'unnamed'})")
        return self

    def remove(self, name: str) -> bool:
        """Remove a route by name."""
        with self._lock:
            for i, route in enumerate(self._routes):
                if route.name == name:
                    self._routes.pop(i)
                    logger.debug(f"Route removed: {route.template} ({name})")
                    return True
        return False

    def get_routes(self) -> List[Route]:
        """Get all routes."""
        with self._lock:
            return self._routes.copy()

    def match(self, path: str) -> Optional[Tuple[Route, Dict[str, str]]]:
        """Match a path to a route.

        Returns:
            Tuple of (route, params) if match, None otherwise
        """
        routes = self.get_routes()
        result = self._matcher.match(path, [route.template for route in routes])
        if not result:
            return None

        # Same template may be registered twice; the earliest one won
        for route in routes:
            if route.template == result.match:
                return route, result.params

        return None

    def match_url(
        self,
        url: str,
        host: Optional[str] = None,
        protocol: Optional[str] = None,
    ) -> Optional[Tuple[Route, Dict[str, str]]]:
        """Match a full or relative URL to a route.

        Relative URLs resolve against the configured host and protocol
        unless overridden.
        """
        host = self.config.host if host is None else host
        protocol = self.config.protocol if protocol is None else protocol
        return self.match(extract_pathname(host, url, protocol))


__all__ = [
    "Router",
    "Route",
]
