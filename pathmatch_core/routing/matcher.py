"""Path Matcher - Segment-wise template matching.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_PARAMETER_IDENTIFIER = ":"
SEPARATOR = "/"


@dataclass
class MatchResult:
    """Result of matching a path against a list of templates.

    ``match`` is the winning template, or None when nothing matched.
    ``params`` maps parameter names to the candidate segments bound to them
    and is always empty on a miss.
    """

    match: Optional[str] = None
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def matched(self) -> bool:
        """Check if a template matched."""
        return self.match is not None

    def __bool__(self) -> bool:
        return self.matched


def match(
    path: str,
    templates: Iterable[str],
    parameter_identifier: str = DEFAULT_PARAMETER_IDENTIFIER,
) -> MatchResult:
    """Match a path against templates, first match in list order wins.

    A template matches when it equals the path exactly, or when it has the
    same number of segments and every segment is either equal to the path
    segment or starts with ``parameter_identifier``.

    Args:
        path: Candidate path (not normalized)
        templates: Ordered route templates
        parameter_identifier: Prefix marking a parameter segment

    Returns:
        MatchResult with the template and extracted params
    """
    path_segments = path.split(SEPARATOR)

    for template in templates:
        if template == path:
            logger.debug(f"Exact match: {path} -> {template}")
            return MatchResult(match=template)

        template_segments = template.split(SEPARATOR)

        # Containment, not prefix: the gate is looser than the segment check
        if (
            len(template_segments) != len(path_segments)
            or parameter_identifier not in template
        ):
            continue

        leftover = 0
        params: Dict[str, str] = {}

        for segment, value in zip(template_segments, path_segments):
            is_param = segment.startswith(parameter_identifier)

            if segment != value and not is_param:
                leftover += 1

            if is_param:
                params[segment.replace(parameter_identifier, "", 1)] = value

        if leftover == 0:
            logger.debug(f"Matched {path} -> {template} params={params}")
            return MatchResult(match=template, params=params)

    return MatchResult()


class PathMatcher:
    """Matcher bound to a parameter identifier.

    Usage:
        matcher = PathMatcher("$")
        result = matcher.match("/users/7", ["/users/$id"])
        result.params  # {"id": "7"}
    """

    def __init__(self, parameter_identifier: str = DEFAULT_PARAMETER_IDENTIFIER):
        if not parameter_identifier:
            raise ValueError("parameter_identifier must be a non-empty string")
        self.parameter_identifier = parameter_identifier

    def match(self, path: str, templates: Iterable[str]) -> MatchResult:
        """Match path against an ordered list of templates."""
        return match(path, templates, self.parameter_identifier)

    def matches(self, template: str, path: str) -> bool:
        """Check if path matches a single template."""
        return self.match(path, [template]).matched

    def extract(self, template: str, path: str) -> Optional[Dict[str, str]]:
        """Extract params from a single template, None if no match."""
        result = self.match(path, [template])
        if result:
            return result.params
        return None


__all__ = [
    "DEFAULT_PARAMETER_IDENTIFIER",
    "MatchResult",
    "PathMatcher",
    "match",
]
