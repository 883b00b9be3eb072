"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlparse

PROTOCOLS = ("http", "https")

_EDGE_SEPARATORS = re.compile(r"^/+|/+$")


def trim_separators(path: str) -> str:
    """Strip all leading and trailing slashes, keep interior ones."""
    return _EDGE_SEPARATORS.sub("", path)


def extract_pathname(host: str, url: str, protocol: str = "http") -> str:
    """Get the path component of a URL resolved against ``protocol://host``.

    Query string and fragment are dropped. Errors raised by the URL parser
    are not caught.
    """
    if protocol not in PROTOCOLS:
        raise ValueError(f"Unsupported protocol: {protocol!r}")

    resolved = urljoin(f"{protocol}://{host}", url)
    # Special schemes always have a path, "/" at minimum
    return urlparse(resolved).path or "/"


__all__ = [
    "PROTOCOLS",
    "trim_separators",
    "extract_pathname",
]
