"""Route table assembly.

User-configured routes take precedence over the filesystem: a non-empty
``RouterConfig.routes`` is returned as-is and no directory is read.
"""

from typing import Any

from pageroutes.config import RouterConfig
from pageroutes.pages.discovery import discover_routes
from pageroutes.pages.rank import rank_routes
from pageroutes.pages.types import RouteNode


def get_routes(config: RouterConfig) -> list[RouteNode] | list[Any]:
    """Return the ordered route table for *config*.

    Builds a fresh tree on every call; nothing is cached between calls.
    """
    if config.routes:
        return list(config.routes)

    routes = discover_routes(
        config.pages_dir,
        extensions=config.extensions,
        reserved_dirs=config.reserved_dirs,
    )
    return rank_routes(routes)
