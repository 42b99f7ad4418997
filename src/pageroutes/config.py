"""Router configuration.

Options controlling where pages are discovered and how the route
module is rendered, validated once when the config is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from pageroutes.errors import ConfigurationError

# History modes accepted by the router, mapped to vue-router factories
HISTORY_FACTORIES: dict[str, str] = {
    "history": "createWebHistory",
    "hash": "createWebHashHistory",
    "memory": "createMemoryHistory",
}


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(pages_dir="app/pages", mode="history")

    A non-empty ``routes`` tuple replaces filesystem discovery entirely.
    """

    # Discovery
    pages_dir: str | Path = "src/pages"
    extensions: tuple[str, ...] = (".vue", ".jsx", ".tsx")
    reserved_dirs: tuple[str, ...] = ("components",)

    # User-supplied routes (full override, not merged)
    routes: tuple[Any, ...] = ()

    # Router runtime
    mode: str = "hash"
    base: str = ""

    # Rendering
    dynamic_import: bool = False

    def __post_init__(self) -> None:
        if self.mode not in HISTORY_FACTORIES:
            allowed = ", ".join(sorted(HISTORY_FACTORIES))
            msg = f"Unknown router mode {self.mode!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
        if not isinstance(self.routes, tuple):
            object.__setattr__(self, "routes", tuple(self.routes))
        for index, route in enumerate(self.routes):
            if not isinstance(route, Mapping):
                msg = f"router.routes[{index}] must be a mapping, got {type(route).__name__}"
                raise ConfigurationError(msg)

    @property
    def history_factory(self) -> str:
        """Name of the vue-router history factory for ``mode``."""
        return HISTORY_FACTORIES[self.mode]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RouterConfig:
        """Build a config from a plain mapping (e.g. a parsed JSON file).

        Accepts either the router options directly or nested under a
        ``"router"`` key, in which case sibling keys are ignored.
        Unknown router options are rejected.
        """
        if isinstance(data.get("router"), Mapping):
            data = data["router"]

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown router option(s): {', '.join(unknown)}"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = dict(data)
        routes = kwargs.get("routes")
        if routes is not None:
            if not isinstance(routes, list | tuple):
                msg = f"router.routes must be a list, got {type(routes).__name__}"
                raise ConfigurationError(msg)
            kwargs["routes"] = tuple(routes)
        for key in ("extensions", "reserved_dirs"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        return cls(**kwargs)
