"""pageroutes — Convention-based route tables from a pages directory.

Maps a tree of ``.vue``/``.jsx``/``.tsx`` page files to an ordered,
nested route table for a client-side router: index files, ``@param``
dynamic segments, ``*`` catch-alls, layout wrapping, and metadata
declared in the page source.

Basic usage::

    from pageroutes import RouterConfig, get_routes

    routes = get_routes(RouterConfig(pages_dir="src/pages"))

Rendering the ``routes.js`` module (``pip install pageroutes[render]``)::

    from pageroutes.render import render_routes_module
    source = render_routes_module(routes, config)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "LayoutNode",
    "PageNode",
    "PageRoutesError",
    "PagesDirectoryError",
    "RouteNode",
    "RouterConfig",
    "discover_routes",
    "get_routes",
    "rank_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pageroutes`` fast while providing a clean top-level API.
    """
    if name == "RouterConfig":
        from pageroutes.config import RouterConfig

        return RouterConfig

    if name == "get_routes":
        from pageroutes.routes import get_routes

        return get_routes

    if name in ("discover_routes", "rank_routes"):
        from pageroutes import pages as _pages

        return getattr(_pages, name)

    if name in ("LayoutNode", "PageNode", "RouteNode"):
        from pageroutes.pages import types as _types

        return getattr(_types, name)

    if name in ("ConfigurationError", "PageRoutesError", "PagesDirectoryError"):
        from pageroutes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
