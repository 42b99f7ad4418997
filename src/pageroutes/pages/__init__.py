"""Filesystem-based route discovery with layout nesting and ranking.

The ``pages/`` directory structure defines route paths, names, and
layout wrapping.

Usage::

    from pageroutes.pages import discover_routes, rank_routes

    routes = rank_routes(discover_routes("src/pages"))

Conventions:

    pages/
      layout.vue          # Wraps every route below
      index.vue           # /
      *.vue               # /:pathMatch(.*)
      a.vue               # /a
      b/
        index.vue         # /b
        @id.vue           # /b/:id
        c.vue             # /b/c
      components/         # Shared code, never routed
"""

from pageroutes.pages.conventions import CATCH_ALL, route_name, route_path
from pageroutes.pages.discovery import discover_routes
from pageroutes.pages.meta import extract_route_meta, read_route_meta
from pageroutes.pages.rank import rank_routes, rank_score
from pageroutes.pages.sfc import SFCBlock, SFCDescriptor, parse_sfc
from pageroutes.pages.types import LayoutNode, PageNode, RouteNode

__all__ = [
    "CATCH_ALL",
    "LayoutNode",
    "PageNode",
    "RouteNode",
    "SFCBlock",
    "SFCDescriptor",
    "discover_routes",
    "extract_route_meta",
    "parse_sfc",
    "rank_routes",
    "rank_score",
    "read_route_meta",
    "route_name",
    "route_path",
]
