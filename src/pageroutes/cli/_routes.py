"""``pageroutes routes`` and ``pageroutes json`` — inspect the route table."""

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import Any

from pageroutes.cli._config import load_config
from pageroutes.errors import PagesDirectoryError
from pageroutes.pages.types import LayoutNode, PageNode
from pageroutes.render.serialize import routes_to_js
from pageroutes.routes import get_routes


def _resolve_routes(args: argparse.Namespace) -> tuple[list[Any], bool]:
    config = load_config(args)
    try:
        routes = get_routes(config)
    except PagesDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return routes, config.dynamic_import


def _rows(routes: Sequence[Any], depth: int = 0) -> Iterator[tuple[str, str, str]]:
    indent = "  " * depth
    for route in routes:
        if isinstance(route, LayoutNode):
            yield (f"{indent}{route.path}", "(layout)", route.component or "")
            yield from _rows(route.children, depth + 1)
        elif isinstance(route, PageNode):
            yield (f"{indent}{route.path}", route.name, route.component)
        else:
            # User-configured route mapping
            yield (
                f"{indent}{route.get('path', '')}",
                str(route.get("name", "")),
                str(route.get("component", "")),
            )
            yield from _rows(route.get("children") or (), depth + 1)


def run_routes(args: argparse.Namespace) -> None:
    """List the route table for a pages directory.

    Prints PATH, NAME, and COMPONENT columns in match order, with
    layout children indented under their layout.
    """
    routes, _ = _resolve_routes(args)
    if not routes:
        print("No routes discovered.")
        return

    rows = list(_rows(routes))

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATH", "NAME", "COMPONENT"))
    sep_len = max_path + max_name + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for path, name, component in rows:
        print(fmt.format(path, name, component))


def run_json(args: argparse.Namespace) -> None:
    """Print the route table as a JavaScript array literal."""
    routes, dynamic_import = _resolve_routes(args)
    print(routes_to_js(routes, dynamic_import=dynamic_import))
