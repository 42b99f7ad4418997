"""``pageroutes generate`` — write the routes.js module."""

import argparse
import sys

from pageroutes.cli._config import load_config
from pageroutes.errors import PagesDirectoryError
from pageroutes.render.errors import RenderNotInstalledError
from pageroutes.render.module import write_routes_module
from pageroutes.routes import get_routes


def run_generate(args: argparse.Namespace) -> None:
    """Discover routes and write the rendered module to ``args.output``."""
    config = load_config(args)
    try:
        routes = get_routes(config)
        target = write_routes_module(args.output, routes, config)
    except (PagesDirectoryError, RenderNotInstalledError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Wrote {len(routes)} top-level route(s) to {target}")
