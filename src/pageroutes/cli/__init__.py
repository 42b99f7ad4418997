"""pageroutes CLI — inspect and generate route tables.

Entry point registered as ``pageroutes`` in ``pyproject.toml``::

    [project.scripts]
    pageroutes = "pageroutes.cli:main"
"""

import argparse
import logging
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pages_dir", help="Pages directory to scan (e.g. src/pages)")
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with router options (top level or under a 'router' key)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pageroutes`` command."""
    parser = argparse.ArgumentParser(
        prog="pageroutes",
        description="pageroutes — Convention-based route tables from a pages directory.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="command")

    # -- pageroutes routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List discovered routes")
    _add_common(routes_parser)

    # -- pageroutes json --------------------------------------------------
    json_parser = subparsers.add_parser("json", help="Print routes as a JavaScript array")
    _add_common(json_parser)
    json_parser.add_argument(
        "--dynamic-import",
        action="store_true",
        default=None,
        help="Load components lazily with import()",
    )

    # -- pageroutes generate ----------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Write the routes.js module")
    _add_common(generate_parser)
    generate_parser.add_argument("-o", "--output", required=True, help="Output file path")
    generate_parser.add_argument(
        "--mode",
        choices=("hash", "history", "memory"),
        default=None,
        help="Router history mode (default: hash)",
    )
    generate_parser.add_argument("--base", default=None, help="Router base URL")
    generate_parser.add_argument(
        "--dynamic-import",
        action="store_true",
        default=None,
        help="Load components lazily with import()",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from pageroutes.cli._routes import run_routes

        run_routes(args)
    elif args.command == "json":
        from pageroutes.cli._routes import run_json

        run_json(args)
    elif args.command == "generate":
        from pageroutes.cli._generate import run_generate

        run_generate(args)
