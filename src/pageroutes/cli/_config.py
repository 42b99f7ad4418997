"""Build a RouterConfig from CLI arguments and an optional JSON file."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pageroutes.config import RouterConfig
from pageroutes.errors import ConfigurationError

# CLI flags that override values from --config when given
_OVERRIDES = ("mode", "base", "dynamic_import")


def load_config(args: argparse.Namespace) -> RouterConfig:
    """Resolve router options, exiting with status 1 on invalid input.

    Precedence: command-line flags, then the ``--config`` file, then
    ``RouterConfig`` defaults.  ``pages_dir`` always comes from the
    positional argument.
    """
    data: dict[str, Any] = {}
    if args.config:
        try:
            raw = json.loads(Path(args.config).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            print(f"Error: cannot read config {args.config}: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        section = raw.get("router", raw) if isinstance(raw, dict) else None
        if not isinstance(section, dict):
            print(f"Error: config {args.config} must be a JSON object", file=sys.stderr)
            raise SystemExit(1)
        data = dict(section)

    for key in _OVERRIDES:
        value = getattr(args, key, None)
        if value is not None:
            data[key] = value
    data["pages_dir"] = args.pages_dir

    try:
        return RouterConfig.from_mapping(data)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
