"""Render the importable ``routes.js`` module with kida.

The module exposes the route table plus a small router lifecycle API
(``createRouter``, ``getRouter``, ``getHistory``, ``destroyRouter``) and
the ``defineRouteMeta`` marker pages call to declare metadata.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pageroutes.config import RouterConfig
from pageroutes.render.errors import RenderNotInstalledError
from pageroutes.render.serialize import routes_to_js

if TYPE_CHECKING:
    from kida import Environment

ROUTES_TEMPLATE = """\
import { createRouter as createVueRouter, {{ history_factory }} } from 'vue-router';

export function getRoutes() {
    const routes = {{ routes }};
    return routes;
}

let router = null;
let history = null;

export const createRouter = (routes = getRoutes()) => {
    if (router) {
        return router;
    }
    history = {{ history_factory }}({{ base }});
    router = createVueRouter({
        history,
        routes
    });
    return router;
};

export const getRouter = () => {
    if (!router) {
        console.warn('[pageroutes] getRouter() called before createRouter()');
    }
    return router;
};

export const getHistory = () => history;

export const destroyRouter = () => {
    router = null;
    history = null;
};

export const defineRouteMeta = (meta) => meta;
"""


def _get_environment() -> Environment:
    """Create a bare kida Environment, raising a clear error if missing."""
    try:
        from kida import Environment
    except ImportError:
        msg = (
            "pageroutes.render requires 'kida' to render the routes module. "
            "Install with: pip install pageroutes[render]"
        )
        raise RenderNotInstalledError(msg) from None

    return Environment(autoescape=False)


def render_routes_module(routes: Sequence[Any], config: RouterConfig) -> str:
    """Render the routes module source for *routes*.

    Args:
        routes: Output of :func:`pageroutes.routes.get_routes`.
        config: Supplies history ``mode``, ``base`` and ``dynamic_import``.
    """
    env = _get_environment()
    template = env.from_string(ROUTES_TEMPLATE)
    return template.render(
        {
            "history_factory": config.history_factory,
            "base": json.dumps(config.base) if config.base else "",
            "routes": routes_to_js(routes, dynamic_import=config.dynamic_import),
        }
    )


def write_routes_module(path: str | Path, routes: Sequence[Any], config: RouterConfig) -> Path:
    """Render the routes module and write it to *path*, creating parents."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_routes_module(routes, config), encoding="utf-8")
    return target
