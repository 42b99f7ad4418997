"""Turn a route tree into loadable JavaScript.

``routes_to_js`` needs nothing beyond the standard library.  Rendering
the full ``routes.js`` module uses kida::

    pip install pageroutes[render]
"""

from pageroutes.render.errors import RenderError, RenderNotInstalledError
from pageroutes.render.module import render_routes_module, write_routes_module
from pageroutes.render.serialize import component_expression, is_function_component, routes_to_js

__all__ = [
    "RenderError",
    "RenderNotInstalledError",
    "component_expression",
    "is_function_component",
    "render_routes_module",
    "routes_to_js",
    "write_routes_module",
]
