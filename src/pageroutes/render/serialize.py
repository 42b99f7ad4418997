"""Serialize a route tree into a JavaScript array literal.

Route data is emitted as JSON except for ``component`` values, which
become code::

    "component": () => import('/abs/pages/a.vue')       # dynamic_import
    "component": require('/abs/pages/a.vue').default    # default

Components that are already function source (``() => ...`` or
``function (...) {...}``) are emitted unchanged.
"""

from __future__ import annotations

import copy
import json
import re
from collections.abc import Sequence
from typing import Any

from pageroutes.pages.types import LayoutNode, PageNode

_ARROW_FN_RE = re.compile(r"^\((.+)?\)(\s+)?=>")
_FUNCTION_RE = re.compile(r"^function([^(]+)?\(([^)]+)?\)([^{]+)?{")

# Placeholder emitted by json.dumps in place of each component
_PLACEHOLDER = "__pageroutes_component_{}__"


def is_function_component(component: str) -> bool:
    """True when *component* is JavaScript function source, not a file location."""
    return bool(_ARROW_FN_RE.match(component) or _FUNCTION_RE.match(component))


def component_expression(component: str, *, dynamic_import: bool = False) -> str:
    """JavaScript expression that loads *component*."""
    if is_function_component(component):
        return component.replace("\\r\\n", "\r\n").replace("\\n", "\r\n")
    location = component.replace("\\", "/").replace("'", "\\'")
    if dynamic_import:
        return f"() => import('{location}')"
    return f"require('{location}').default"


def _to_plain(route: Any) -> dict[str, Any]:
    if isinstance(route, PageNode | LayoutNode):
        return route.to_dict()
    return copy.deepcopy(route)


def routes_to_js(routes: Sequence[Any], *, dynamic_import: bool = False) -> str:
    """Render *routes* as a JavaScript array literal.

    Args:
        routes: Route nodes, or plain route mappings from user config.
        dynamic_import: Emit lazy ``import()`` thunks instead of ``require``.

    Returns:
        Source text of the array, indented by two spaces.
    """
    plain = [_to_plain(route) for route in routes]
    expressions: list[str] = []

    def swap_components(node: Any) -> None:
        if isinstance(node, list):
            for item in node:
                swap_components(item)
            return
        if not isinstance(node, dict):
            return
        component = node.get("component")
        if isinstance(component, str):
            node["component"] = _PLACEHOLDER.format(len(expressions))
            expressions.append(component_expression(component, dynamic_import=dynamic_import))
        swap_components(node.get("children"))

    swap_components(plain)
    text = json.dumps(plain, indent=2, ensure_ascii=False)
    for index, expression in enumerate(expressions):
        text = text.replace(json.dumps(_PLACEHOLDER.format(index)), expression, 1)
    return text
