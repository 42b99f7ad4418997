"""Route metadata embedded in page source files.

Pages declare metadata in one of two ways::

    <config>
    { "name": "home", "title": "Home" }
    </config>

    <script>
    defineRouteMeta({ name: "home", title: "Home" })
    </script>

A ``defineRouteMeta()`` call in ``<script>`` replaces a ``<config>``
block; ``<script setup>`` is only consulted when neither produced
anything.  ``.jsx`` and ``.tsx`` pages are searched as a whole.

A broken declaration never stops a page from being routed: extraction
failures yield no metadata.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pageroutes.pages._parsers import get_parser
from pageroutes.pages.literals import UnsupportedExpressionError, evaluate_literal
from pageroutes.pages.sfc import parse_sfc

if TYPE_CHECKING:
    from tree_sitter import Node

logger = logging.getLogger("pageroutes.meta")

# Name of the call that declares route metadata in a script
META_FUNCTION = "defineRouteMeta"

# Custom block holding JSON metadata in .vue files
CONFIG_BLOCK = "config"

SFC_EXTENSIONS = frozenset({".vue"})
SCRIPT_EXTENSIONS = frozenset({".jsx", ".tsx"})


def extract_route_meta(source: str) -> dict[str, Any] | None:
    """Find ``defineRouteMeta({...})`` in *source* and evaluate its argument.

    Only top-level expression statements are considered.  The argument
    must be a literal object; it is evaluated without running any code.

    Returns:
        The metadata mapping, or ``None`` when the source does not parse,
        has no declaration, or the argument is not a plain object literal.
    """
    # The TSX grammar accepts plain JS, JSX and TypeScript alike
    tree = get_parser("tsx").parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        return None

    call = _find_meta_call(root)
    if call is None:
        return None

    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    args = [child for child in arguments.named_children if child.type != "comment"]
    if not args:
        return None

    try:
        value = evaluate_literal(args[0])
    except UnsupportedExpressionError:
        return None
    if not isinstance(value, dict):
        return None
    return value


def _find_meta_call(root: Node) -> Node | None:
    for statement in root.named_children:
        if statement.type != "expression_statement":
            continue
        expression = statement.named_children[0] if statement.named_children else None
        if expression is None or expression.type != "call_expression":
            continue
        callee = expression.child_by_field_name("function")
        if callee is not None and callee.type == "identifier" and callee.text == META_FUNCTION.encode():
            return expression
    return None


def _parse_config_block(content: str, path: Path) -> dict[str, Any]:
    """Parse a ``<config>`` block; malformed JSON is logged and ignored.

    Only a block with no content at all is silently empty; whitespace
    is not valid JSON and is reported like any other malformed block.
    """
    if not content:
        return {}
    try:
        value = json.loads(content)
    except json.JSONDecodeError:
        value = None
    if not isinstance(value, dict):
        logger.warning("config: %s must be a JSON object (in %s)", content.strip(), path)
        return {}
    return value


def read_route_meta(path: str | Path, content: str) -> dict[str, Any]:
    """Resolve the metadata of one page file from its *content*.

    Args:
        path: Page file path; only its suffix is used, plus logging.
        content: The file's text.

    Returns:
        The page metadata, ``{}`` when none is declared.
    """
    path = Path(path)
    suffix = path.suffix

    if suffix in SCRIPT_EXTENSIONS:
        return extract_route_meta(content) or {}

    if suffix not in SFC_EXTENSIONS:
        return {}

    descriptor = parse_sfc(content)
    meta: dict[str, Any] = {}

    block = descriptor.find_custom_block(CONFIG_BLOCK)
    if block is not None:
        meta = _parse_config_block(block.content, path)

    if descriptor.script is not None:
        found = extract_route_meta(descriptor.script.content)
        if found is not None:
            meta = found

    # <script> wins when both script kinds are present
    if descriptor.script_setup is not None and not meta:
        found = extract_route_meta(descriptor.script_setup.content)
        if found is not None:
            meta = found

    return meta
