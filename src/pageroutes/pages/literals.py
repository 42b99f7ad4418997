"""Restricted evaluation of JavaScript literal expressions.

Walks a tree-sitter expression node and builds the equivalent Python
value.  Only plain data is understood: strings, numbers, booleans,
``null``/``undefined``, arrays, and object literals.  Anything that would
require running code (identifiers, calls, spreads, template
substitutions, computed keys) is rejected with
:class:`UnsupportedExpressionError`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tree_sitter import Node

# Single-character JS escapes; everything else escapes to itself
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_UNICODE_ESCAPE_RE = re.compile(r"\\u\{([0-9a-fA-F]+)\}|\\u([0-9a-fA-F]{4})|\\x([0-9a-fA-F]{2})")

# Wrappers that only carry type information
_TYPE_WRAPPERS = frozenset({"as_expression", "satisfies_expression", "non_null_expression"})


class UnsupportedExpressionError(ValueError):
    """Raised when an expression is not a plain literal."""


def evaluate_literal(node: Node) -> Any:
    """Evaluate a literal expression node to a Python value.

    Raises:
        UnsupportedExpressionError: The node is not plain data.
    """
    match node.type:
        case "object":
            return _evaluate_object(node)
        case "array":
            return [evaluate_literal(child) for child in _elements(node)]
        case "string":
            return _string_value(node)
        case "template_string":
            return _template_value(node)
        case "number":
            return _number_value(_text(node))
        case "true":
            return True
        case "false":
            return False
        case "null" | "undefined":
            return None
        case "parenthesized_expression":
            inner = _elements(node)
            if len(inner) != 1:
                raise UnsupportedExpressionError(_text(node))
            return evaluate_literal(inner[0])
        case "unary_expression":
            return _evaluate_unary(node)
        case kind if kind in _TYPE_WRAPPERS:
            return evaluate_literal(_elements(node)[0])
        case _:
            msg = f"Unsupported expression {node.type}: {_text(node)!r}"
            raise UnsupportedExpressionError(msg)


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _elements(node: Node) -> list[Node]:
    """Named children with comments removed."""
    return [child for child in node.named_children if child.type != "comment"]


def _evaluate_object(node: Node) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for child in _elements(node):
        if child.type != "pair":
            msg = f"Unsupported object member {child.type}: {_text(child)!r}"
            raise UnsupportedExpressionError(msg)
        key_node = child.child_by_field_name("key")
        value_node = child.child_by_field_name("value")
        if key_node is None or value_node is None:
            raise UnsupportedExpressionError(_text(child))
        result[_key_name(key_node)] = evaluate_literal(value_node)
    return result


def _key_name(node: Node) -> str:
    match node.type:
        case "property_identifier":
            return _text(node)
        case "string":
            return _string_value(node)
        case "number":
            value = _number_value(_text(node))
            return _js_number_string(value)
        case _:
            msg = f"Unsupported object key {node.type}: {_text(node)!r}"
            raise UnsupportedExpressionError(msg)


def _evaluate_unary(node: Node) -> int | float:
    operator = node.child_by_field_name("operator")
    argument = node.child_by_field_name("argument")
    if operator is None or argument is None:
        raise UnsupportedExpressionError(_text(node))
    value = evaluate_literal(argument)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise UnsupportedExpressionError(_text(node))
    match _text(operator):
        case "-":
            return -value
        case "+":
            return value
        case _:
            raise UnsupportedExpressionError(_text(node))


def _string_value(node: Node) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_unescape(_text(child)))
        elif child.type != "comment":
            raise UnsupportedExpressionError(_text(node))
    return "".join(parts)


def _template_value(node: Node) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_unescape(_text(child)))
        else:
            # ${...} substitutions need evaluation
            msg = f"Template substitution is not a literal: {_text(node)!r}"
            raise UnsupportedExpressionError(msg)
    if not parts and len(_text(node)) > 2:
        # Grammars without string_fragment expose the text only through the span
        return _text(node)[1:-1]
    return "".join(parts)


def _unescape(seq: str) -> str:
    """Decode one JavaScript escape sequence such as ``\\n`` or ``\\u{1F600}``."""
    match = _UNICODE_ESCAPE_RE.fullmatch(seq)
    if match:
        digits = match.group(1) or match.group(2) or match.group(3)
        return chr(int(digits, 16))
    if seq.startswith("\\") and len(seq) >= 2:
        body = seq[1:]
        if body[0] in "\r\n\u2028\u2029":
            # Line continuation
            return ""
        return _SIMPLE_ESCAPES.get(body, body)
    return seq


def _number_value(raw: str) -> int | float:
    text = raw.replace("_", "").lower()
    if text.endswith("n"):
        # BigInt literal
        text = text[:-1]
    try:
        if text.startswith("0x"):
            return int(text[2:], 16)
        if text.startswith("0o"):
            return int(text[2:], 8)
        if text.startswith("0b"):
            return int(text[2:], 2)
        if text.isdigit():
            return int(text)
        return float(text)
    except ValueError as exc:
        raise UnsupportedExpressionError(raw) from exc


def _js_number_string(value: int | float) -> str:
    """Format a numeric object key the way JavaScript stringifies it."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
