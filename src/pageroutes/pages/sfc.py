"""Top-level block sectioning for ``.vue`` single-file components.

Only the outermost blocks matter for route metadata: the primary
``<script>``, the ``<script setup>`` variant, and custom blocks such as
``<config>``.  The file is parsed with tree-sitter's vue grammar and
block contents are sliced verbatim between the opening and closing
tags; nothing inside them is interpreted here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pageroutes.pages._parsers import get_parser

if TYPE_CHECKING:
    from tree_sitter import Node

# Top-level node types holding a block; anything else (comments, text) is skipped
_BLOCK_NODES = frozenset({"template_element", "script_element", "style_element", "element"})

# Standard blocks that are never reported as custom blocks
_STANDARD_BLOCKS = frozenset({"template", "script", "style"})


@dataclass(frozen=True, slots=True)
class SFCBlock:
    """A top-level block of a single-file component.

    Attributes:
        type: Tag name (``"script"``, ``"config"``, ...).
        content: Raw text between the opening and closing tags.
        attrs: Attributes of the opening tag.  Valueless attributes
            such as ``setup`` map to ``True``.
    """

    type: str
    content: str
    attrs: dict[str, str | bool] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SFCDescriptor:
    """Sectioned view of a ``.vue`` file."""

    script: SFCBlock | None = None
    script_setup: SFCBlock | None = None
    custom_blocks: tuple[SFCBlock, ...] = ()

    def find_custom_block(self, block_type: str) -> SFCBlock | None:
        """Return the first custom block of *block_type*, if any."""
        for block in self.custom_blocks:
            if block.type == block_type:
                return block
        return None


def parse_sfc(source: str) -> SFCDescriptor:
    """Split *source* into its top-level blocks.

    Blocks without both an opening and a closing tag (self-closing or
    unterminated) carry no content and are left out.
    """
    data = source.encode("utf-8")
    root = get_parser("vue").parse(data).root_node

    script: SFCBlock | None = None
    script_setup: SFCBlock | None = None
    custom: list[SFCBlock] = []

    for node in root.named_children:
        if node.type not in _BLOCK_NODES:
            continue
        block = _read_block(node, data)
        if block is None:
            continue

        if block.type == "script":
            if block.attrs.get("setup"):
                if script_setup is None:
                    script_setup = block
            elif script is None:
                script = block
        elif block.type not in _STANDARD_BLOCKS:
            custom.append(block)

    return SFCDescriptor(script=script, script_setup=script_setup, custom_blocks=tuple(custom))


def _child(node: Node, node_type: str) -> Node | None:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _read_block(node: Node, data: bytes) -> SFCBlock | None:
    start_tag = _child(node, "start_tag")
    end_tag = _child(node, "end_tag")
    if start_tag is None or end_tag is None:
        return None
    tag_name = _child(start_tag, "tag_name")
    if tag_name is None:
        return None

    content = data[start_tag.end_byte : end_tag.start_byte].decode("utf-8")
    return SFCBlock(
        type=_text(tag_name).lower(),
        content=content,
        attrs=_read_attrs(start_tag),
    )


def _read_attrs(start_tag: Node) -> dict[str, str | bool]:
    attrs: dict[str, str | bool] = {}
    for attribute in start_tag.named_children:
        if attribute.type != "attribute":
            continue
        name = _child(attribute, "attribute_name")
        if name is None:
            continue
        attrs[_text(name).lower()] = _attr_value(attribute)
    return attrs


def _attr_value(attribute: Node) -> str | bool:
    """Value of an attribute; ``True`` when it has none (``<script setup>``)."""
    value = _child(attribute, "attribute_value")
    if value is not None:
        return _text(value)
    quoted = _child(attribute, "quoted_attribute_value")
    if quoted is not None:
        inner = _child(quoted, "attribute_value")
        return _text(inner) if inner is not None else ""
    return True
