"""Shared tree-sitter parsers, created once per process."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_sitter import Parser


@lru_cache(maxsize=None)
def get_parser(language: str) -> Parser:
    """Return the bundled tree-sitter parser for *language* (``"tsx"``, ``"vue"``)."""
    from tree_sitter_language_pack import get_parser as _load

    return _load(language)
