"""Filesystem route discovery for the pages/ directory.

Walks the pages directory tree and builds the nested route tree:

- ``.vue``, ``.jsx`` and ``.tsx`` files become page routes
- ``layout.<ext>`` wraps every other route of its directory, including
  those found in subdirectories
- ``components/`` directories are skipped

A directory's own files are processed before its subdirectories, so
routes appear in discovery order until ranked.  Route paths are unique
across the whole tree: the first file to claim a path wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pageroutes.errors import PagesDirectoryError
from pageroutes.pages.conventions import route_name, route_path
from pageroutes.pages.meta import read_route_meta
from pageroutes.pages.types import LayoutNode, PageNode, RouteNode

logger = logging.getLogger("pageroutes.router")

PAGE_EXTENSIONS: tuple[str, ...] = (".vue", ".jsx", ".tsx")
RESERVED_DIRS: tuple[str, ...] = ("components",)
LAYOUT_NAME = "layout"


@dataclass(slots=True)
class _LayoutDraft:
    """Mutable layout used while its directory subtree is still being walked."""

    path: str
    component: str | None = None
    children: list[_Draft] = field(default_factory=list)


type _Draft = PageNode | _LayoutDraft


def discover_routes(
    pages_dir: str | Path,
    *,
    extensions: tuple[str, ...] = PAGE_EXTENSIONS,
    reserved_dirs: tuple[str, ...] = RESERVED_DIRS,
) -> list[RouteNode]:
    """Walk a pages directory and build the (unranked) route tree.

    Args:
        pages_dir: Path to the ``pages/`` directory.
        extensions: Page file suffixes to route.
        reserved_dirs: Directory names never walked.

    Returns:
        Top-level route nodes in discovery order.

    Raises:
        PagesDirectoryError: *pages_dir* is not a directory.
        OSError: A directory or page file could not be read.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise PagesDirectoryError(f"Pages directory not found: {root}")

    drafts: list[_Draft] = []
    _walk_directory(
        root,
        parent_path="/",
        siblings=drafts,
        claimed=set(),
        extensions=extensions,
        reserved_dirs=reserved_dirs,
    )
    return [_freeze(draft) for draft in drafts]


def _is_page_file(item: Path, extensions: tuple[str, ...]) -> bool:
    return item.suffix in extensions and item.is_file()


def _walk_directory(
    directory: Path,
    *,
    parent_path: str,
    siblings: list[_Draft],
    claimed: set[str],
    extensions: tuple[str, ...],
    reserved_dirs: tuple[str, ...],
) -> None:
    """Recursively walk a directory, appending its routes to *siblings*.

    Args:
        directory: Current directory being walked.
        parent_path: Route path of *directory*.
        siblings: List receiving the routes found here.
        claimed: Route paths already taken during this pass.
        extensions: Page file suffixes to route.
        reserved_dirs: Directory names never walked.
    """
    entries = sorted(directory.iterdir())

    # A layout wraps everything below this point, so attach it first
    layout: _LayoutDraft | None = None
    target = siblings
    if any(item.stem == LAYOUT_NAME and _is_page_file(item, extensions) for item in entries):
        layout = _LayoutDraft(path=parent_path)
        siblings.append(layout)
        target = layout.children

    for item in entries:
        if not _is_page_file(item, extensions):
            continue

        stem = item.stem
        path = route_path(parent_path, stem)
        if path in claimed:
            logger.warning(
                "Route path %s conflicts with a page already registered; ignoring %s. "
                "Remove one of the %s files.",
                path,
                item,
                "/".join(ext.lstrip(".") for ext in extensions),
            )
            continue
        claimed.add(path)

        component = item.as_posix()
        if layout is not None and stem == LAYOUT_NAME:
            layout.component = component
            continue

        # Undecodable bytes become U+FFFD so the page stays routable
        meta = read_route_meta(item, item.read_text(encoding="utf-8", errors="replace"))
        name = meta.get("name") or route_name(parent_path, stem)
        target.append(PageNode(path=path, name=str(name), component=component, meta=meta))

    # Subdirectories after files, so a directory's own pages come first
    for item in entries:
        if not item.is_dir() or item.name in reserved_dirs:
            continue
        _walk_directory(
            item,
            parent_path=route_path(parent_path, item.name, is_file=False),
            siblings=target,
            claimed=claimed,
            extensions=extensions,
            reserved_dirs=reserved_dirs,
        )


def _freeze(draft: _Draft) -> RouteNode:
    if isinstance(draft, PageNode):
        return draft
    return LayoutNode(
        path=draft.path,
        component=draft.component,
        children=tuple(_freeze(child) for child in draft.children),
    )
