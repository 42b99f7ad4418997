"""Data models for filesystem-based page routing.

Immutable frozen dataclasses for the two node shapes of the route tree.
Built once per discovery pass; ranking returns new nodes rather than
mutating these.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True, slots=True)
class PageNode:
    """A routable page discovered in the filesystem.

    Attributes:
        path: Router path pattern (e.g., ``/b/:id``).
        name: Unique route name; ``meta["name"]`` when declared.
        component: Forward-slash location of the page file.  Never loaded.
        meta: Metadata declared in the page source.
        children: Always empty for pages; kept so every node has the field.
        rank: Specificity score, ``None`` until ranked.
    """

    path: str
    name: str
    component: str
    meta: dict[str, Any] = field(default_factory=dict)
    children: tuple[RouteNode, ...] = ()
    rank: int | None = None
    kind: Literal["page"] = "page"

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for serialization."""
        data: dict[str, Any] = {
            "path": self.path,
            "component": self.component,
            "name": self.name,
            "meta": dict(self.meta),
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True, slots=True)
class LayoutNode:
    """A layout wrapping every route of its directory.

    Renders at the same path as its parent directory and passes through
    to ``children`` via nested rendering.

    Attributes:
        path: Route path of the directory holding the layout file.
        component: Forward-slash location of the layout file.
        children: Routes of the directory and its descendants.
        rank: Specificity score, ``None`` until ranked.
    """

    path: str
    component: str | None = None
    children: tuple[RouteNode, ...] = ()
    rank: int | None = None
    kind: Literal["layout"] = "layout"

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for serialization."""
        data: dict[str, Any] = {"path": self.path}
        if self.component is not None:
            data["component"] = self.component
        data["children"] = [child.to_dict() for child in self.children]
        return data


type RouteNode = PageNode | LayoutNode
