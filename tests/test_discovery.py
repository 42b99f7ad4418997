"""Tests for pageroutes.pages.discovery — building the route tree from disk."""

import logging
from pathlib import Path

import pytest

from pageroutes.errors import PagesDirectoryError
from pageroutes.pages.discovery import discover_routes
from pageroutes.pages.types import LayoutNode, PageNode

PAGE = "<template><div /></template>\n"


def _write(root: Path, relative: str, content: str = PAGE) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _paths(routes: list) -> list[str]:
    return [route.path for route in routes]


class TestFlatDiscovery:
    def test_files_become_pages(self, tmp_path: Path) -> None:
        _write(tmp_path, "index.vue")
        _write(tmp_path, "a.vue")
        _write(tmp_path, "*.vue")

        routes = discover_routes(tmp_path)

        assert all(isinstance(r, PageNode) for r in routes)
        # Sorted entry order, unranked
        assert _paths(routes) == ["/:pathMatch(.*)", "/a", "/"]
        assert [r.name for r in routes] == ["FUZZYMATCH", "a", "index"]
        assert all(r.rank is None for r in routes)

    def test_component_is_absolute_posix_path(self, tmp_path: Path) -> None:
        page = _write(tmp_path, "a.vue")
        (route,) = discover_routes(tmp_path)
        assert route.component == page.resolve().as_posix()

    def test_subdirectory_after_files(self, tmp_path: Path) -> None:
        _write(tmp_path, "b/index.vue")
        _write(tmp_path, "b/@id.vue")
        _write(tmp_path, "b/c.vue")
        _write(tmp_path, "z.vue")

        routes = discover_routes(tmp_path)

        # z.vue sorts after b/ but files are processed first
        assert _paths(routes) == ["/z", "/b/:id", "/b/c", "/b"]
        assert [r.name for r in routes] == ["z", "b__id", "b_c", "b_index"]

    def test_dynamic_directory(self, tmp_path: Path) -> None:
        _write(tmp_path, "@user/profile.jsx", "export default () => <p />;\n")
        (route,) = discover_routes(tmp_path)
        assert route.path == "/:user/profile"

    def test_unrecognised_files_ignored(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue")
        _write(tmp_path, "notes.md", "# notes")
        _write(tmp_path, "helper.js", "export const x = 1;")
        assert _paths(discover_routes(tmp_path)) == ["/a"]

    def test_components_directory_skipped(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue")
        _write(tmp_path, "components/Button.vue")
        _write(tmp_path, "b/components/Card.vue")
        assert _paths(discover_routes(tmp_path)) == ["/a"]

    def test_custom_extensions_and_reserved(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue")
        _write(tmp_path, "b.tsx", "export default 1;\n")
        _write(tmp_path, "shared/c.vue")
        routes = discover_routes(tmp_path, extensions=(".vue",), reserved_dirs=("shared",))
        assert _paths(routes) == ["/a"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert discover_routes(tmp_path) == []


class TestLayouts:
    def test_layout_wraps_siblings(self, tmp_path: Path) -> None:
        layout = _write(tmp_path, "layout.vue")
        _write(tmp_path, "index.vue")
        _write(tmp_path, "c.vue")

        routes = discover_routes(tmp_path)

        assert len(routes) == 1
        (node,) = routes
        assert isinstance(node, LayoutNode)
        assert node.path == "/"
        assert node.component == layout.resolve().as_posix()
        assert _paths(node.children) == ["/c", "/"]

    def test_layout_wraps_descendants(self, tmp_path: Path) -> None:
        _write(tmp_path, "layout.vue")
        _write(tmp_path, "a.vue")
        _write(tmp_path, "b/c.vue")

        (node,) = discover_routes(tmp_path)

        assert isinstance(node, LayoutNode)
        assert _paths(node.children) == ["/a", "/b/c"]

    def test_nested_layout(self, tmp_path: Path) -> None:
        _write(tmp_path, "layout.vue")
        _write(tmp_path, "a.vue")
        _write(tmp_path, "admin/layout.tsx", "export default () => <main />;\n")
        _write(tmp_path, "admin/users.vue")

        (root,) = discover_routes(tmp_path)

        assert isinstance(root, LayoutNode)
        assert root.children[0].path == "/a"
        admin = root.children[1]
        assert isinstance(admin, LayoutNode)
        assert admin.path == "/admin"
        assert admin.component is not None
        assert admin.component.endswith("admin/layout.tsx")
        assert _paths(admin.children) == ["/admin/users"]

    def test_layout_in_subdirectory_only(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue")
        _write(tmp_path, "b/layout.vue")
        _write(tmp_path, "b/index.vue")

        routes = discover_routes(tmp_path)

        assert isinstance(routes[0], PageNode)
        assert isinstance(routes[1], LayoutNode)
        assert routes[1].path == "/b"
        assert _paths(routes[1].children) == ["/b"]

    def test_layout_named_directory_is_not_a_layout(self, tmp_path: Path) -> None:
        _write(tmp_path, "layout/index.vue")
        routes = discover_routes(tmp_path)
        assert isinstance(routes[0], PageNode)
        assert routes[0].path == "/layout"


class TestConflicts:
    def test_same_stem_different_extension(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write(tmp_path, "a.tsx", "export default () => <p />;\n")
        _write(tmp_path, "a.vue")

        with caplog.at_level(logging.WARNING, logger="pageroutes.router"):
            routes = discover_routes(tmp_path)

        assert _paths(routes) == ["/a"]
        assert routes[0].component.endswith("a.tsx")
        assert "/a" in caplog.text
        assert "conflicts" in caplog.text

    def test_conflict_across_directories(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write(tmp_path, "b.vue")
        _write(tmp_path, "b/index.vue")

        with caplog.at_level(logging.WARNING, logger="pageroutes.router"):
            routes = discover_routes(tmp_path)

        assert _paths(routes) == ["/b"]
        assert routes[0].component.endswith("/b.vue")
        assert len(caplog.records) == 1

    def test_paths_unique_in_tree(self, tmp_path: Path) -> None:
        _write(tmp_path, "layout.vue")
        for rel in ("index.vue", "index.tsx", "a.vue", "a/index.jsx", "@id.vue", "x/@id.vue"):
            _write(tmp_path, rel, "export default 1;\n" if not rel.endswith(".vue") else PAGE)

        (layout,) = discover_routes(tmp_path)
        paths = _paths(layout.children)

        assert len(paths) == len(set(paths))
        assert sorted(paths) == ["/", "/:id", "/a", "/x/:id"]

    def test_fresh_registry_per_build(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue")
        assert _paths(discover_routes(tmp_path)) == ["/a"]
        # A second pass is not affected by paths claimed in the first
        assert _paths(discover_routes(tmp_path)) == ["/a"]


class TestMetadata:
    def test_meta_name_overrides_conventional_name(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.vue", PAGE + '<config>{"name": "alpha", "title": "A"}</config>\n')
        (route,) = discover_routes(tmp_path)
        assert route.name == "alpha"
        assert route.meta == {"name": "alpha", "title": "A"}

    def test_meta_without_name_keeps_conventional_name(self, tmp_path: Path) -> None:
        _write(tmp_path, "b/c.tsx", "defineRouteMeta({ title: 'C' });\nexport default 1;\n")
        (route,) = discover_routes(tmp_path)
        assert route.name == "b_c"
        assert route.meta == {"title": "C"}

    def test_undecodable_bytes_still_routed(self, tmp_path: Path) -> None:
        (tmp_path / "a.vue").write_bytes(b"<template><p>caf\xe9</p></template>\n")
        _write(tmp_path, "b.vue")

        routes = discover_routes(tmp_path)

        assert _paths(routes) == ["/a", "/b"]
        assert routes[0].meta == {}

    def test_broken_meta_still_routed(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.jsx", "defineRouteMeta({ name: compute() });\nexport default 1;\n")
        (route,) = discover_routes(tmp_path)
        assert route.path == "/a"
        assert route.name == "a"
        assert route.meta == {}


class TestErrors:
    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(PagesDirectoryError, match="Pages directory not found"):
            discover_routes(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        page = _write(tmp_path, "a.vue")
        with pytest.raises(FileNotFoundError):
            discover_routes(page)
