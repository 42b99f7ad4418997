"""Tests for pageroutes.render — route serialization and module rendering."""

from pathlib import Path

import pytest

from pageroutes.config import RouterConfig
from pageroutes.pages.types import LayoutNode, PageNode
from pageroutes.render.serialize import component_expression, is_function_component, routes_to_js


def _tree() -> list:
    return [
        LayoutNode(
            path="/",
            component="/app/pages/layout.vue",
            children=(
                PageNode(path="/a", name="a", component="/app/pages/a.vue", meta={"title": "A"}),
                PageNode(path="/", name="index", component="/app/pages/index.vue"),
            ),
        )
    ]


class TestComponentExpression:
    def test_require_by_default(self) -> None:
        assert component_expression("/app/a.vue") == "require('/app/a.vue').default"

    def test_dynamic_import(self) -> None:
        assert component_expression("/app/a.vue", dynamic_import=True) == "() => import('/app/a.vue')"

    def test_windows_separators(self) -> None:
        assert component_expression("C:\\app\\a.vue") == "require('C:/app/a.vue').default"

    @pytest.mark.parametrize(
        "source",
        [
            "() => import('./a.vue')",
            "(props) => h('div')",
            "function Page() { return null; }",
            "function (props) { return null; }",
        ],
    )
    def test_function_components_pass_through(self, source: str) -> None:
        assert is_function_component(source)
        assert component_expression(source, dynamic_import=True) == source

    def test_paths_are_not_functions(self) -> None:
        assert not is_function_component("/app/functional.vue")


class TestRoutesToJS:
    def test_components_emitted_as_code(self) -> None:
        text = routes_to_js(_tree())

        assert "\"component\": require('/app/pages/layout.vue').default" in text
        assert "\"component\": require('/app/pages/a.vue').default" in text
        assert '"/app/pages/a.vue"' not in text

    def test_dynamic_import(self) -> None:
        text = routes_to_js(_tree(), dynamic_import=True)
        assert "\"component\": () => import('/app/pages/index.vue')" in text

    def test_route_data_kept(self) -> None:
        text = routes_to_js(_tree())
        assert '"path": "/a"' in text
        assert '"name": "a"' in text
        assert '"title": "A"' in text
        assert '"children": [' in text
        assert "rank" not in text

    def test_plain_override_routes(self) -> None:
        override = [{"path": "/x", "component": "() => import('./X.vue')", "meta": {"k": 1}}]
        text = routes_to_js(override)
        assert "\"component\": () => import('./X.vue')" in text
        # The caller's data is not modified
        assert override[0]["component"] == "() => import('./X.vue')"

    def test_route_without_component(self) -> None:
        text = routes_to_js([{"path": "/redirect", "redirect": "/a"}])
        assert '"redirect": "/a"' in text

    def test_empty(self) -> None:
        assert routes_to_js([]) == "[]"


class TestRenderRoutesModule:
    def test_renders_module(self) -> None:
        pytest.importorskip("kida")
        from pageroutes.render.module import render_routes_module

        source = render_routes_module(_tree(), RouterConfig(mode="history", base="/app/"))

        assert "createWebHistory" in source
        assert 'createWebHistory("/app/")' in source
        assert "require('/app/pages/a.vue').default" in source
        assert "export const defineRouteMeta" in source

    def test_default_mode_is_hash(self) -> None:
        pytest.importorskip("kida")
        from pageroutes.render.module import render_routes_module

        source = render_routes_module([], RouterConfig(dynamic_import=True))
        assert "createWebHashHistory()" in source
        assert "const routes = [];" in source

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        pytest.importorskip("kida")
        from pageroutes.render.module import write_routes_module

        target = write_routes_module(tmp_path / "core" / "routes" / "routes.js", _tree(), RouterConfig())
        assert target.is_file()
        assert "getRoutes" in target.read_text(encoding="utf-8")
