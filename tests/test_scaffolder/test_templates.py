"""Tests for the Jinja2 template renderer and its filters."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from gomaker.scaffolder.templates import TemplateRenderer, go_package_name


pytestmark = pytest.mark.unit


class TestTemplateRenderer:
    def test_bundled_templates(self, renderer: TemplateRenderer):
        assert renderer.list_templates() == [
            "gitignore.j2",
            "go.mod.j2",
            "library.go.j2",
            "main.go.j2",
        ]

    def test_render_main(self, renderer: TemplateRenderer):
        assert renderer.render("main.go.j2", {}) == "package main\n\nfunc main() {\n}\n"

    def test_render_library(self, renderer: TemplateRenderer):
        assert renderer.render("library.go.j2", {"package": "mylib"}) == "package mylib\n"

    def test_render_go_mod(self, renderer: TemplateRenderer):
        content = renderer.render(
            "go.mod.j2",
            {"module_path": "github.com/user/project", "go_version": "1.14"},
        )
        assert content == "module github.com/user/project\n\ngo 1.14\n"

    def test_render_string_block_lines_leave_no_trace(self, renderer: TemplateRenderer):
        template = "a\n{% if on %}\nb\n{% endif %}\nc\n"
        assert renderer.render_string(template, {"on": True}) == "a\nb\nc\n"
        assert renderer.render_string(template, {"on": False}) == "a\nc\n"

    def test_render_string_inline_span(self, renderer: TemplateRenderer):
        template = "go test {% if bench %}-bench=. {% endif %}./...\n"
        assert renderer.render_string(template, {"bench": True}) == "go test -bench=. ./...\n"
        assert renderer.render_string(template, {"bench": False}) == "go test ./...\n"

    def test_render_string_undefined_name_raises(self, renderer: TemplateRenderer):
        with pytest.raises(UndefinedError):
            renderer.render_string("{% if missing %}x{% endif %}", {})

    def test_render_string_reuses_compiled_template(self, renderer: TemplateRenderer):
        renderer.render_string("x{{ y }}", {"y": 1})
        renderer.render_string("x{{ y }}", {"y": 2})
        assert list(renderer._compiled) == ["x{{ y }}"]

    async def test_render_to_file_sets_mode(self, renderer: TemplateRenderer, tmp_path: Path):
        out = await renderer.render_to_file(
            "gitignore.j2", tmp_path / ".gitignore", {"bin_dir": "bin"}, mode=0o644
        )
        assert out.read_text(encoding="utf-8") == "bin/\n"
        assert out.stat().st_mode & 0o777 == 0o644

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.j2").write_text("hello {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.j2", {"name": "go"}) == "hello go\n"

    def test_go_package_filter_registered(self, renderer: TemplateRenderer):
        assert renderer.render_string("{{ 'My-Lib' | go_package }}", {}) == "mylib"


class TestGoPackageName:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("mylib", "mylib"),
            ("my-lib", "mylib"),
            ("My_Lib", "my_lib"),
            ("2fa", "pkg2fa"),
            ("---", "pkg"),
        ],
    )
    def test_conversion(self, value: str, expected: str):
        assert go_package_name(value) == expected
