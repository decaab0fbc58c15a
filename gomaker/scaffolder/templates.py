"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``gomaker/scaffolder/templates/`` directory (starter files) and renders inline
template strings (Makefile fragments) with the same environment settings.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Whitespace control is configured so that a block tag alone on its line
    leaves no trace in the output, which keeps conditional Makefile lines
    free of stray blank lines.  Undefined names raise instead of rendering
    empty, so a fragment that refers to an unknown toggle fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["go_package"] = go_package_name
        self._compiled: dict[str, Template] = {}

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"main.go.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Compiled templates are memoised per source string; the catalog is
        static, so each fragment is parsed once per renderer.
        """
        template = self._compiled.get(template_string)
        if template is None:
            template = self.env.from_string(template_string)
            self._compiled[template_string] = template
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
        *,
        mode: int | None = None,
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_file, out, content, mode)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template names."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def go_package_name(value: str) -> str:
    """Convert a directory name to a valid Go package identifier.

    Examples::

        go_package_name("my-lib")   -> "mylib"
        go_package_name("My_Lib")   -> "my_lib"
        go_package_name("2fa")      -> "pkg2fa"
    """
    name = re.sub(r"[^a-z0-9_]", "", value.strip().lower())
    if not name:
        return "pkg"
    if name[0].isdigit():
        return f"pkg{name}"
    return name


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str, mode: int | None = None) -> None:
    """Synchronous helper: write content and apply the permission bits."""
    path.write_text(content, encoding="utf-8")
    if mode is not None:
        path.chmod(mode)
