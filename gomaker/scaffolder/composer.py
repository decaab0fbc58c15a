"""Makefile composer.

Turns a ``ToggleSet`` into a ``ComposedRecipe`` by walking the fragment
catalog in order, keeping the fragments whose predicate holds, resolving their
inline template spans and normalising blank lines.  The composer performs no
I/O and holds no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import CATALOG, Fragment, ToggleSet
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ComposedRecipe:
    """Normalised Makefile text plus the names of the fragments it contains."""

    text: str
    fragments: tuple[str, ...]

    def __str__(self) -> str:
        return self.text

    def __contains__(self, name: str) -> bool:
        return name in self.fragments


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def compose(
    toggles: ToggleSet,
    catalog: tuple[Fragment, ...] = CATALOG,
    renderer: TemplateRenderer | None = None,
) -> ComposedRecipe:
    """Compose the Makefile for *toggles*.

    Args:
        toggles: The feature switches for this invocation.
        catalog: Ordered fragments to select from.
        renderer: Renderer used for inline spans.  A fresh one is created per
            call when omitted.

    Returns:
        The normalised recipe.  Composing the same toggles twice yields
        byte-identical text.
    """
    renderer = renderer or TemplateRenderer()
    context = toggles.as_context()

    selected: list[str] = []
    parts: list[str] = []
    for fragment in catalog:
        if not fragment.applies(toggles):
            continue
        selected.append(fragment.name)
        parts.append(_resolve(fragment, renderer, context))

    text = collapse_blank_lines("\n".join(parts))
    return ComposedRecipe(text=text, fragments=tuple(selected))


def _resolve(fragment: Fragment, renderer: TemplateRenderer, context: dict[str, bool]) -> str:
    body = renderer.render_string(fragment.body, context)
    if not body.endswith("\n"):
        body += "\n"
    return body


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def collapse_blank_lines(text: str) -> str:
    """Collapse every run of blank lines into a single blank line.

    Leading blank lines are dropped and the result ends with exactly one
    newline (or is empty).  Applying the function twice is a no-op.

    Examples::

        collapse_blank_lines("a\\n\\n\\n\\nb\\n") -> "a\\n\\nb\\n"
        collapse_blank_lines("\\n\\na\\n\\n")      -> "a\\n"
    """
    out: list[str] = []
    pending_blank = False
    for line in text.split("\n"):
        if line == "":
            pending_blank = bool(out)
            continue
        if pending_blank:
            out.append("")
            pending_blank = False
        out.append(line)
    if not out:
        return ""
    return "\n".join(out) + "\n"
