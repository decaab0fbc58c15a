"""Shared pytest fixtures for the gomaker test suite.

Provides reusable fixtures for:
- Toggle sets (minimal, full, typical)
- A shared template renderer
- Target directories for scaffolding
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gomaker.scaffolder import TemplateRenderer, ToggleSet


# ---------------------------------------------------------------------------
# Toggle sets
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_toggles() -> ToggleSet:
    """Every toggle off: an executable project with mandatory targets only."""
    return ToggleSet()


@pytest.fixture
def full_toggles() -> ToggleSet:
    """Every toggle on (library variant)."""
    return ToggleSet.all_enabled()


@pytest.fixture
def typical_toggles() -> ToggleSet:
    """Tests with HTML coverage and benchmarks, as most services are set up."""
    return ToggleSet(
        include_tests=True,
        include_benchmarks=True,
        enable_coverage_html=True,
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Not-yet-existing project directory inside a temp dir."""
    return tmp_path / "demo-service"
