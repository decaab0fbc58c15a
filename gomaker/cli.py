"""gomaker command-line entry point.

Usage::

    gomaker my-service
    gomaker --test --cover-html --bench my-service
    gomaker --library --mod github.com/user/mylib mylib
    python -m gomaker --version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from gomaker import __version__
from gomaker.config import Config
from gomaker.scaffolder import ProjectConfig, ProjectGenerator, ScaffoldError, ToggleSet
from gomaker.utils import describe_files, print_error, print_success, print_summary_table, print_warning


# ---------------------------------------------------------------------------
# Flag table
# ---------------------------------------------------------------------------

# (flag, toggle, help)
TOGGLE_FLAGS: tuple[tuple[str, str, str], ...] = (
    ("--test", "include_tests", "Adds test to makefile"),
    ("--bench", "include_benchmarks", "Adds bench to makefile"),
    ("--lint", "include_linting", "Adds lint to makefile"),
    ("--shadow", "enable_shadow", "Adds shadow to makefile"),
    ("--cover", "enable_coverage", "Adds cover to makefile (requires --test)"),
    ("--cover-html", "enable_coverage_html", "Adds cover HTML to makefile (requires --test)"),
    ("--cpu-profile", "enable_cpu_profile", "Adds CPU profiling to makefile"),
    ("--mem-profile", "enable_mem_profile", "Adds memory profiling to makefile"),
    ("--race", "enable_race_checks", "Adds race checking to makefile"),
    ("--test-race", "enable_test_race", "Adds race checking tests to makefile"),
    ("--library", "is_library", "Creates a library makefile"),
)

# Toggles that only take effect together with another toggle.
_REQUIRES: dict[str, str] = {
    "enable_coverage": "include_tests",
    "enable_coverage_html": "include_tests",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomaker",
        description="Scaffold a Go project with a feature-complete Makefile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gomaker my-service\n"
            "  gomaker --test --cover-html my-service\n"
            "  gomaker --library --mod github.com/user/mylib mylib\n"
        ),
    )
    parser.add_argument("directory", help="Directory to create for the new project")
    for flag, toggle, help_text in TOGGLE_FLAGS:
        parser.add_argument(flag, dest=toggle, action="store_true", help=help_text)
    parser.add_argument(
        "--mod",
        default="",
        metavar="PATH",
        help="Creates a go.mod file. Specify the source control path (github.com/user/project).",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the summary of written files",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Version: {__version__}",
        help="Displays the version of this binary",
    )
    return parser


def toggles_from_args(args: argparse.Namespace) -> ToggleSet:
    """Build the ``ToggleSet`` from parsed flags."""
    return ToggleSet(**{toggle: getattr(args, toggle) for _, toggle, _ in TOGGLE_FLAGS})


def unmet_dependencies(toggles: ToggleSet) -> list[tuple[str, str]]:
    """Return ``(toggle, required)`` pairs whose requirement is switched off."""
    return [
        (toggle, required)
        for toggle, required in _REQUIRES.items()
        if getattr(toggles, toggle) and not getattr(toggles, required)
    ]


def _flag_for(toggle: str) -> str:
    return next(flag for flag, name, _ in TOGGLE_FLAGS if name == toggle)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``gomaker`` and ``python -m gomaker``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    toggles = toggles_from_args(args)
    for toggle, required in unmet_dependencies(toggles):
        print_warning(f"{_flag_for(toggle)} has no effect without {_flag_for(required)}")

    config = ProjectConfig(
        directory=Path(args.directory),
        toggles=toggles,
        module_path=args.mod,
    )
    try:
        settings = Config.from_env()
    except ValidationError as exc:
        print_error(f"Error: invalid GOMAKER_* environment settings\n{escape(str(exc))}")
        sys.exit(1)
    generator = ProjectGenerator(config, settings)

    try:
        written = asyncio.run(generator.generate())
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    if not args.quiet:
        print_summary_table(describe_files(written, config.directory), title=str(config.directory))
        print_success(f"Project created in {config.directory}")


if __name__ == "__main__":
    main()
