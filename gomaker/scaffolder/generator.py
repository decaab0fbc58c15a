"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and creates the target directory holding the
composed Makefile, a starter Go source file, an optional ``go.mod`` and a
``.gitignore``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from gomaker.config import Config

from .catalog import BIN_DIR, ToggleSet
from .composer import ComposedRecipe, compose
from .templates import TemplateRenderer, go_package_name, write_file


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when the project directory or one of its files cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    directory: Path = Field(..., description="Directory to create for the project")
    toggles: ToggleSet = Field(default_factory=ToggleSet)
    module_path: str = Field(
        default="",
        description="Source control path for go.mod (e.g. github.com/user/project)",
    )

    @property
    def package_name(self) -> str:
        """Go package name derived from the directory basename."""
        return go_package_name(self.directory.name)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolding orchestrator.

    Directory creation is the first side effect: when it fails nothing else
    is attempted.  Later write failures leave the partial scaffold in place.
    """

    def __init__(self, config: ProjectConfig, settings: Config | None = None) -> None:
        self.config = config
        self.settings = settings or Config()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def compose_makefile(self) -> ComposedRecipe:
        """Compose the Makefile for the configured toggles without writing it."""
        return compose(self.config.toggles, renderer=self.renderer)

    async def generate(self) -> list[Path]:
        """Generate the project.

        Returns:
            Paths of every file written, in write order.

        Raises:
            ScaffoldError: If the directory already exists, cannot be created,
                or a file cannot be written.
        """
        root = self.config.directory
        try:
            await asyncio.to_thread(root.mkdir)
        except FileExistsError as exc:
            raise ScaffoldError(root, "directory already exists") from exc
        except OSError as exc:
            raise ScaffoldError(root, f"cannot create directory: {exc.strerror}") from exc

        recipe = self.compose_makefile()
        context = self._build_context()
        written: list[Path] = []

        # 1. Makefile
        makefile = root / self.settings.makefile_name
        await self._write(makefile, recipe.text, self.settings.file_mode)
        written.append(makefile)

        # 2. Starter source
        if self.config.toggles.is_library:
            source = root / f"{self.config.package_name}.go"
            written.append(await self._render(source, "library.go.j2", context))
        else:
            written.append(await self._render(root / "main.go", "main.go.j2", context))

        # 3. go.mod (only with a module path)
        if self.config.module_path:
            written.append(await self._render(root / "go.mod", "go.mod.j2", context))

        # 4. .gitignore
        written.append(
            await self._render(
                root / ".gitignore",
                "gitignore.j2",
                context,
                mode=self.settings.ignore_file_mode,
            )
        )

        return written

    # -- Internal helpers --------------------------------------------------

    def _build_context(self) -> dict[str, str]:
        return {
            "package": self.config.package_name,
            "module_path": self.config.module_path,
            "go_version": self.settings.go_version,
            "bin_dir": BIN_DIR,
        }

    async def _render(
        self,
        path: Path,
        template: str,
        context: dict[str, str],
        *,
        mode: int | None = None,
    ) -> Path:
        try:
            return await self.renderer.render_to_file(
                template,
                path,
                context,
                mode=self.settings.file_mode if mode is None else mode,
            )
        except OSError as exc:
            raise ScaffoldError(path, f"cannot write file: {exc.strerror}") from exc

    async def _write(self, path: Path, content: str, mode: int) -> None:
        try:
            await asyncio.to_thread(write_file, path, content, mode)
        except OSError as exc:
            raise ScaffoldError(path, f"cannot write file: {exc.strerror}") from exc
