"""gomaker configuration.

Tool-wide settings for the scaffolder.  Pydantic v2 models validate values at
construction time and serialise to/from JSON or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global gomaker configuration.

    Created once by the CLI entry point (usually via :meth:`from_env`) and
    handed to ``ProjectGenerator``.
    """

    go_version: str = Field(default="1.14", pattern=r"^\d+\.\d+(\.\d+)?$")
    makefile_name: str = Field(default="Makefile", min_length=1)
    file_mode: int = Field(default=0o744, ge=0, le=0o777)
    ignore_file_mode: int = Field(default=0o644, ge=0, le=0o777)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOMAKER_GO_VERSION, GOMAKER_MAKEFILE_NAME.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOMAKER_GO_VERSION"):
            kwargs["go_version"] = os.environ["GOMAKER_GO_VERSION"]
        if os.environ.get("GOMAKER_MAKEFILE_NAME"):
            kwargs["makefile_name"] = os.environ["GOMAKER_MAKEFILE_NAME"]
        return cls(**kwargs)
