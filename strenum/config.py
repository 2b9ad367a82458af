"""strenum configuration.

Typed settings for the generator's outer layer: where files are written and
how the ``gofmt`` validator is invoked.  The naming convention of the
generated code is fixed and deliberately not configurable here.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class GofmtConfig(BaseModel):
    """How the host formatter is run."""

    path: str = Field(default="gofmt", description="gofmt executable name or path")
    enabled: bool = Field(default=True, description="Pipe generated source through gofmt")
    required: bool = Field(
        default=False, description="Fail instead of warning when gofmt is not installed"
    )
    timeout: int = Field(default=30, ge=1, description="Per-invocation timeout in seconds")


class Config(BaseModel):
    """Global strenum configuration.

    Instances are created once by the CLI entry point (or by library
    callers) and passed to ``EnumGenerator``.
    """

    output_dir: Path = Field(default=Path("."))
    gofmt: GofmtConfig = Field(default_factory=GofmtConfig)

    def package_dir(self, package: str) -> Path:
        """Directory that holds the generated package *package*."""
        return self.output_dir / package

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file."""
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
            STRENUM_OUTPUT_DIR, STRENUM_GOFMT, STRENUM_FORMAT,
            STRENUM_REQUIRE_GOFMT, STRENUM_GOFMT_TIMEOUT.

        The CLI replaces ``output_dir`` with its DIR argument, so
        STRENUM_OUTPUT_DIR only takes effect for library callers.

        Raises:
            ValueError: If STRENUM_GOFMT_TIMEOUT is not a positive integer.
        """
        gofmt_kwargs: dict[str, Any] = {}
        if os.environ.get("STRENUM_GOFMT"):
            gofmt_kwargs["path"] = os.environ["STRENUM_GOFMT"]
        if os.environ.get("STRENUM_FORMAT"):
            gofmt_kwargs["enabled"] = os.environ["STRENUM_FORMAT"].strip().lower() in _TRUTHY
        if os.environ.get("STRENUM_REQUIRE_GOFMT"):
            gofmt_kwargs["required"] = (
                os.environ["STRENUM_REQUIRE_GOFMT"].strip().lower() in _TRUTHY
            )
        if os.environ.get("STRENUM_GOFMT_TIMEOUT"):
            gofmt_kwargs["timeout"] = int(os.environ["STRENUM_GOFMT_TIMEOUT"])

        return cls(
            output_dir=Path(os.environ.get("STRENUM_OUTPUT_DIR", ".")),
            gofmt=GofmtConfig(**gofmt_kwargs),
        )
