"""Enum generation orchestrator.

Ties the pure ``Assembler`` to the two outside collaborators: ``gofmt``,
which validates and formats the rendered unit, and the file system, which
receives the final bytes.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import Config
from ..utils import print_warning, write_bytes
from .assembler import Assembler
from .gofmt import GofmtFormatter, GofmtUnavailableError
from .identifiers import package_name
from .models import EnumSpec, OutputArtifact


class EnumGenerator:
    """Renders, validates and writes string enums.

    Usage::

        generator = EnumGenerator(Config(output_dir=Path("internal")))
        path = await generator.generate("Status", "backlog", "in_review", "done")
        # -> internal/statusenum/statusenum.go
    """

    def __init__(
        self,
        config: Config | None = None,
        formatter: GofmtFormatter | None = None,
    ) -> None:
        self.config = config or Config()
        self.assembler = Assembler()
        self.formatter = formatter or GofmtFormatter(self.config.gofmt)

    # -- Public API --------------------------------------------------------

    async def build(self, spec: EnumSpec) -> OutputArtifact:
        """Render *spec* and pass it through ``gofmt`` when enabled.

        Nothing is returned on error; a rejected unit is never handed on.

        Raises:
            InvalidSpecError, CollisionError: From rendering.
            CodegenInvalidError: If ``gofmt`` rejects the unit.
            GofmtUnavailableError: If ``gofmt`` is required but cannot run.
        """
        source = self.assembler.render(spec)
        formatted = False

        if self.config.gofmt.enabled:
            if self.formatter.available():
                source = await self.formatter.format(source)
                formatted = True
            elif self.config.gofmt.required:
                raise GofmtUnavailableError(
                    f"gofmt executable {self.config.gofmt.path!r} not found on PATH",
                    self.config.gofmt.path,
                )
            else:
                print_warning(
                    f"gofmt ({self.config.gofmt.path}) not found; writing unvalidated output."
                )

        return OutputArtifact(
            package=package_name(spec.type_name),
            source=source,
            formatted=formatted,
        )

    async def generate(self, type_name: str, *variants: str) -> Path:
        """Build the enum and write it to ``<output_dir>/<pkg>/<pkg>.go``.

        Returns:
            Path of the written file.
        """
        spec = EnumSpec.build(type_name, *variants)
        artifact = await self.build(spec)
        out = self.output_path(artifact)
        await asyncio.to_thread(write_bytes, out, artifact.source)
        return out

    def output_path(self, artifact: OutputArtifact) -> Path:
        return self.config.package_dir(artifact.package) / artifact.filename
