"""Shared pytest fixtures for the strenum test suite.

Provides reusable fixtures for:
- Template renderer and assembler instances
- Sample enum specs (the ``Something`` and ``Status`` examples)
- A fake formatter for exercising EnumGenerator without gofmt
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from strenum.codegen.assembler import Assembler
from strenum.codegen.gofmt import GofmtFormatter
from strenum.codegen.models import EnumSpec
from strenum.codegen.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """TemplateRenderer over the packaged Go templates."""
    return TemplateRenderer()


@pytest.fixture
def assembler(renderer: TemplateRenderer) -> Assembler:
    return Assembler(renderer)


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------


@pytest.fixture
def something_spec() -> EnumSpec:
    """Type ``Something`` with a separator-bearing variant."""
    return EnumSpec.build("Something", "Aaa", "Bbb", "Cc_xxxx_zzz")


@pytest.fixture
def main_spec() -> EnumSpec:
    """Lower-case type name ``main``; ``Something`` is one of its variants."""
    return EnumSpec.build("main", "Something", "Aaa", "Bbb", "Cc_xxxx_zzz")


@pytest.fixture
def status_spec() -> EnumSpec:
    return EnumSpec.build("Status", "backlog", "in_review", "done")


# ---------------------------------------------------------------------------
# Formatter doubles
# ---------------------------------------------------------------------------


@pytest.fixture
def passthrough_formatter() -> MagicMock:
    """A GofmtFormatter double that reports gofmt as installed and echoes input."""
    formatter = MagicMock(spec=GofmtFormatter)
    formatter.available.return_value = True

    async def _echo(source: bytes) -> bytes:
        return source

    formatter.format = AsyncMock(side_effect=_echo)
    return formatter


@pytest.fixture
def missing_formatter() -> MagicMock:
    """A GofmtFormatter double that reports gofmt as missing."""
    formatter = MagicMock(spec=GofmtFormatter)
    formatter.available.return_value = False
    formatter.format = AsyncMock()
    return formatter


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Temporary directory generated packages are written into."""
    out = tmp_path / "out"
    out.mkdir()
    return out
