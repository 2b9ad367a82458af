"""``gofmt`` adapter: the syntax check every generated unit must pass.

The generated source is piped through ``gofmt`` on stdin.  A non-zero exit
means the emitters produced invalid Go, which is reported as
``CodegenInvalidError``.  Failing to run ``gofmt`` at all is an environment
problem and is reported separately.
"""

from __future__ import annotations

import shutil

from ..config import GofmtConfig
from ..utils import run_command
from .models import CodegenInvalidError


class GofmtUnavailableError(Exception):
    """Raised when the ``gofmt`` executable cannot be found or run."""

    def __init__(self, message: str, command: str = "") -> None:
        self.command = command
        super().__init__(message)


class GofmtFormatter:
    """Runs ``gofmt`` over generated source."""

    def __init__(self, config: GofmtConfig | None = None) -> None:
        self.config = config or GofmtConfig()

    def executable(self) -> str | None:
        """Resolved path of the configured ``gofmt``, or ``None``."""
        return shutil.which(self.config.path)

    def available(self) -> bool:
        return self.executable() is not None

    async def format(self, source: bytes) -> bytes:
        """Return *source* as formatted by ``gofmt``.

        Raises:
            GofmtUnavailableError: If ``gofmt`` is missing or did not finish.
            CodegenInvalidError: If ``gofmt`` rejects the source.
        """
        exe = self.executable()
        if exe is None:
            raise GofmtUnavailableError(
                f"gofmt executable {self.config.path!r} not found on PATH", self.config.path
            )

        returncode, stdout, stderr = await run_command(
            [exe], timeout=self.config.timeout, input_data=source
        )
        if returncode < 0:
            # timed out, or killed by a signal
            raise GofmtUnavailableError(stderr or f"gofmt terminated by signal {-returncode}", exe)
        if returncode != 0:
            raise CodegenInvalidError(
                f"gofmt rejected the generated source: {stderr}", source=source, stderr=stderr
            )
        return stdout
