"""
Error taxonomy for the provisioning run.

Everything derives from :class:`SetupError`. Only
:class:`ModelDownloadError` is recoverable; the driver downgrades it to
a warning. Every other error aborts the run with exit code 1.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class SetupError(RuntimeError):
    """Base class for provisioning failures."""


class InterpreterNotFoundError(SetupError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Python not found. Please install Python and add it to your PATH."
        )


class InterpreterVersionError(SetupError):
    pass


class CommandFailedError(SetupError):
    """A command run with inherited I/O exited with a non-zero code."""

    def __init__(self, cmd: Sequence[str], returncode: int):
        self.cmd = list(cmd)
        self.returncode = returncode
        super().__init__(f"Command failed with exit code {returncode}: {' '.join(self.cmd)}")


class ModelDownloadError(SetupError):
    """The model-download driver script exited with a non-zero code."""

    def __init__(self, message: str, result: Any = None):
        self.result = result
        super().__init__(message)
