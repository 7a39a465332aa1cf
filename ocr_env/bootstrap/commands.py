"""
서브프로세스 실행 유틸
- run_command: 터미널 입출력을 그대로 상속. exit code != 0 이면 CommandFailedError.
- run_command_with_output: stdout/stderr를 메모리에 모아 CommandResult로 반환 (exit code 무관).
두 함수 모두 타임아웃 없이 프로세스 종료까지 블로킹한다.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from ..errors import CommandFailedError

Arg = Union[str, Path]


@dataclass
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _argv(cmd: Sequence[Arg]) -> list[str]:
    return [str(part) for part in cmd]


def run_command(cmd: Sequence[Arg], cwd: Optional[Path] = None) -> None:
    """Run ``cmd`` attached to the caller's terminal; raise on non-zero exit.

    Spawn errors (missing executable, permissions) propagate as ``OSError``.
    """
    argv = _argv(cmd)
    cp = subprocess.run(argv, cwd=cwd, text=True)
    if cp.returncode != 0:
        raise CommandFailedError(argv, cp.returncode)


def run_command_with_output(cmd: Sequence[Arg], cwd: Optional[Path] = None) -> CommandResult:
    """Run ``cmd`` with stdout/stderr buffered; never raises on exit code."""
    cp = subprocess.run(
        _argv(cmd),
        cwd=cwd,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    return CommandResult(returncode=cp.returncode, stdout=cp.stdout or "", stderr=cp.stderr or "")
