"""
인터프리터 / 가상환경 경로 결정 규칙.
- 호스트 인터프리터: 설정값(PYTHON) → 탐색 명령 디스패치 테이블 순서.
- 가상환경 내부 경로: 플랫폼 계열에 따라 Scripts/ 또는 bin/.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from packaging.version import InvalidVersion, Version

from ..errors import InterpreterNotFoundError, InterpreterVersionError
from . import probe


def resolve_interpreter(override: Optional[str] = None, platform: Optional[str] = None) -> str:
    """
    Return a path to a host interpreter.

    override: explicit path (settings.PYTHON); used as-is when given.
    Otherwise the lookup commands run in ``probe.lookup_order`` order and
    the first one printing a path wins.
    """
    if override:
        return override

    for cmd in probe.lookup_order(platform):
        path = probe.run_lookup(cmd)
        if path:
            return path

    raise InterpreterNotFoundError()


def check_interpreter_version(python: str, minimum: str) -> Version:
    """Raise InterpreterVersionError unless ``python`` runs and is >= minimum."""
    try:
        required = Version(minimum)
    except InvalidVersion as e:
        raise InterpreterVersionError(f"Invalid minimum Python version: {minimum!r}") from e

    found = probe.interpreter_version(python)
    if found is None:
        raise InterpreterVersionError(f"Could not determine the version of {python}")
    if found < required:
        raise InterpreterVersionError(f"Python >= {minimum} required, found {found} at {python}")
    return found


def venv_python(venv_dir: Path, platform: Optional[str] = None) -> Path:
    if probe.platform_family(platform) == probe.WINDOWS:
        return venv_dir / "Scripts" / "python.exe"
    return venv_dir / "bin" / "python"


def activation_hint(venv_dir: Path, platform: Optional[str] = None) -> str:
    """Shell command that activates the environment on this platform."""
    if probe.platform_family(platform) == probe.WINDOWS:
        return str(venv_dir / "Scripts" / "activate.bat")
    return f"source {venv_dir / 'bin' / 'activate'}"
