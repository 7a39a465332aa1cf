"""
호스트 감지 유틸
- 플랫폼 계열(posix/nt) 판별과 인터프리터 탐색 명령 디스패치 테이블.
- 인터프리터 버전 조회, 디스크 여유 공간(GiB) 조회.
- 모든 용량 단위는 'GiB(2^30 bytes)' 기준.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import psutil
from packaging.version import InvalidVersion, Version

from .commands import run_command_with_output

POSIX = "posix"
WINDOWS = "nt"

# 플랫폼 계열별 인터프리터 탐색 명령 (순서대로 시도)
LOOKUP_COMMANDS: Dict[str, List[Tuple[str, ...]]] = {
    POSIX: [("which", "python3"), ("which", "python")],
    WINDOWS: [("where", "python")],
}

_VERSION_SNIPPET = "import sys; print('.'.join(map(str, sys.version_info[:3])))"


def platform_family(platform: Optional[str] = None) -> str:
    """Map ``sys.platform`` style names onto a LOOKUP_COMMANDS key."""
    platform = platform or sys.platform
    if platform.startswith("win") or platform == WINDOWS:
        return WINDOWS
    return POSIX


def lookup_order(platform: Optional[str] = None) -> List[Tuple[str, ...]]:
    """
    탐색 명령 순서: 현재 호스트 계열 먼저, 이후 나머지 계열.
    예) linux -> which python3, which python, where python
    """
    own = platform_family(platform)
    order = list(LOOKUP_COMMANDS[own])
    for family, cmds in LOOKUP_COMMANDS.items():
        if family != own:
            order.extend(cmds)
    return order


def run_lookup(cmd: Tuple[str, ...]) -> Optional[str]:
    """Run one lookup command; return the first path it prints, or None.

    A lookup tool missing from the host (``which`` on Windows) is a miss.
    """
    try:
        result = run_command_with_output(cmd)
    except OSError:
        return None
    if not result.ok:
        return None
    for line in result.stdout.splitlines():
        line = line.strip()
        if line:
            return line
    return None


def interpreter_version(python: str) -> Optional[Version]:
    """Ask ``python`` for its version. None when it cannot run or answers garbage."""
    try:
        result = run_command_with_output([python, "-c", _VERSION_SNIPPET])
    except OSError:
        return None
    if not result.ok:
        return None
    try:
        return Version(result.stdout.strip())
    except InvalidVersion:
        return None


def free_disk_gib(path: Path) -> float:
    """path가 속한 볼륨의 여유 공간 (GiB, 소수점 한 자리)"""
    # 아직 생성 전인 경로면 존재하는 상위 디렉토리 기준
    probe = Path(path)
    while not probe.exists() and probe != probe.parent:
        probe = probe.parent
    usage = psutil.disk_usage(os.fspath(probe))
    return round(usage.free / (1024 ** 3), 1)
