"""
가상환경 생성 / 패키지 설치 / EasyOCR 모델 캐시 준비
- 모든 설치 단계는 순차 실행, 실패 시 CommandFailedError로 중단.
- 모델 다운로드만 ModelDownloadError로 실패를 알리고, 호출 측에서 경고로 처리.
"""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from ..errors import ModelDownloadError
from .commands import CommandResult, run_command, run_command_with_output


# ------------------------------
# 가상환경 / pip
# ------------------------------
def create_venv(python: str, venv_dir: Path) -> None:
    print(f"[bootstrap/install] creating virtual environment: {venv_dir}")
    run_command([python, "-m", "venv", venv_dir])


def upgrade_pip(venv_python: Path) -> None:
    print("[bootstrap/install] upgrading pip")
    run_command([venv_python, "-m", "pip", "install", "--upgrade", "pip"])


def install_packages(venv_python: Path, packages: Iterable[str]) -> List[str]:
    """패키지를 하나씩 설치. 하나라도 실패하면 이후 패키지는 설치하지 않음."""
    installed: List[str] = []
    for package in packages:
        print(f"[bootstrap/install] installing {package}")
        run_command([venv_python, "-m", "pip", "install", package])
        installed.append(package)
    return installed


# ------------------------------
# EasyOCR 모델 다운로드
# ------------------------------
DOWNLOAD_SCRIPT_TEMPLATE = """\
import sys

import easyocr

try:
    print("Initializing EasyOCR Reader with languages {langs!r}...")
    reader = easyocr.Reader({langs!r}, gpu={gpu!r})
    print("Models downloaded successfully!")
    print("EasyOCR is ready to use.")
except Exception as e:
    print(f"Error downloading models: {{e}}", file=sys.stderr)
    sys.exit(1)
"""


def build_download_script(langs: Sequence[str], gpu: bool = False) -> str:
    return DOWNLOAD_SCRIPT_TEMPLATE.format(langs=list(langs), gpu=bool(gpu))


@contextlib.contextmanager
def temporary_script(path: Path, source: str) -> Iterator[Path]:
    """Write ``source`` to ``path`` for the duration of the block, then remove it.

    Removal is attempted on every exit path; a failed removal is ignored.
    """
    try:
        path.write_text(source, encoding="utf-8")
        yield path
    finally:
        try:
            path.unlink()
        except OSError:
            pass


def download_easyocr_models(
    venv_python: Path,
    script_path: Path,
    langs: Sequence[str] = ("en",),
    gpu: bool = False,
) -> CommandResult:
    """
    임시 드라이버 스크립트를 가상환경 인터프리터로 실행해 EasyOCR 가중치 캐시를 확보.
    exit code != 0, 스크립트 작성 실패, 인터프리터 실행 실패 모두 ModelDownloadError.
    """
    print("[bootstrap/models] downloading EasyOCR models...")
    print("[bootstrap/models] this may take a few minutes on first run...")

    try:
        with temporary_script(script_path, build_download_script(langs, gpu)) as script:
            result = run_command_with_output([venv_python, script])
    except OSError as e:
        print(f"[bootstrap/models] Error running model download: {e}")
        raise ModelDownloadError(f"Failed to run EasyOCR model download: {e}") from e

    if not result.ok:
        print(f"[bootstrap/models] Error downloading models: {result.stderr.strip()}")
        raise ModelDownloadError("Failed to download EasyOCR models", result=result)

    if result.stdout:
        print(result.stdout.rstrip())
    print("[bootstrap/models] EasyOCR models setup complete!")
    return result
