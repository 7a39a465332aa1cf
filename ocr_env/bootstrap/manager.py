"""
가상환경 프로비저닝 관리자

동작 개요:
1) 호스트 인터프리터 탐색:   resolve.resolve_interpreter()
2) 버전 확인:               resolve.check_interpreter_version()
3) 디스크 여유 공간 경고:     probe.free_disk_gib()  (치명적 아님)
4) 가상환경 생성:            install.create_venv()
5) pip 업그레이드:           install.upgrade_pip()
6) 패키지 순차 설치:          install.install_packages()
7) EasyOCR 모델 다운로드:     install.download_easyocr_models()  (실패 시 경고만)

주의:
- 1)~6) 단계의 실패는 그대로 전파된다. 이미 생성된 가상환경은 되돌리지 않는다.
- 7) 단계는 실패해도 설치는 완료로 간주한다. EasyOCR이 첫 사용 시 모델을 받는다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .. import console
from ..config import Settings, settings as default_settings
from ..errors import ModelDownloadError
from . import install, probe, resolve


@dataclass
class SetupResult:
    """Outcome of a completed provisioning run."""
    interpreter: str
    venv_dir: Path
    venv_python: Path
    installed: List[str] = field(default_factory=list)
    models_ready: bool = False


def warn_low_disk(path: Path, minimum_gib: float) -> None:
    free = probe.free_disk_gib(path)
    if free < minimum_gib:
        console.warn(
            f"Only {free:.1f} GiB free at {path} (recommended >= {minimum_gib:.1f} GiB). "
            "The OCR stack is large; installation may fail."
        )


def ensure_models(venv_python: Path, cfg: Settings) -> bool:
    """Run the model-download step; a failure is reported and swallowed."""
    try:
        install.download_easyocr_models(
            venv_python,
            cfg.temp_script_path,
            langs=cfg.OCR_LANGS,
            gpu=cfg.OCR_GPU,
        )
        return True
    except ModelDownloadError as e:
        console.err(f"Error downloading EasyOCR models: {e}")
        console.warn("Models will be downloaded automatically on first use.")
        return False


def setup_environment(cfg: Optional[Settings] = None, platform: Optional[str] = None) -> SetupResult:
    """
    전체 프로비저닝을 순서대로 실행하고 SetupResult를 반환.
    - cfg가 없으면 모듈 기본 settings 사용.
    - platform은 테스트용 (기본: sys.platform).
    """
    if cfg is None:
        cfg = default_settings

    console.info("Setting up Python environment...")
    python = resolve.resolve_interpreter(cfg.PYTHON, platform=platform)
    console.info(f"Using Python at: {python}")

    version = resolve.check_interpreter_version(python, cfg.MIN_PYTHON)
    console.ok(f"Python {version} detected")

    venv_dir = cfg.venv_path
    warn_low_disk(venv_dir, cfg.MIN_FREE_DISK_GIB)

    install.create_venv(python, venv_dir)
    venv_python = resolve.venv_python(venv_dir, platform=platform)

    install.upgrade_pip(venv_python)
    installed = install.install_packages(venv_python, cfg.REQUIREMENTS)
    console.ok("Python dependencies installation complete!")

    result = SetupResult(
        interpreter=python,
        venv_dir=venv_dir,
        venv_python=venv_python,
        installed=installed,
    )

    if cfg.DOWNLOAD_MODELS:
        result.models_ready = ensure_models(venv_python, cfg)
    else:
        console.info("Skipping EasyOCR model download.")

    console.ok("Python environment setup complete!")
    console.info("To activate the virtual environment, run:")
    print(resolve.activation_hint(venv_dir, platform=platform))
    return result
