# config.py
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 작업 디렉토리의 .env를 읽음. 환경 변수가 .env보다 우선 적용됩니다.
env_file_path = Path.cwd() / ".env"


class Settings(BaseSettings):
    BASE_DIR: Path = Field(default_factory=Path.cwd)
    VENV_DIR: Path = Path("venv")
    REQUIREMENTS: List[str] = ["easyocr", "torch", "torchvision"]

    # 지정하면 which/where 탐색을 건너뜀
    PYTHON: Optional[str] = None
    MIN_PYTHON: str = "3.9"

    OCR_LANGS: List[str] = ["en"]
    OCR_GPU: bool = False
    DOWNLOAD_MODELS: bool = True

    MIN_FREE_DISK_GIB: float = 5.0
    TEMP_SCRIPT_NAME: str = "download_models_temp.py"

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_prefix="OCR_ENV_",
        extra="ignore",
    )

    @property
    def venv_path(self) -> Path:
        """VENV_DIR resolved against BASE_DIR when relative."""
        if self.VENV_DIR.is_absolute():
            return self.VENV_DIR
        return self.BASE_DIR / self.VENV_DIR

    @property
    def temp_script_path(self) -> Path:
        return self.BASE_DIR / self.TEMP_SCRIPT_NAME


# 설정 객체 생성
settings = Settings()
