#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
EasyOCR virtual environment setup runner

- Locate a host Python (which python3 / which python / where python)
- Create ./venv, upgrade pip, install easyocr, torch, torchvision
- Warm the EasyOCR model cache (non-fatal on failure)
- Print the activation command for this platform

A bare run needs no arguments; everything is configurable through
OCR_ENV_* environment variables or a .env file (see config.py).
Exit code is 0 on success and 1 on any fatal step failure.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import console
from .bootstrap.manager import setup_environment
from .config import Settings
from .errors import SetupError


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.venv_dir is not None:
        overrides["VENV_DIR"] = Path(args.venv_dir)
    if args.skip_models:
        overrides["DOWNLOAD_MODELS"] = False
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="EasyOCR virtual environment setup")
    parser.add_argument("--venv-dir", default=None, help="Environment directory (default: ./venv)")
    parser.add_argument("--skip-models", action="store_true", help="Do not pre-download EasyOCR models")
    args = parser.parse_args(argv)

    console.banner("EasyOCR environment setup")

    try:
        setup_environment(build_settings(args))
    except (SetupError, OSError) as e:
        console.err(f"Error setting up Python environment: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
