import subprocess
from pathlib import Path

import pytest

from ocr_env.config import Settings


class FakeRun:
    """Stand-in for subprocess.run that records argv and answers from rules."""

    def __init__(self):
        self.calls = []
        self.rules = []

    def on(self, match, returncode=0, stdout="", stderr="", raises=None, action=None):
        self.rules.insert(0, (match, returncode, stdout, stderr, raises, action))
        return self

    def __call__(self, argv, **kwargs):
        argv = [str(a) for a in argv]
        self.calls.append(argv)
        captured = kwargs.get("stdout") == subprocess.PIPE
        for match, returncode, stdout, stderr, raises, action in self.rules:
            if match(argv):
                if action:
                    action(argv)
                if raises:
                    raise raises
                return subprocess.CompletedProcess(
                    argv,
                    returncode,
                    stdout if captured else None,
                    stderr if captured else None,
                )
        return subprocess.CompletedProcess(argv, 0, "" if captured else None, "" if captured else None)

    def matching(self, match):
        return [argv for argv in self.calls if match(argv)]


def is_lookup(tool, name=None):
    return lambda argv: argv[0] == tool and (name is None or argv[1:] == [name])


def is_version_query(argv):
    return len(argv) == 3 and argv[1] == "-c"


def is_venv_create(argv):
    return argv[1:3] == ["-m", "venv"]


def is_pip_upgrade(argv):
    return argv[1:] == ["-m", "pip", "install", "--upgrade", "pip"]


def is_pip_install(package=None):
    def match(argv):
        if argv[1:4] != ["-m", "pip", "install"] or "--upgrade" in argv:
            return False
        return package is None or argv[-1] == package
    return match


def is_driver(argv):
    return len(argv) == 2 and argv[1].endswith(".py")


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    fake.on(is_lookup("which", "python3"), stdout="/usr/bin/python3\n")
    fake.on(is_version_query, stdout="3.11.4\n")
    fake.on(is_venv_create, action=lambda argv: Path(argv[-1]).mkdir(parents=True, exist_ok=True))
    fake.on(is_driver, stdout="Models downloaded successfully!\n")
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def cfg(tmp_path):
    return Settings(BASE_DIR=tmp_path, MIN_FREE_DISK_GIB=0.0, PYTHON=None)
