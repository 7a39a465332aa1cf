from pathlib import Path

import pytest

from ocr_env.bootstrap import install
from ocr_env.errors import CommandFailedError, ModelDownloadError

from conftest import is_driver, is_pip_install

VENV_PYTHON = Path("/work/venv/bin/python")


def test_install_packages_in_order(fake_run):
    installed = install.install_packages(VENV_PYTHON, ["easyocr", "torch", "torchvision"])
    assert installed == ["easyocr", "torch", "torchvision"]
    assert [argv[-1] for argv in fake_run.matching(is_pip_install())] == installed


def test_install_packages_stops_at_first_failure(fake_run):
    fake_run.on(is_pip_install("torch"), returncode=1)
    with pytest.raises(CommandFailedError):
        install.install_packages(VENV_PYTHON, ["easyocr", "torch", "torchvision"])
    assert fake_run.matching(is_pip_install("torchvision")) == []


def test_build_download_script_is_valid_python():
    source = install.build_download_script(["en", "ko"], gpu=True)
    compile(source, "download_models_temp.py", "exec")
    assert "easyocr.Reader(['en', 'ko'], gpu=True)" in source


def test_temporary_script_removed_when_block_raises(tmp_path):
    path = tmp_path / "driver.py"
    with pytest.raises(RuntimeError):
        with install.temporary_script(path, "print('hi')\n"):
            assert path.read_text(encoding="utf-8") == "print('hi')\n"
            raise RuntimeError("boom")
    assert not path.exists()


def test_temporary_script_ignores_cleanup_failure(tmp_path, mocker):
    path = tmp_path / "driver.py"
    mocker.patch.object(Path, "unlink", side_effect=PermissionError("locked"))
    with install.temporary_script(path, "pass\n") as script:
        assert script == path


def test_download_models_success(fake_run, tmp_path, capsys):
    seen = []
    script = tmp_path / "download_models_temp.py"
    fake_run.on(is_driver, stdout="Models downloaded successfully!\n",
                action=lambda argv: seen.append(Path(argv[1]).exists()))

    result = install.download_easyocr_models(VENV_PYTHON, script)

    assert result.ok
    assert seen == [True]
    assert not script.exists()
    out = capsys.readouterr().out
    assert "Models downloaded successfully!" in out
    assert "EasyOCR models setup complete!" in out


def test_download_models_failure_cleans_up(fake_run, tmp_path, capsys):
    script = tmp_path / "download_models_temp.py"
    fake_run.on(is_driver, returncode=1, stderr="Error downloading models: no network")

    with pytest.raises(ModelDownloadError) as exc:
        install.download_easyocr_models(VENV_PYTHON, script)

    assert exc.value.result.returncode == 1
    assert not script.exists()
    assert "no network" in capsys.readouterr().out


def test_temporary_script_removed_when_write_fails(tmp_path, mocker):
    path = tmp_path / "driver.py"

    def partial_write(self, data, encoding=None):
        with open(self, "w", encoding=encoding) as f:
            f.write(data[:3])
        raise OSError(28, "No space left on device")

    mocker.patch.object(Path, "write_text", autospec=True, side_effect=partial_write)
    with pytest.raises(OSError):
        with install.temporary_script(path, "print('hi')\n"):
            pytest.fail("block must not run when the script cannot be written")
    assert not path.exists()


def test_download_models_spawn_failure_is_download_error(fake_run, tmp_path):
    script = tmp_path / "download_models_temp.py"
    fake_run.on(is_driver, raises=FileNotFoundError("venv/bin/python"))

    with pytest.raises(ModelDownloadError) as exc:
        install.download_easyocr_models(VENV_PYTHON, script)

    assert isinstance(exc.value.__cause__, FileNotFoundError)
    assert not script.exists()
