# --------------------------------------------------
# conftest.py (Test bootstrap)
# --------------------------------------------------
# Every test runs in an isolated environment:
#   - APP_* variables from the host are removed
#   - cwd is a fresh temp directory
#   - the "executable directory" is a separate temp directory
#   - the process-wide resolver is reset before and after
#
# Helpers:
#   write_ini(path, text)  -> writes a config file, returns its path
# --------------------------------------------------

import logging
import os

import pytest

from deploy_config import config, store


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    for name in list(os.environ):
        if name.startswith("APP_"):
            monkeypatch.delenv(name)

    workdir = tmp_path / "work"
    exedir = tmp_path / "bin"
    workdir.mkdir()
    exedir.mkdir()

    monkeypatch.chdir(workdir)
    monkeypatch.setattr(store, "executable_dir", lambda: exedir)

    monkeypatch.setattr(config, "_resolver", None)
    monkeypatch.setattr(config, "_settings", None)

    # main() installs its own root handler; put the old ones back
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield {"workdir": workdir, "exedir": exedir}

    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def write_ini():
    def _write(path, text):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
