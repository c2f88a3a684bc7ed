import logging
import stat
from pathlib import Path

import pytest

from core import logger as core_logger
from core.config import config
from invoke_binary import launcher
from invoke_binary.platforms import artifact_name

@pytest.fixture(autouse=True)
def default_config(tmp_path):
    """Start every test from default settings, whatever launcher.yaml says."""
    config.load(tmp_path / "absent.yaml")
    yield config
    config.load(tmp_path / "absent.yaml")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop the launcher stderr handler so it never outlives a captured stream."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    if core_logger._handler is not None:
        root.removeHandler(core_logger._handler)
        core_logger._handler = None


@pytest.fixture
def linux_amd64(monkeypatch):
    monkeypatch.setattr(launcher, "current_platform", lambda: ("linux", "amd64"))
    return artifact_name("linux", "amd64")


@pytest.fixture
def bin_dir(tmp_path):
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def fake_binary(bin_dir, linux_amd64):
    """Write a shell script under the linux/amd64 artifact name."""

    def _write(body: str, executable: bool = True) -> Path:
        path = bin_dir / linux_amd64
        path.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        if executable:
            path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _write
