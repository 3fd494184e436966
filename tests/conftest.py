"""Shared fixtures: a fake game client, an output tree and stand-in tools."""

import os
import subprocess
from pathlib import Path
from typing import Dict, List

import pytest


def make_files(directory: Path, count: int) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for i in range(count):
        (directory / f"{i:05d}.bin").touch()


class FakeTools:
    """Replacement for subprocess.run that records tool invocations.

    ``produces`` maps a tool name to the files it writes, relative to the
    working directory it is run in, as ``{subpath: file_count}``.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[str] = []
        self.produces: Dict[str, Dict[str, int]] = {}
        self.returncodes: Dict[str, int] = {}

    def __call__(self, cmd, check=False, **kwargs):
        cmd = [str(part) for part in cmd]
        self.calls.append(cmd)
        self.cwds.append(os.getcwd())
        for subpath, count in self.produces.get(cmd[0], {}).items():
            make_files(Path.cwd() / subpath, count)
        return subprocess.CompletedProcess(cmd, self.returncodes.get(cmd[0], 0))

    @property
    def tools(self) -> List[str]:
        return [cmd[0] for cmd in self.calls]


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def client_dir(tmp_path):
    """Game client directory with a Data sub-directory."""
    path = tmp_path / "client"
    (path / "Data").mkdir(parents=True)
    return path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "artifacts"
    path.mkdir()
    return path


@pytest.fixture
def fake_tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr("map_extractor.pipeline.tools.subprocess.run", fake)
    return fake
