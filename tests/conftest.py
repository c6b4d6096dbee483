"""Pytest configuration and fixtures for cthing-publishing tests."""
from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from cthing_publishing.models import Artifact, ResolvedDependency


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the configuration."""
    for name in ("CTHING_GROUPS", "CTHING_ORG_NAME", "CTHING_ORG_URL", "CTHING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def git_config(tmp_path: Path):
    """Factory fixture writing `.git/config` under tmp_path and returning the root."""
    def _write(content: str) -> Path:
        git_dir = tmp_path / ".git"
        git_dir.mkdir(exist_ok=True)
        (git_dir / "config").write_text(textwrap.dedent(content), encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def remote_config(git_config):
    """Factory fixture writing a typical Git config whose origin has the given URL."""
    def _write(url: str) -> Path:
        return git_config(f"""\
            [core]
                repositoryformatversion = 0
                filemode = true
                bare = false
                logallrefupdates = true
            [remote "origin"]
                url = {url}
                fetch = +refs/heads/*:refs/remotes/origin/*
            [branch "master"]
                remote = origin
                merge = refs/heads/master
            [gui]
                wmstate = normal
                geometry = 2050x1149+28+58 804 393
            """)
    return _write


@pytest.fixture
def snapshot_file(tmp_path: Path):
    """Factory fixture writing a project snapshot JSON file."""
    def _write(data: dict[str, Any], name: str = "project.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


def dep(
    group: str,
    name: str,
    version: str = "1.2.3",
    *,
    artifacts: list[Artifact] | None = None,
    children: list[ResolvedDependency] | None = None,
) -> ResolvedDependency:
    """Build a resolved dependency with a single jar artifact unless told otherwise."""
    return ResolvedDependency(
        group=group,
        name=name,
        version=version,
        artifacts=[Artifact(name=name, extension="jar")] if artifacts is None else artifacts,
        children=children or [],
    )
