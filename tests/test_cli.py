from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from cthing_publishing.cli import app


runner = CliRunner()


def _snapshot(snapshot_file, **extra) -> Path:
    data = {
        "group": "org.cthing",
        "name": "myproject",
        "version": "1.0.0",
        "configurations": [
            {
                "name": "runtimeClasspath",
                "dependencies": [
                    {"group": "org.cthing", "name": "annotations", "version": "1.0.0", "artifacts": [{"name": "annotations", "extension": "jar"}]},
                    {"group": "org.cthing", "name": "cli", "version": "2.0.0", "artifacts": [{"name": "cli", "classifier": "linux", "extension": "zip"}]},
                    {"group": "org.slf4j", "name": "slf4j-api", "version": "2.0.12", "artifacts": [{"name": "slf4j-api", "extension": "jar"}]},
                ],
            }
        ],
        "declared_plugins": ["org.cthing.myplugin", "io.other.plugin"],
    }
    data.update(extra)
    return snapshot_file(data)


def test_scm_command(remote_config) -> None:
    root = remote_config("git@github.com:cthing/test.git")
    result = runner.invoke(app, ["scm", str(root)])
    assert result.exit_code == 0
    assert "scm:git:git://github.com/cthing/test.git" in result.output
    assert "https://github.com/cthing/test" in result.output


def test_scm_command_without_remote(tmp_path: Path) -> None:
    result = runner.invoke(app, ["scm", str(tmp_path)])
    assert result.exit_code == 0
    assert "No SCM information found" in result.output


def test_scm_command_invalid_remote(remote_config) -> None:
    result = runner.invoke(app, ["scm", str(remote_config("not a url"))])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_deps_plain(snapshot_file) -> None:
    result = runner.invoke(app, ["deps", str(_snapshot(snapshot_file)), "--plain"])
    assert result.exit_code == 0
    assert result.output.strip() == "org.cthing:annotations:1.0.0 org.cthing:cli:2.0.0:linux@zip"


def test_deps_tree(snapshot_file) -> None:
    result = runner.invoke(app, ["deps", str(_snapshot(snapshot_file))])
    assert result.exit_code == 0
    assert "org.cthing:myproject:1.0.0" in result.output
    assert "org.cthing:annotations:1.0.0" in result.output
    assert "slf4j" not in result.output


def test_deps_missing_snapshot(tmp_path: Path) -> None:
    result = runner.invoke(app, ["deps", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_plugins_plain(snapshot_file) -> None:
    result = runner.invoke(app, ["plugins", str(_snapshot(snapshot_file)), "--plain"])
    assert result.exit_code == 0
    assert result.output.strip() == "org.cthing.myplugin"


def test_plugins_tree_when_empty(snapshot_file) -> None:
    result = runner.invoke(app, ["plugins", str(_snapshot(snapshot_file, declared_plugins=None))])
    assert result.exit_code == 0
    assert "No plugins found" in result.output


def test_pom_command(snapshot_file) -> None:
    result = runner.invoke(app, ["pom", str(_snapshot(snapshot_file)), "--license", "mit", "--ci", "cthing-jenkins"])
    assert result.exit_code == 0
    assert '"name": "myproject"' in result.output
    assert '"name": "MIT"' in result.output
    assert "C Thing Software Jenkins" in result.output


def test_pom_command_unknown_license(snapshot_file) -> None:
    result = runner.invoke(app, ["pom", str(_snapshot(snapshot_file)), "--license", "bogus"])
    assert result.exit_code != 0


def test_credentials_command(snapshot_file) -> None:
    props = {"gradle.publish.key": "k", "gradle.publish.secret": "s"}
    result = runner.invoke(app, ["credentials", str(_snapshot(snapshot_file, properties=props))])
    assert result.exit_code == 0
    assert "gradle plugin portal" in result.output
    assert "yes" in result.output
    assert "no" in result.output


def test_invalid_config_is_reported(snapshot_file, monkeypatch) -> None:
    monkeypatch.setenv("CTHING_LOG_LEVEL", "LOUD")
    result = runner.invoke(app, ["deps", str(_snapshot(snapshot_file))])
    assert result.exit_code == 1
    assert "Unsupported log level" in result.output
