"""Tests for the project CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from jpm.core.errors import RootNotFoundError
from jpm.core.project import ProjectDescriptor
from jpm.main import app

runner = CliRunner()


def _descriptor(root: Path, fake_runner) -> ProjectDescriptor:
    return ProjectDescriptor(cwd=root, runner=fake_runner, boundary=root)


class TestProjectCommands:
    def test_info(self, java_project: Path, tagged_runner):
        project = _descriptor(java_project, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "info"])
        assert result.exit_code == 0
        assert "myapp" in result.output
        assert "2.3.1" in result.output
        assert "myapp-2.3.1.jar" in result.output

    def test_root(self, java_project: Path, tagged_runner):
        project = _descriptor(java_project, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "root"])
        assert result.exit_code == 0
        assert result.output.strip() == str(java_project)

    def test_version(self, java_project: Path, tagged_runner):
        project = _descriptor(java_project, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "version"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.3.1"

    def test_jar_name(self, java_project: Path, tagged_runner):
        project = _descriptor(java_project, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "jar-name"])
        assert result.exit_code == 0
        assert result.output.strip() == "myapp-2.3.1.jar"

    def test_jar_name_without_module(self, tmp_path: Path, tagged_runner):
        root = tmp_path / "repo"
        (root / ".git").mkdir(parents=True)
        project = _descriptor(root, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "jar-name"])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_root_not_found_exits_1(self, tmp_path: Path):
        error = RootNotFoundError(tmp_path, "src/main/java", ".git")
        with patch("jpm.cli.ProjectDescriptor", side_effect=error):
            result = runner.invoke(app, ["project", "root"])
        assert result.exit_code == 1
        assert "No project root found" in result.output

    def test_bad_setting_exits_1(self, tmp_path: Path):
        with patch("jpm.cli.load_settings", side_effect=ValueError("JPM_GIT_TIMEOUT must be a number")):
            result = runner.invoke(app, ["project", "version"])
        assert result.exit_code == 1
        assert "JPM_GIT_TIMEOUT" in result.output

    def test_unwritable_output_dir_exits_1(self):
        error = PermissionError(13, "Permission denied", "/srv/app/build")
        with patch("jpm.cli.ProjectDescriptor", side_effect=error):
            result = runner.invoke(app, ["project", "root"])
        assert result.exit_code == 1
        assert "Permission denied" in result.output


class TestBracketedPaths:
    def _bracketed_project(self, tmp_path: Path, name: str) -> Path:
        root = tmp_path / name
        (root / "src" / "main" / "java" / "myapp").mkdir(parents=True)
        return root

    def test_root_with_closing_tag(self, tmp_path: Path, tagged_runner):
        root = self._bracketed_project(tmp_path, "proj[/]")
        project = _descriptor(root, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "root"])
        assert result.exit_code == 0
        assert result.output.strip() == str(root)

    def test_root_with_style_tag(self, tmp_path: Path, tagged_runner):
        root = self._bracketed_project(tmp_path, "[bold]proj")
        project = _descriptor(root, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "root"])
        assert result.exit_code == 0
        assert result.output.strip() == str(root)

    def test_info_with_bracketed_root(self, tmp_path: Path, tagged_runner):
        root = self._bracketed_project(tmp_path, "proj[/]")
        project = _descriptor(root, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "info"])
        assert result.exit_code == 0
        assert "myapp-2.3.1.jar" in result.output

    def test_error_message_keeps_brackets(self, tmp_path: Path, tagged_runner):
        root = tmp_path / "[bold]repo[/]"
        (root / ".git").mkdir(parents=True)
        project = _descriptor(root, tagged_runner)
        with patch("jpm.cli.project_cmd.load_project", return_value=project):
            result = runner.invoke(app, ["project", "jar-name"])
        assert result.exit_code == 1
        assert str(root) in result.output
