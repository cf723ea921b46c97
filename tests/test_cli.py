"""
Tests for the hookstage command line.
"""

import pytest
from typer.testing import CliRunner

from hookstage.cli import app
from hookstage.installer import get_template_path

runner = CliRunner()


class TestInstall:
    def test_default_hook(self, repo):
        result = runner.invoke(app, ["install", "--root", str(repo)])

        assert result.exit_code == 0, result.output
        assert "Installed: pre-commit" in result.output
        hook = repo / ".git" / "hooks" / "pre-commit"
        assert hook.read_bytes() == get_template_path().read_bytes()

    def test_named_hooks_and_backup(self, repo):
        hooks_dir = repo / ".git" / "hooks"
        hooks_dir.mkdir()
        (hooks_dir / "pre-push").write_text("old")

        result = runner.invoke(app, ["install", "pre-commit", "pre-push", "--root", str(repo)])

        assert result.exit_code == 0, result.output
        assert (hooks_dir / "pre-commit").is_file()
        assert (hooks_dir / "pre-push.backup").read_text() == "old"
        assert "pre-push.backup" in result.output

    def test_newer_hook_name(self, repo):
        result = runner.invoke(app, ["install", "pre-merge-commit", "--root", str(repo)])

        assert result.exit_code == 0, result.output
        assert (repo / ".git" / "hooks" / "pre-merge-commit").is_file()

    def test_unknown_hook(self, repo):
        result = runner.invoke(app, ["install", "pre-everything", "--root", str(repo)])

        assert result.exit_code == 2
        assert not (repo / ".git" / "hooks").exists()

    @pytest.mark.usefixtures("no_outer_repo")
    def test_outside_repository_is_a_soft_abort(self, tmp_path):
        result = runner.invoke(app, ["install", "--root", str(tmp_path)])

        assert result.exit_code == 0
        assert "Unable to find a .git directory" in result.output


class TestCopy:
    @pytest.fixture
    def asset(self, repo):
        (repo / "tools").mkdir()
        source = repo / "tools" / "lint.cfg"
        source.write_text("[lint]\n")
        return source

    def test_copies_into_project(self, repo, asset):
        result = runner.invoke(app, ["copy", "lint.cfg", "setup.cfg", "--from", str(asset.parent)])

        assert result.exit_code == 0, result.output
        assert "Copied 1 file(s)" in result.output
        assert (repo / "setup.cfg").read_text() == "[lint]\n"

    def test_empty_target_mirrors_source(self, repo, asset):
        result = runner.invoke(app, ["copy", "lint.cfg", "", "--overwrite", "--from", str(asset.parent)])

        assert result.exit_code == 0, result.output
        assert (repo / "lint.cfg").read_text() == "[lint]\n"

    def test_conflict_exits_one(self, repo, asset):
        (repo / "setup.cfg").write_text("mine")

        result = runner.invoke(app, ["copy", "lint.cfg", "setup.cfg", "--from", str(asset.parent)])

        assert result.exit_code == 1
        assert "Conflicts detected (1)" in result.output
        assert (repo / "setup.cfg").read_text() == "mine"

    def test_overwrite(self, repo, asset):
        (repo / "setup.cfg").write_text("mine")

        result = runner.invoke(
            app, ["copy", "lint.cfg", "setup.cfg", "--overwrite", "--from", str(asset.parent)]
        )

        assert result.exit_code == 0, result.output
        assert (repo / "setup.cfg").read_text() == "[lint]\n"

    def test_escaping_target_exits_two(self, tmp_path, asset):
        result = runner.invoke(app, ["copy", "lint.cfg", "../escaped.cfg", "--from", str(asset.parent)])

        assert result.exit_code == 2
        assert "Destination must be within project root" in result.output
        assert not (tmp_path / "escaped.cfg").exists()

    def test_missing_source_exits_one(self, repo):
        result = runner.invoke(app, ["copy", "[bold]nope.cfg", "--from", str(repo)])

        assert result.exit_code == 1
        assert f"Error: Unable to read copy source {repo / '[bold]nope.cfg'}" in result.output.splitlines()

    def test_conflict_path_is_printed_verbatim(self, repo):
        tools = repo / "tools"
        tools.mkdir()
        (tools / "[red]lint.cfg").write_text("new")
        (repo / "[red]lint.cfg").write_text("mine")

        result = runner.invoke(app, ["copy", "[red]lint.cfg", "--from", str(tools)])

        assert result.exit_code == 1
        assert f"    {repo / '[red]lint.cfg'} already exists" in result.output.splitlines()


class TestRootAndStatus:
    def test_root(self, repo):
        nested = repo / "a" / "b"
        nested.mkdir(parents=True)

        result = runner.invoke(app, ["root", str(nested)])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == str(repo)

    def test_status_lists_installed_hooks(self, repo):
        runner.invoke(app, ["install", "--root", str(repo)])

        result = runner.invoke(app, ["status", "--root", str(repo)])

        assert result.exit_code == 0, result.output
        assert "pre-commit" in result.output
        assert "pre-push" not in result.output

    def test_status_without_hooks(self, repo):
        result = runner.invoke(app, ["status", "--root", str(repo)])

        assert result.exit_code == 0, result.output
        assert "No hooks installed" in result.output


class TestRun:
    def test_nothing_configured(self, repo):
        result = runner.invoke(app, ["run", "pre-commit", "--root", str(repo)])

        assert result.exit_code == 0, result.output

    def test_failing_command_sets_exit_status(self, repo):
        (repo / "pyproject.toml").write_text('[tool.hookstage.hooks]\npre-commit = ["exit 4"]\n')

        result = runner.invoke(app, ["run", "pre-commit", "--root", str(repo)])

        assert result.exit_code == 4
        assert "pre-commit failed" in result.output

    @pytest.mark.parametrize(
        "body",
        ["[tool.hookstage.hooks]\npre-commit = 1\n", '[tool.hookstage]\nhooks = ["x"]\n'],
    )
    def test_bad_config(self, repo, body):
        (repo / "pyproject.toml").write_text(body)

        result = runner.invoke(app, ["run", "pre-commit", "--root", str(repo)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, AttributeError)
        assert "Error:" in result.output
