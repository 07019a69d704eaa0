"""Tests for `sprout gitprep`."""

from pathlib import Path

from click.testing import CliRunner

from sprout.cli.cli import cli
from sprout.core.git.fake import FakeGit
from sprout.core.github.fake import FakeGitHub
from sprout.core.github.types import RepoCreationFailed
from tests.fakes.console import FakeConsole
from tests.test_utils.context_builders import build_test_context


def test_gitprep_without_token_skips_remote_and_succeeds(tmp_path: Path) -> None:
    git = FakeGit()
    github = FakeGitHub()
    console = FakeConsole()
    ctx = build_test_context(cwd=tmp_path, git=git, github=github, console=console)

    result = CliRunner().invoke(
        cli, ["gitprep", "--path", ".", "--github", "alice", "--repo", "demo"], obj=ctx
    )

    assert result.exit_code == 0
    assert github.create_calls == []
    assert git.init_calls == [tmp_path / "."]
    assert len(git.commits) == 1
    assert git.pushes == []
    assert "No GitHub token found" in console.output


def test_gitprep_writes_readme_and_gitignore(tmp_path: Path) -> None:
    ctx = build_test_context(cwd=tmp_path)

    CliRunner().invoke(cli, ["gitprep"], obj=ctx)

    readme = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert readme.startswith(f"# {tmp_path.name}\n")
    assert "Initialized by sprout gitprep on 2024-01-15" in readme
    assert (tmp_path / ".gitignore").is_file()


def test_gitprep_keeps_existing_readme(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("# Existing\n", encoding="utf-8")
    ctx = build_test_context(cwd=tmp_path)

    CliRunner().invoke(cli, ["gitprep"], obj=ctx)

    assert (tmp_path / "README.md").read_text(encoding="utf-8") == "# Existing\n"


def test_gitprep_no_files(tmp_path: Path) -> None:
    git = FakeGit()
    ctx = build_test_context(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["gitprep", "--no-files"], obj=ctx)

    assert result.exit_code == 0
    assert list(tmp_path.iterdir()) == []
    assert len(git.commits) == 1


def test_gitprep_missing_path_is_fatal(tmp_path: Path) -> None:
    git = FakeGit()
    console = FakeConsole()
    ctx = build_test_context(cwd=tmp_path, git=git, console=console)

    result = CliRunner().invoke(cli, ["gitprep", "--path", "nowhere"], obj=ctx)

    assert result.exit_code == 1
    assert console.error_lines[0].startswith("Uh-oh! Path does not exist:")
    assert git.init_calls == []


def test_gitprep_with_token_defaults_repo_to_directory_name(tmp_path: Path) -> None:
    project = tmp_path / "my-project"
    project.mkdir()
    git = FakeGit()
    github = FakeGitHub()
    ctx = build_test_context(cwd=tmp_path, git=git, github=github)

    result = CliRunner().invoke(
        cli, ["gitprep", "--path", "my-project", "--github", "alice", "--token", "tok"], obj=ctx
    )

    assert result.exit_code == 0
    assert github.create_calls == [("alice", "my-project", "tok")]
    assert git.pushes == [(project, "main")]


def test_gitprep_api_failure_still_exits_zero(tmp_path: Path) -> None:
    git = FakeGit()
    github = FakeGitHub(outcome=RepoCreationFailed(status=500, body="boom"))
    ctx = build_test_context(cwd=tmp_path, git=git, github=github)

    result = CliRunner().invoke(
        cli, ["gitprep", "--github", "alice", "--repo", "demo", "--token", "tok"], obj=ctx
    )

    assert result.exit_code == 0
    assert len(git.commits) == 1


def test_gitprep_push_failure_exits_one(tmp_path: Path) -> None:
    console = FakeConsole()
    ctx = build_test_context(cwd=tmp_path, git=FakeGit(push_fails=True), console=console)

    result = CliRunner().invoke(
        cli, ["gitprep", "--github", "alice", "--token", "tok"], obj=ctx
    )

    assert result.exit_code == 1
    assert console.error_lines[0].startswith("Uh-oh! Failed to push")


def test_gitprep_link_flag_pushes_without_token(tmp_path: Path) -> None:
    git = FakeGit()
    ctx = build_test_context(cwd=tmp_path, git=git)

    result = CliRunner().invoke(
        cli, ["gitprep", "--github", "alice", "--repo", "demo", "--link"], obj=ctx
    )

    assert result.exit_code == 0
    assert git.set_origin_calls == [(tmp_path / ".", "https://github.com/alice/demo.git", "main")]
    assert git.pushes == [(tmp_path / ".", "main")]
