"""Tests for RealGit sequencing over a recording executor."""

from pathlib import Path

import pytest

from sprout.core.errors import ExternalProcessError
from sprout.core.git.abc import CommitResult
from sprout.core.git.real import RealGit
from tests.fakes.console import FakeConsole
from tests.fakes.executor import FakeCommandExecutor

MESSAGE = "chore: initialize project with sprout"
STAGED_CHECK = ("git", "diff", "--cached", "--quiet")
HEAD_CHECK = ("git", "rev-parse", "--verify", "--quiet", "HEAD")
UNBORN_HEAD = 1


def test_ensure_initialized_on_fresh_directory(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 1})
    git = RealGit(executor, FakeConsole())

    result = git.ensure_initialized(tmp_path, MESSAGE)

    assert result is CommitResult.COMMITTED
    assert executor.commands == [
        ("git", "init"),
        ("git", "add", "."),
        STAGED_CHECK,
        ("git", "commit", "-m", MESSAGE),
    ]
    assert all(cwd == tmp_path for cwd, _, _ in executor.calls)


def test_ensure_initialized_skips_init_when_git_dir_exists(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 1})
    git = RealGit(executor, FakeConsole())

    result = git.ensure_initialized(tmp_path, MESSAGE)

    assert result is CommitResult.COMMITTED
    assert ("git", "init") not in executor.commands
    assert executor.commands == [
        ("git", "add", "."),
        STAGED_CHECK,
        ("git", "commit", "-m", MESSAGE),
    ]


def test_second_run_on_unchanged_tree_stages_and_skips_empty_commit(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 0})
    git = RealGit(executor, FakeConsole())

    result = git.ensure_initialized(tmp_path, MESSAGE)

    assert result is CommitResult.NOTHING_TO_COMMIT
    assert executor.commands == [("git", "add", "."), STAGED_CHECK, HEAD_CHECK]


def test_staged_check_runs_quietly(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 1})
    git = RealGit(executor, FakeConsole())

    git.commit_all(tmp_path, MESSAGE)

    quiet_commands = [cmd for _, cmd, quiet in executor.calls if quiet]
    assert quiet_commands == [STAGED_CHECK]


def test_mutating_commands_announce_intent_first(tmp_path: Path) -> None:
    console = FakeConsole()
    git = RealGit(FakeCommandExecutor(exit_codes={STAGED_CHECK: 1}), console)

    git.ensure_initialized(tmp_path, MESSAGE)

    assert console.lines == [
        "  $ git init",
        "  $ git add .",
        f"  $ git commit -m {MESSAGE}",
    ]


def test_failed_commit_raises_external_process_error(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(
        exit_codes={STAGED_CHECK: 1, ("git", "commit", "-m", MESSAGE): 1}
    )
    git = RealGit(executor, FakeConsole())

    with pytest.raises(ExternalProcessError) as exc_info:
        git.ensure_initialized(tmp_path, MESSAGE)

    assert exc_info.value.exit_code == 1
    assert "Failed to commit changes" in str(exc_info.value)


def test_unexpected_staged_check_status_raises(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 128})
    git = RealGit(executor, FakeConsole())

    with pytest.raises(ExternalProcessError):
        git.commit_all(tmp_path, MESSAGE)


def test_has_origin_reflects_exit_code(tmp_path: Path) -> None:
    get_url = ("git", "remote", "get-url", "origin")

    assert RealGit(FakeCommandExecutor(), FakeConsole()).has_origin(tmp_path)
    assert not RealGit(
        FakeCommandExecutor(exit_codes={get_url: 2}), FakeConsole()
    ).has_origin(tmp_path)


def test_set_origin_replaces_existing_remote(tmp_path: Path) -> None:
    executor = FakeCommandExecutor()
    git = RealGit(executor, FakeConsole())

    git.set_origin(tmp_path, "https://github.com/alice/demo.git", "main")

    assert executor.commands == [
        ("git", "remote", "get-url", "origin"),
        ("git", "remote", "remove", "origin"),
        ("git", "remote", "add", "origin", "https://github.com/alice/demo.git"),
        ("git", "branch", "-M", "main"),
    ]


def test_set_origin_without_existing_remote_skips_removal(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("git", "remote", "get-url", "origin"): 2})
    console = FakeConsole()
    git = RealGit(executor, console)

    git.set_origin(tmp_path, "https://github.com/alice/demo.git", "main")

    assert ("git", "remote", "remove", "origin") not in executor.commands
    assert "No existing 'origin' remote found" in console.output


def test_remove_origin_failure_is_ignored(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("git", "remote", "remove", "origin"): 2})
    git = RealGit(executor, FakeConsole())

    git.remove_origin(tmp_path)

    assert executor.commands == [("git", "remote", "remove", "origin")]


def test_set_origin_survives_failed_removal(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("git", "remote", "remove", "origin"): 2})
    git = RealGit(executor, FakeConsole())

    git.set_origin(tmp_path, "https://github.com/alice/demo.git", "main")

    assert executor.commands[-1] == ("git", "branch", "-M", "main")


def test_push_failure_is_fatal(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={("git", "push", "-u", "origin", "main"): 128})
    git = RealGit(executor, FakeConsole())

    with pytest.raises(ExternalProcessError) as exc_info:
        git.push_current_branch(tmp_path, "main")

    assert exc_info.value.cmd == ["git", "push", "-u", "origin", "main"]


def test_missing_git_binary_propagates(tmp_path: Path) -> None:
    git = RealGit(FakeCommandExecutor(missing_programs={"git"}), FakeConsole())

    with pytest.raises(ExternalProcessError):
        git.ensure_initialized(tmp_path, MESSAGE)


def test_unborn_head_with_nothing_staged_still_gets_first_commit(tmp_path: Path) -> None:
    # `git init` already ran (by the user), but nothing was ever committed
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 0, HEAD_CHECK: UNBORN_HEAD})
    git = RealGit(executor, FakeConsole())

    result = git.ensure_initialized(tmp_path, MESSAGE)

    assert result is CommitResult.COMMITTED
    assert executor.commands == [
        ("git", "add", "."),
        STAGED_CHECK,
        HEAD_CHECK,
        ("git", "commit", "--allow-empty", "-m", MESSAGE),
    ]


def test_fresh_empty_directory_commits_empty_tree(tmp_path: Path) -> None:
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 0, HEAD_CHECK: UNBORN_HEAD})
    git = RealGit(executor, FakeConsole())

    result = git.ensure_initialized(tmp_path, MESSAGE)

    assert result is CommitResult.COMMITTED
    assert executor.commands[0] == ("git", "init")
    assert executor.commands[-1] == ("git", "commit", "--allow-empty", "-m", MESSAGE)


def test_head_check_runs_only_when_nothing_is_staged(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    executor = FakeCommandExecutor(exit_codes={STAGED_CHECK: 1})
    git = RealGit(executor, FakeConsole())

    git.commit_all(tmp_path, MESSAGE)

    assert HEAD_CHECK not in executor.commands
