"""CLI tests.

Each file command runs one operation; failures exit 1 with the error ID,
successes print a check line (or a JSON object with --json).
"""

import json
import logging
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from filetool.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


class TestHelp:
    """Smoke tests: every command is wired up."""

    @pytest.mark.parametrize(
        "command",
        [
            "mkdir", "touch", "sequence", "copy", "copy-all", "copy-content",
            "rmdir", "rm", "rm-all", "rename", "rename-all",
            "sanitize-path", "sanitize-name", "config",
        ],
    )
    def test_help(self, runner: CliRunner, command: str) -> None:
        result = runner.invoke(main, [command, "--help"])
        assert result.exit_code == 0, result.output


class TestCreateCommands:
    """Tests for mkdir, touch and sequence."""

    def test_mkdir(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["mkdir", "data/inbox"])

        assert result.exit_code == 0, result.output
        assert "Created directory data/inbox" in result.output
        assert Path("data/inbox").is_dir()

    def test_mkdir_existing_fails(self, runner: CliRunner) -> None:
        Path("data").mkdir()

        result = runner.invoke(main, ["mkdir", "data"])

        assert result.exit_code == 1
        assert "FT-1001" in result.output

    def test_mkdir_bad_mode(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["mkdir", "data", "--mode", "rwx"])
        assert result.exit_code == 2
        assert not Path("data").exists()

    def test_touch_with_policy(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["touch", "data", "My File.TXT", "-p", "lower"])

        assert result.exit_code == 0, result.output
        assert Path("data/myfile.txt").is_file()

    def test_sequence(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sequence", "data", "a.txt", "3"])

        assert result.exit_code == 0, result.output
        assert sorted(os.listdir("data")) == ["a.txt", "a_1.txt", "a_2.txt"]

    def test_sequence_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sequence", "data", "a.txt", "0"])

        assert result.exit_code == 1
        assert "FT-4001" in result.output

    def test_policy_from_config(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILETOOL_DEFAULT_POLICY", "upper")

        result = runner.invoke(main, ["touch", "data", "a.txt"])

        assert result.exit_code == 0, result.output
        assert os.listdir("data") == ["A.TXT"]


class TestCopyCommands:
    """Tests for copy, copy-all and copy-content."""

    def test_copy_twice(self, runner: CliRunner) -> None:
        Path("notes.txt").write_text("hi")

        runner.invoke(main, ["copy", "notes.txt", "backup"])
        result = runner.invoke(main, ["copy", "notes.txt", "backup"])

        assert result.exit_code == 0, result.output
        assert sorted(os.listdir("backup")) == ["notes(1).txt", "notes.txt"]

    def test_copy_all_reports_skips(self, runner: CliRunner) -> None:
        Path("src").mkdir()
        Path("src/a.txt").write_text("")
        Path("dst").mkdir()
        Path("dst/a.txt").write_text("")

        result = runner.invoke(main, ["copy-all", "src", "dst"])

        assert result.exit_code == 1
        assert "1 files cannot be copied" in result.output

    def test_copy_content(self, runner: CliRunner) -> None:
        Path("a.txt").write_text("new")
        Path("b.txt").write_text("old")

        result = runner.invoke(main, ["copy-content", "a.txt", "b.txt"])

        assert result.exit_code == 0, result.output
        assert Path("b.txt").read_text() == "new"


class TestRemoveCommands:
    """Tests for rmdir, rm and rm-all."""

    def test_rmdir_not_empty(self, runner: CliRunner) -> None:
        Path("data").mkdir()
        Path("data/a.txt").write_text("")

        result = runner.invoke(main, ["rmdir", "data"])

        assert result.exit_code == 1
        assert "FT-3001" in result.output

    def test_rm(self, runner: CliRunner) -> None:
        Path("a.txt").write_text("")

        result = runner.invoke(main, ["rm", "a.txt"])

        assert result.exit_code == 0, result.output
        assert not Path("a.txt").exists()

    def test_rm_all_asks_first(self, runner: CliRunner) -> None:
        Path("data").mkdir()
        Path("data/a.txt").write_text("")

        result = runner.invoke(main, ["rm-all", "data"], input="n\n")

        assert result.exit_code == 1
        assert Path("data/a.txt").exists()

    def test_rm_all_yes(self, runner: CliRunner) -> None:
        Path("data").mkdir()
        Path("data/a.txt").write_text("")

        result = runner.invoke(main, ["rm-all", "data", "--yes"])

        assert result.exit_code == 0, result.output
        assert not Path("data").exists()


class TestRenameCommands:
    """Tests for rename and rename-all."""

    def test_rename(self, runner: CliRunner) -> None:
        Path("a.txt").write_text("")

        result = runner.invoke(main, ["rename", "a.txt", "Big Plan.md", "-p", "pascal"])

        assert result.exit_code == 0, result.output
        assert Path("BigPlan.md").exists()

    def test_rename_all(self, runner: CliRunner) -> None:
        Path("docs").mkdir()
        Path("docs/only.txt").write_text("")

        result = runner.invoke(main, ["rename-all", "docs", "doc.txt"])

        assert result.exit_code == 0, result.output
        assert os.listdir("docs") == ["doc_1.txt"]


class TestSanitizeCommands:
    """Tests for sanitize-path and sanitize-name."""

    def test_sanitize_path(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sanitize-path", "data//in box/..."])
        assert result.output.strip() == "data/inbox"

    def test_sanitize_name(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sanitize-name", "my file", "--policy", "camel"])
        assert result.output.strip() == "myFile"

    def test_sanitize_name_bad_policy(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sanitize-name", "a.txt", "--policy", "foo"])

        assert result.exit_code == 1
        assert "FT-4002" in result.output


class TestJsonOutput:
    """Tests for --json."""

    def test_success(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--json", "mkdir", "data"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"ok": True, "message": "Created directory data"}

    def test_error(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--json", "rm", "ghost.txt"])

        assert result.exit_code == 1
        data = json.loads(result.output.strip().splitlines()[-1])
        assert data["error_id"] == "FT-1002"
        assert data["context"]["path"] == "ghost.txt"


class TestGlobalOptions:
    """Tests for --config and the config group."""

    def test_explicit_config(self, runner: CliRunner) -> None:
        Path("strict.yaml").write_text('default_policy: "lower"\n')

        result = runner.invoke(main, ["--config", "strict.yaml", "touch", "data", "A.TXT"])

        assert result.exit_code == 0, result.output
        assert os.listdir("data") == ["a.txt"]

    def test_log_file(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--log-file", "mkdir", "data"])

        for handler in logging.getLogger().handlers:
            handler.close()
        assert result.exit_code == 0, result.output
        logs = list(Path(".filetool/logs").glob("session_*.log"))
        assert len(logs) == 1
        assert "Created directory data" in logs[0].read_text()

    def test_broken_config_value(self, runner: CliRunner) -> None:
        Path("bad.yaml").write_text('default_mode: "rwx"\n')

        result = runner.invoke(main, ["--config", "bad.yaml", "mkdir", "data"])

        assert result.exit_code == 1
        assert "FT-5001" in result.output

    def test_config_init_and_show(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["config", "init"])
        assert result.exit_code == 0, result.output
        assert Path(".filetool/config.yaml").exists()

        again = runner.invoke(main, ["config", "init"])
        assert again.exit_code == 1

        shown = runner.invoke(main, ["config", "show"])
        assert shown.exit_code == 0, shown.output
        assert "Default mode: 0777" in shown.output
