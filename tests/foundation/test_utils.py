"""Tests for the Sanitizer: path/filename sanitization and casing."""

from datetime import date
from pathlib import Path

import pytest

from filetool.foundation.errors import ErrorCode, FileToolError
from filetool.foundation.types import CasingPolicy
from filetool.foundation.utils import (
    ensure_dir,
    has_extension,
    join_filename,
    sanitize_filename,
    sanitize_path,
    split_filename,
    to_camel,
    to_pascal,
    with_date_suffix,
)

DAY = date(2024, 3, 9)


class TestSanitizePath:
    """Tests for directory path sanitization."""

    def test_keeps_clean_paths(self) -> None:
        assert sanitize_path("data/inbox") == "data/inbox"
        assert sanitize_path("/srv/data") == "/srv/data"

    def test_strips_disallowed_chars(self) -> None:
        assert sanitize_path("my dir/sub-folder_1") == "mydir/subfolder1"
        assert sanitize_path("ré$umé") == "rum"

    def test_collapses_slashes(self) -> None:
        assert sanitize_path("data///inbox//new") == "data/inbox/new"

    def test_collapses_dot_runs(self) -> None:
        assert sanitize_path("a...b") == "a..b"
        assert sanitize_path("a....../b") == "a../b"

    def test_keeps_single_dots(self) -> None:
        assert sanitize_path("dir/a.txt") == "dir/a.txt"
        assert sanitize_path("./data") == "./data"

    def test_strips_trailing_slash_and_dots(self) -> None:
        assert sanitize_path("data/") == "data"
        assert sanitize_path("data/..") == "data"
        assert sanitize_path("data/.../") == "data"
        assert sanitize_path("a/../..") == "a"

    def test_all_disallowed_is_empty(self) -> None:
        assert sanitize_path("***") == ""
        assert sanitize_path("/") == ""
        assert sanitize_path("..") == ""

    def test_accepts_path_objects(self) -> None:
        assert sanitize_path(Path("data") / "inbox") == "data/inbox"

    @pytest.mark.parametrize(
        "value",
        [
            "data/inbox",
            "a/../..",
            "x//y///z/",
            "...",
            "a.../.b./",
            "/./../.",
            "weird $path//with...dots/..",
            "",
        ],
    )
    def test_idempotent(self, value: str) -> None:
        once = sanitize_path(value)
        assert sanitize_path(once) == once


class TestSanitizeFilename:
    """Tests for filename sanitization and casing policies."""

    def test_lower(self) -> None:
        assert sanitize_filename("My File.TXT", "lower") == "myfile.txt"

    def test_upper(self) -> None:
        assert sanitize_filename("my file.txt", "upper") == "MYFILE.TXT"

    def test_none_strips_whitespace(self) -> None:
        assert sanitize_filename("My File.TXT") == "MyFile.TXT"
        assert sanitize_filename("My File.TXT", "none") == "MyFile.TXT"
        assert sanitize_filename("My File.TXT", "") == "MyFile.TXT"
        assert sanitize_filename("My File.TXT", None) == "MyFile.TXT"

    def test_strips_disallowed_chars(self) -> None:
        assert sanitize_filename("a b*c?.txt") == "abc.txt"
        assert sanitize_filename("../../etc/passwd") == "etcpasswd"

    def test_keeps_underscore_and_hyphen(self) -> None:
        assert sanitize_filename("a_1-final.txt") == "a_1-final.txt"

    def test_unicode_letters(self) -> None:
        assert sanitize_filename("Ünïcode fïle.txt", "lower") == "ünïcodefïle.txt"

    def test_collapses_dots(self) -> None:
        assert sanitize_filename("a..txt") == "a.txt"
        assert sanitize_filename(".hidden") == "hidden"

    def test_camel(self) -> None:
        assert sanitize_filename("my file", "camel") == "myFile"
        assert sanitize_filename("the quick brown", "camel") == "theQuickBrown"

    def test_camel_single_word(self) -> None:
        assert sanitize_filename("Report", "camel") == "report"

    def test_camel_empty_is_invalid_input(self) -> None:
        with pytest.raises(FileToolError) as exc_info:
            sanitize_filename("   ", "camel")
        assert exc_info.value.code == ErrorCode.INVALID_INPUT

    def test_pascal(self) -> None:
        assert sanitize_filename("my big FILE.TXT", "pascal") == "MyBigFile.txt"

    def test_date(self) -> None:
        assert sanitize_filename("report", "date", today=DAY) == "report_2024-03-09."
        assert sanitize_filename("My Report.TXT", "date", today=DAY) == "myreport_2024-03-09.txt"

    def test_date_defaults_to_today(self) -> None:
        today = date.today().isoformat()
        assert sanitize_filename("report.txt", "date") == f"report_{today}.txt"
        assert sanitize_filename("report", "date") == f"report_{today}."

    def test_policy_is_case_insensitive(self) -> None:
        assert sanitize_filename("My File", "LOWER") == "myfile"
        assert sanitize_filename("my file", CasingPolicy.CAMEL) == "myFile"

    def test_invalid_policy(self) -> None:
        with pytest.raises(FileToolError) as exc_info:
            sanitize_filename("report.txt", "foo")
        assert exc_info.value.code == ErrorCode.INVALID_POLICY
        assert "foo" in exc_info.value.message

    def test_nothing_left_is_invalid_input(self) -> None:
        with pytest.raises(FileToolError) as exc_info:
            sanitize_filename("***")
        assert exc_info.value.code == ErrorCode.INVALID_INPUT


class TestCasingPolicy:
    """Tests for policy tag parsing."""

    def test_parse_tags(self) -> None:
        assert CasingPolicy.parse("") is CasingPolicy.NONE
        assert CasingPolicy.parse("none") is CasingPolicy.NONE
        assert CasingPolicy.parse(None) is CasingPolicy.NONE
        assert CasingPolicy.parse("Pascal") is CasingPolicy.PASCAL
        assert CasingPolicy.parse(" date ") is CasingPolicy.DATE

    def test_parse_passes_through_members(self) -> None:
        assert CasingPolicy.parse(CasingPolicy.UPPER) is CasingPolicy.UPPER

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(FileToolError) as exc_info:
            CasingPolicy.parse("snake")
        assert exc_info.value.code == ErrorCode.INVALID_POLICY

    def test_tag(self) -> None:
        assert CasingPolicy.NONE.tag == "none"
        assert CasingPolicy.LOWER.tag == "lower"


class TestStrings:
    """Tests for the casing and splitting helpers."""

    def test_split_filename(self) -> None:
        assert split_filename("report.final.txt") == ("report.final", "txt")
        assert split_filename("README") == ("README", "")

    def test_join_filename(self) -> None:
        assert join_filename("a_1", "txt") == "a_1.txt"
        assert join_filename("a_1", "") == "a_1"

    def test_to_camel_keeps_inner_case(self) -> None:
        assert to_camel("my HTTP server") == "myHTTPServer"

    def test_to_pascal_without_extension(self) -> None:
        assert to_pascal("hello WORLD") == "HelloWorld"

    def test_with_date_suffix(self) -> None:
        assert with_date_suffix("notes.md", DAY) == "notes_2024-03-09.md"

    def test_with_date_suffix_keeps_dot_without_extension(self) -> None:
        assert with_date_suffix("report", DAY) == "report_2024-03-09."


class TestPaths:
    """Tests for path helpers."""

    def test_has_extension(self) -> None:
        assert has_extension("data/a.txt")
        assert not has_extension("data/inbox")
        assert not has_extension("data.d/inbox/")

    def test_ensure_dir(self, tmp_path: Path) -> None:
        new_dir = tmp_path / "new" / "subdir"
        result = ensure_dir(new_dir)
        assert result.is_dir()
        assert result == new_dir

    def test_ensure_dir_existing(self, tmp_path: Path) -> None:
        assert ensure_dir(tmp_path).is_dir()
