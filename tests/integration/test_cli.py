"""End-to-end runs of the command-line tool on gzip files."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from string_grouper.cli.main import app, resolve_log_level

MakeGzip = Callable[[Iterable[str]], Path]

runner = CliRunner()


def read_groups(report: Path) -> tuple[int, list[list[str]]]:
    """Parse a report back into its header count and groups."""
    lines = report.read_text(encoding="utf-8").splitlines()
    count = int(lines[0].rsplit(":", 1)[1])
    groups: list[list[str]] = []
    for line in lines[1:]:
        if line.startswith("Группа "):
            groups.append([])
        elif line and groups:
            groups[-1].append(line)
    return count, groups


class TestGroupCommand:
    def test_scenario(
        self, make_gzip: MakeGzip, scenario_lines: list[str], tmp_path: Path
    ) -> None:
        path = make_gzip(scenario_lines + ["a;b;c", "", '"1"2"3"'])
        out = tmp_path / "result.txt"

        result = runner.invoke(app, [str(path), "--output", str(out)])

        assert result.exit_code == 0, result.output
        assert "Groups with more than one line: 1" in result.output
        count, groups = read_groups(out)
        assert count == 1
        assert sorted(groups[0]) == ["a;b;c", "a;d;e", "f;b;g"]
        assert '"1"2"3"' not in out.read_text(encoding="utf-8")

    def test_default_output_in_working_dir(
        self,
        make_gzip: MakeGzip,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = make_gzip(["x;1", "x;2"])
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [str(path)])

        assert result.exit_code == 0, result.output
        count, groups = read_groups(tmp_path / "result.txt")
        assert count == 1
        assert sorted(groups[0]) == ["x;1", "x;2"]

    def test_groups_sorted_by_size(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        lines = ["s;a", "s;b", "big;c", "big;d", "big;e", "big;f", "lone;g"]
        path = make_gzip(lines)
        out = tmp_path / "result.txt"

        result = runner.invoke(app, [str(path), "-o", str(out)])

        assert result.exit_code == 0, result.output
        count, groups = read_groups(out)
        assert count == 2
        assert [len(g) for g in groups] == [4, 2]

    def test_truncation_noted(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        path = make_gzip([f"k;{i}" for i in range(10)])
        out = tmp_path / "result.txt"

        result = runner.invoke(app, [str(path), "-o", str(out), "--max-lines", "6"])

        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert "обработано 6 из 10 уникальных строк" in text
        _, groups = read_groups(out)
        assert sorted(groups[0]) == [f"k;{i}" for i in range(6)]

    def test_rerun_overwrites(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        out = tmp_path / "result.txt"
        first = make_gzip(["a;1", "a;2", "b;1"])
        second = make_gzip(["c;1", "d;2"])

        assert runner.invoke(app, [str(first), "-o", str(out)]).exit_code == 0
        assert runner.invoke(app, [str(second), "-o", str(out)]).exit_code == 0

        count, groups = read_groups(out)
        assert count == 0
        assert groups == []


class TestGroupCommandErrors:
    def test_missing_argument(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "usage" in result.output

    def test_extra_argument(self, make_gzip: MakeGzip) -> None:
        path = make_gzip(["a;1"])
        result = runner.invoke(app, [str(path), "other.gz"])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "absent.gz"), "-o", str(tmp_path / "r.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output
        assert not (tmp_path / "r.txt").exists()

    def test_not_gzip(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.txt"
        path.write_text("a;1\n", encoding="utf-8")
        result = runner.invoke(app, [str(path), "-o", str(tmp_path / "r.txt")])
        assert result.exit_code == 1
        assert "Ошибка" in result.output

    def test_invalid_option_value(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        path = make_gzip(["a;1"])
        result = runner.invoke(
            app, [str(path), "--batch-size", "0", "-o", str(tmp_path / "r.txt")]
        )
        assert result.exit_code == 1
        assert "batch_size" in result.output

    def test_unwritable_output(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        path = make_gzip(["a;1", "a;2"])
        result = runner.invoke(app, [str(path), "-o", str(tmp_path / "no" / "r.txt")])
        assert result.exit_code == 1
        assert "Cannot write report" in result.output

    def test_non_integer_option(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        path = make_gzip(["a;1"])
        result = runner.invoke(
            app, [str(path), "--batch-size", "abc", "-o", str(tmp_path / "r.txt")]
        )
        assert result.exit_code == 1
        assert "Ошибка" in result.output
        assert "--batch-size" in result.output
        assert not (tmp_path / "r.txt").exists()

    def test_unknown_option(self, make_gzip: MakeGzip, tmp_path: Path) -> None:
        path = make_gzip(["a;1"])
        result = runner.invoke(app, [str(path), "--bogus", "-o", str(tmp_path / "r.txt")])
        assert result.exit_code == 1
        assert "--bogus" in result.output

    def test_help_still_succeeds(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--max-lines" in result.output


class TestLogLevel:
    def test_default_info(self) -> None:
        assert resolve_log_level() == logging.INFO

    def test_verbose_debug(self) -> None:
        assert resolve_log_level(verbose=True) == logging.DEBUG

    def test_quiet_warning(self) -> None:
        assert resolve_log_level(quiet=True) == logging.WARNING

    def test_verbose_wins_over_quiet(self) -> None:
        assert resolve_log_level(verbose=True, quiet=True) == logging.DEBUG
