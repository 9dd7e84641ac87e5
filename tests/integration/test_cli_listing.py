"""Integration tests for the myls command against a real directory tree.

These tests drive the CLI through Typer's runner with LocalFilesystem and
check the full byte layout of the output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from myls.cli import app


if TYPE_CHECKING:
    from pathlib import Path


runner = CliRunner()


@pytest.mark.e2e
@pytest.mark.tra("UseCase.List")
@pytest.mark.tier(2)
class TestListingIntegration:
    """Integration tests for files, sections and ordering together."""

    def test_mixed_operands_by_name(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Files first, then each directory under its header."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["src", "fileA", "docs", "empty"])

        assert result.exit_code == 0
        assert result.output == (
            "fileA\n"
            "\n"
            "docs:\n"
            "guide.md\n"
            "notes.txt\n"
            "\n"
            "empty:\n"
            "\n"
            "src:\n"
            "main.py\n"
            "util.py\n"
        )

    def test_mixed_operands_by_time_with_hidden(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """-at orders entries newest first; nanoseconds break second ties."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["-at", "docs", "src"])

        assert result.exit_code == 0
        assert result.output == (
            "docs:\n.draft\nguide.md\nnotes.txt\n\nsrc:\nutil.py\nmain.py\n"
        )

    def test_time_flag_does_not_reorder_operands(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Directory operands stay in name order under -t."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["-t", "src", "docs"])

        headers = [line for line in result.output.splitlines() if line.endswith(":")]
        assert headers == ["docs:", "src:"]

    def test_current_directory_lists_operands_as_entries(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """No operands lists '.' without a header."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, [])

        assert result.output == "docs\nempty\nfileA\nsrc\n"

    def test_symlink_to_directory_is_listed_as_directory(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Operand links are followed; entry links are not."""
        (project_tree / "link").symlink_to(project_tree / "src")
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["link"])

        assert result.output == "main.py\nutil.py\n"

    def test_parallel_workers_match_sequential(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """--workers does not change a single byte of output."""
        monkeypatch.chdir(project_tree)
        operands = ["-a", "src", "docs", "empty", "fileA"]

        sequential = runner.invoke(app, operands)
        parallel = runner.invoke(app, ["--workers", "4", *operands])

        assert parallel.exit_code == 0
        assert parallel.output == sequential.output


@pytest.mark.e2e
@pytest.mark.tra("UseCase.Errors")
@pytest.mark.tier(2)
class TestDiagnosticsIntegration:
    """Integration tests for recoverable diagnostics."""

    def test_missing_operand_among_valid_ones(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The missing operand is reported and the rest is still listed."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["nope", "fileA", "src"])

        assert result.exit_code == 0
        assert "myls: cannot access -- nope" in result.output
        assert "main.py" in result.output.splitlines()
        assert "fileA" in result.output.splitlines()

    def test_dangling_link_is_a_file(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A link to nowhere still lstat()s, so it lists as a file."""
        (project_tree / "dangling").symlink_to(project_tree / "gone")
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["dangling"])

        assert result.exit_code == 0
        assert result.output == "dangling\n"

    def test_overflow_in_one_directory_only(
        self, project_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Only the directory over capacity gets the warning."""
        monkeypatch.chdir(project_tree)

        result = runner.invoke(app, ["--max-entries", "2", "-a", "docs", "src"])

        assert result.exit_code == 0
        assert result.output.count("too many files") == 1
        assert "too many files in 'docs' (max 2)" in result.output
        assert "main.py" in result.output.splitlines()
        assert "util.py" in result.output.splitlines()
