"""Tests for the svgicon CLI commands."""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from svgicon import __version__
from svgicon.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    shutil.copytree(FIXTURES / "svgs", tmp_path / "svgs")
    shutil.copy(FIXTURES / "icons.css", tmp_path / "icons.css")
    return tmp_path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_writes_to_stdout(self, workspace: Path) -> None:
        result = CliRunner().invoke(
            cli,
            ["build", str(workspace / "icons.css"), "--path", str(workspace / "svgs")],
        )
        assert result.exit_code == 0, result.output
        assert ".a, .b, .c {" in result.output
        assert "svgicon(" not in result.output

    def test_writes_output_file(self, workspace: Path) -> None:
        out = workspace / "out.css"
        result = CliRunner().invoke(
            cli,
            [
                "build",
                str(workspace / "icons.css"),
                "--path",
                str(workspace / "svgs"),
                "-o",
                str(out),
            ],
        )
        assert result.exit_code == 0, result.output
        css = out.read_text(encoding="utf-8")
        assert "background-image: url('data:image/svg+xml;charset=utf-8," in css

    def test_missing_icon_exits_1_without_output(self, workspace: Path) -> None:
        (workspace / "svgs" / "star.svg").unlink()
        out = workspace / "out.css"
        result = CliRunner().invoke(
            cli,
            [
                "build",
                str(workspace / "icons.css"),
                "--path",
                str(workspace / "svgs"),
                "-o",
                str(out),
            ],
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "star.svg" in result.output
        assert not out.exists()

    def test_function_name_option(self, workspace: Path) -> None:
        sheet = workspace / "other.css"
        sheet.write_text(".x { background: icon(star, blue); }", encoding="utf-8")
        result = CliRunner().invoke(
            cli,
            [
                "build",
                str(sheet),
                "--path",
                str(workspace / "svgs"),
                "--function-name",
                "icon",
            ],
        )
        assert result.exit_code == 0, result.output
        assert 'fill="blue"' in result.output

    def test_verbose_flag_accepted(self, workspace: Path) -> None:
        result = CliRunner().invoke(
            cli,
            ["-v", "build", str(workspace / "icons.css"), "--path", str(workspace / "svgs")],
        )
        assert result.exit_code == 0, result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_requests(self, workspace: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(workspace / "icons.css")])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "star\tred\t-\t.a, .b"
        assert "star\tred\t(min-width: 40em)\t.d" in lines
        assert "star\t-\t-\t.e" in lines
        assert "Summary: 4 request(s), 3 distinct icon(s)" in result.output

    def test_does_not_need_icons(self, tmp_path: Path) -> None:
        sheet = tmp_path / "a.css"
        sheet.write_text(".a { background: svgicon(missing); }", encoding="utf-8")
        result = CliRunner().invoke(cli, ["inspect", str(sheet)])
        assert result.exit_code == 0
        assert "missing" in result.output

    def test_malformed_marker(self, tmp_path: Path) -> None:
        sheet = tmp_path / "a.css"
        sheet.write_text(".a { background: svgicon; }", encoding="utf-8")
        result = CliRunner().invoke(cli, ["inspect", str(sheet)])
        assert result.exit_code == 1
        assert "Error:" in result.output
