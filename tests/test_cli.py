"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from dag_bands.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
CONFOUNDING_MMD = EXAMPLES_DIR / "confounding.mmd"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(CONFOUNDING_MMD), "-o", str(out)])
    assert result.exit_code == 0, result.output
    content = out.read_text()
    assert "<svg" in content
    assert content.endswith("\n")


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    mmd = tmp_path / "test.mmd"
    mmd.write_text(CONFOUNDING_MMD.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(mmd)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_render_with_theme(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(CONFOUNDING_MMD), "-o", str(out), "--theme", "dark"]
    )
    assert result.exit_code == 0, result.output
    assert "#2b2b2b" in out.read_text()


def test_render_unplaced_node_fails(tmp_path):
    mmd = tmp_path / "bad.mmd"
    mmd.write_text("graph LR\n    a --> b\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(mmd)])
    assert result.exit_code == 1
    assert not (tmp_path / "bad.svg").exists()


def test_render_parse_error(tmp_path):
    mmd = tmp_path / "bad.mmd"
    mmd.write_text("%%dag bands: a | up | 3 red\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(mmd)])
    assert result.exit_code == 1


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(CONFOUNDING_MMD)])
    assert result.exit_code == 0, result.output
    assert "Valid:" in result.output
    assert "1 blocked" in result.output


def test_validate_reports_errors(tmp_path):
    mmd = tmp_path / "bad.mmd"
    mmd.write_text(
        "graph LR\n    a --> b\n"
        "%%dag pos: a | 0, 0\n"
        "%%dag bands: a | up | 0.7 red, 0.6 blue\n"
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(mmd)])
    assert result.exit_code == 1
    assert "'b' has no position" in result.output
    assert "sum to 1.3" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(CONFOUNDING_MMD)])
    assert result.exit_code == 0, result.output
    assert "Title: Confounding" in result.output
    assert "Nodes: 3" in result.output
    assert "Edges: 3" in result.output
    assert "X (X): no bands" in result.output
    assert "Y (Y): 2+1 bands" in result.output
    assert "blocked" in result.output


def test_verbose_flag(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "render", str(CONFOUNDING_MMD), "-o", str(out)])
    assert result.exit_code == 0, result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/file.mmd"])
    assert result.exit_code != 0
