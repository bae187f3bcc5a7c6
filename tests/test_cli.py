"""Tests for the CLI entry points."""

import json

from catalogs import SAMPLE_JSON
from click.testing import CliRunner

from curriculum_flow import __version__
from curriculum_flow.cli import cli
from curriculum_flow.parser import parse_catalog
from curriculum_flow.parser.model import Packed


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(SAMPLE_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()
    assert "Rendered 14 courses" in result.output
    assert "2 blocks" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    src = tmp_path / "program.json"
    src.write_text(SAMPLE_JSON.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(src)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "program.svg").exists()


def test_render_options(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(SAMPLE_JSON), "-o", str(out),
        "--theme", "dark", "--scope", "abet", "--hover", "c-ds",
        "--lane-spacing", "16", "--jump-radius", "4",
    ])
    assert result.exit_code == 0, result.output
    assert "Rendered 8 courses" in result.output


def test_render_rejects_unknown_scope(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(SAMPLE_JSON), "--scope", "minor"])
    assert result.exit_code != 0


def test_validate_reports_warnings():
    """validate succeeds but lists what the layout leaves out."""
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(SAMPLE_JSON)])
    assert result.exit_code == 0
    assert "Valid: 15 courses" in result.output
    assert "STAT999" in result.output
    assert "'c-sec' is not placed" in result.output
    assert "Retired Track" in result.output


def test_validate_parse_error(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"courses": [{"id": "a"}, {"id": "a"}]}')
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_validate_non_finite_grid_values(tmp_path):
    src = tmp_path / "odd.json"
    src.write_text(
        '{"courses": [{"id": "a", "semester": 1, "colIndex": 0},'
        ' {"id": "b", "semester": Infinity, "colIndex": 0, "credits": NaN}],'
        ' "blocks": [{"id": "k", "name": "K", "courseIds": ["a"],'
        ' "position": {"x": Infinity, "y": 1}}]}'
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(src)])
    assert result.exit_code == 0, result.output
    assert "'b' is not placed" in result.output

    out = tmp_path / "odd.svg"
    result = runner.invoke(cli, ["render", str(src), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "<svg" in out.read_text()


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(SAMPLE_JSON)])
    assert result.exit_code == 0, result.output
    assert "Title: B.Sc. Computer Engineering" in result.output
    assert "Semesters: 4" in result.output
    assert "direct:" in result.output
    assert "channel:" in result.output
    assert "AI Electives: 2 courses, min 3 cr, manual at (900, 820)" in result.output


def test_autolayout_writes_catalog(tmp_path):
    src = tmp_path / "program.json"
    src.write_text(SAMPLE_JSON.read_text())
    out = tmp_path / "laid_out.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["autolayout", str(src), "-o", str(out)])
    assert result.exit_code == 0, result.output

    catalog = parse_catalog(out.read_text())
    assert all(b.placement == Packed() for b in catalog.blocks.values())
    assert "position" not in json.loads(out.read_text())["blocks"][1]
    # Semester 3 renumbered by code, with the selected elective last
    columns = {cid: catalog.courses[cid].col_index for cid in ("c-algo", "c-arch", "c-prob")}
    assert columns == {"c-arch": 0, "c-algo": 1, "c-prob": 2}
    # Input untouched when -o is given
    assert "position" in src.read_text()


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
