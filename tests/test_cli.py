"""
Tests for the flexflow command line.
"""

import json

import pytest

from flexflow_toolkit.cli import build_parser, main


@pytest.fixture
def canvas_file(tmp_path):
    data = {
        "container": {"id": "canvas", "width": 800},
        "elements": [
            {"id": "logo", "top": 0, "left": 0, "width": 100, "height": 50},
            {"id": "nav", "top": 5, "left": 150, "width": 200, "height": 40},
            {"id": "hero", "top": 120, "left": 20, "width": 600, "height": 200},
        ],
    }
    path = tmp_path / "canvas.json"
    path.write_text(json.dumps(data))
    return path


class TestPlanCommand:
    """Tests for `flexflow plan`."""

    def test_when_default_width_then_prints_expanded_plan(self, canvas_file, capsys):
        # Act
        code = main(["plan", str(canvas_file)])

        # Assert
        assert code == 0
        plan = json.loads(capsys.readouterr().out)
        assert plan["mode"] == "expanded"
        assert [[e["handle"] for e in r["elements"]] for r in plan["rows"]] == [["logo", "nav"], ["hero"]]

    def test_when_narrow_width_then_compact_plan_saved(self, canvas_file, tmp_path):
        output = tmp_path / "plan.json"

        code = main(["plan", str(canvas_file), "--width", "400", "--output", str(output)])

        assert code == 0
        plan = json.loads(output.read_text())
        assert plan["mode"] == "compact"
        assert plan["rows"][1]["margin_top"] == 16

    def test_when_threshold_raised_then_compact(self, canvas_file, capsys):
        main(["plan", str(canvas_file), "--threshold", "1000"])
        assert json.loads(capsys.readouterr().out)["mode"] == "compact"

    def test_when_debug_image_then_png_written(self, canvas_file, tmp_path, capsys):
        image = tmp_path / "debug" / "rows.png"
        assert main(["plan", str(canvas_file), "--debug-image", str(image)]) == 0
        assert image.exists()

    def test_when_canvas_missing_then_exit_code_1(self, tmp_path):
        assert main(["plan", str(tmp_path / "missing.json")]) == 1

    def test_when_canvas_invalid_then_exit_code_1(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"container": {}, "elements": []}))
        assert main(["plan", str(path)]) == 1


def test_parser_when_no_command_then_exits():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
