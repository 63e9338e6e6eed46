"""
Tests for the command-line interface and run configuration.

Run with: pytest tests/test_cli.py -v
"""

import numpy as np
import pytest
from PIL import Image

from shortestpath.cli import build_parser, main
from shortestpath.config import PathConfig, RoadConfig, parse_point


def write_image(path, width=20, height=12, red_columns=()):
    image = np.full((height, width, 3), 255, dtype=np.uint8)
    for x in red_columns:
        image[:, x] = (255, 0, 0)
    Image.fromarray(image).save(path)
    return path


class TestParsePoint:

    def test_valid(self):
        assert parse_point("570,100") == (570, 100)
        assert parse_point(" 3 , 4 ") == (3, 4)

    @pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1.5,2"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_point(text)


class TestDefaults:

    def test_path_defaults(self):
        config = PathConfig()
        assert config.start == (570, 100)
        assert config.goal == (320, 300)
        assert config.moves == "16"
        assert not config.stop_at_first_target

    def test_road_defaults(self):
        config = RoadConfig()
        assert config.samples_per_segment == 3
        assert config.output_path == "output/output2.png"

    def test_parser_defaults(self):
        args = build_parser().parse_args(["path"])
        assert args.input == "input/input.png"
        assert args.start == (570, 100)
        assert args.goal == (320, 300)


class TestPathCommand:

    def test_writes_output(self, tmp_path, capsys):
        source = write_image(tmp_path / "in.png")
        output = tmp_path / "out" / "path.png"
        code = main([
            "path", str(source),
            "--start", "0,0", "--goal", "15,0",
            "--output", str(output),
        ])
        assert code == 0
        assert output.exists()
        out = capsys.readouterr().out
        assert "Success: True" in out
        assert "Total cost: 1500" in out

    def test_no_path(self, tmp_path, capsys):
        source = write_image(tmp_path / "in.png", red_columns=[8, 9])
        output = tmp_path / "out.png"
        code = main([
            "path", str(source),
            "--start", "0,0", "--goal", "15,0",
            "--output", str(output),
        ])
        assert code == 1
        assert not output.exists()
        assert "no path" in capsys.readouterr().out

    def test_move_set_option(self, tmp_path, capsys):
        source = write_image(tmp_path / "in.png", red_columns=[8])
        args = ["path", str(source), "--start", "0,0", "--goal", "15,0",
                "--output", str(tmp_path / "out.png")]
        assert main(args + ["--moves", "16"]) == 0
        assert main(args + ["--moves", "8"]) == 1

    def test_early_exit(self, tmp_path):
        source = write_image(tmp_path / "in.png")
        code = main([
            "path", str(source), "--start", "0,0", "--goal", "5,5",
            "--early-exit", "--output", str(tmp_path / "out.png"),
        ])
        assert code == 0

    @pytest.mark.parametrize("size", ["0", "-3", "big"])
    def test_bad_dot_size_exits_with_usage_error(self, tmp_path, size):
        source = write_image(tmp_path / "in.png")
        output = tmp_path / "out.png"
        with pytest.raises(SystemExit) as excinfo:
            main([
                "path", str(source), "--start", "0,0", "--goal", "5,0",
                "--dot-size", size, "--output", str(output),
            ])
        assert excinfo.value.code == 2
        assert not output.exists()

    def test_negative_point_with_equals_form(self):
        args = build_parser().parse_args(["path", "--start=-5,3", "--goal=2,-1"])
        assert args.start == (-5, 3)
        assert args.goal == (2, -1)

    def test_bad_point_exits_with_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["path", "--start", "nope"])
        assert excinfo.value.code == 2


class TestRoadCommand:

    def test_writes_output(self, tmp_path):
        source = tmp_path / "road.png"
        Image.new('RGB', (640, 480), color=(255, 255, 255)).save(source)
        output = tmp_path / "road_out.png"
        code = main(["road", str(source), "--output", str(output), "--seed", "3",
                     "--samples", "0"])
        assert code == 0
        with Image.open(output) as img:
            arr = np.array(img.convert('RGB'))
        # Road start point is drawn in green; no labels to cover it
        assert tuple(arr[300, 320]) == (0, 255, 0)


class TestNoCommand:

    def test_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
