"""Tests for the command-line launcher."""

import json

from gridsnake.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.config is None
        assert args.cell_size is None
        assert args.move_interval is None

    def test_play_with_flags(self):
        args = _build_parser().parse_args([
            "play",
            "--width", "640",
            "--height", "480",
            "--cell-size", "16",
            "--move-interval", "0.1",
            "--seed", "4",
        ])
        assert args.width == 640
        assert args.height == 480
        assert args.cell_size == 16
        assert args.move_interval == 0.1
        assert args.seed == 4

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.steps == 500
        assert args.seed == 0


class TestCLISimulate:
    def test_prints_final_state(self, capsys):
        assert main(["simulate", "--steps", "50", "--seed", "3"]) == 0
        state = json.loads(capsys.readouterr().out)
        assert state["grid"] == {"width": 40, "height": 30}
        assert 1 <= len(state["snake"]["body"]) <= state["score"] + 1

    def test_deterministic(self, capsys):
        main(["simulate", "--steps", "80", "--seed", "9"])
        first = capsys.readouterr().out
        main(["simulate", "--steps", "80", "--seed", "9"])
        assert capsys.readouterr().out == first

    def test_grid_too_small(self):
        assert main(["simulate", "--grid-width", "8", "--grid-height", "8"]) == 2


class TestCLIPlayErrors:
    def test_missing_config_file(self, tmp_path):
        assert main(["play", "--config", str(tmp_path / "missing.json")]) == 2

    def test_config_with_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"window_width": 640, "colour": "red"}))
        assert main(["play", "--config", str(path)]) == 2
