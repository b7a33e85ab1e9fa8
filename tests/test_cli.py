"""
Tests for othello_engine.cli

Tests argument parsing, config building, and the main entry point.
"""

import pytest

from othello_engine import cli
from othello_engine.core.types import BLACK, WHITE, Difficulty, Mode


class TestParseArgs:
    """parse_args function tests."""

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.mode == "ai"
        assert args.difficulty == "normal"
        assert args.ai_side == "white"
        assert args.hints is False
        assert args.self_play is False
        assert args.normal_depth is None
        assert args.hard_depth is None
        assert args.ai_delay == 0.0
        assert args.log_level == "WARNING"

    def test_short_flags(self):
        args = cli.parse_args(["-m", "local", "-d", "hard"])
        assert args.mode == "local"
        assert args.difficulty == "hard"

    def test_bad_choice_exits(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--difficulty", "impossible"])


class TestBuildConfig:
    """build_config function tests."""

    def test_vs_ai(self):
        config = cli.build_config(cli.parse_args(["--ai-side", "black", "--hints", "--hard-depth", "4"]))
        assert config.mode is Mode.VS_AI
        assert config.ai_side == BLACK
        assert config.show_hints is True
        assert config.depths[Difficulty.HARD] == 4

    def test_local(self):
        config = cli.build_config(cli.parse_args(["--mode", "local"]))
        assert config.mode is Mode.LOCAL
        assert config.difficulty is None

    def test_bad_depth_raises(self):
        with pytest.raises(ValueError):
            cli.build_config(cli.parse_args(["--normal-depth", "0"]))


class TestMain:
    """main function tests."""

    def test_self_play(self, capsys):
        cli.main(["--self-play", "--difficulty", "easy", "--no-color"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert "wins (" in lines[-1] or lines[-1].startswith("draw (")

    def test_self_play_mixed_tiers(self, capsys):
        cli.main(["--self-play", "--black", "easy", "--white", "normal",
                  "--normal-depth", "1", "--no-color"])
        out = capsys.readouterr().out
        assert "Black (easy) played" in out
        assert "White (normal) played" in out

    def test_bad_depth_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--normal-depth", "0"])
        assert exc.value.code == 2
        assert capsys.readouterr().err.startswith("error:")

    def test_interactive_hands_config_to_play(self, monkeypatch):
        """Without --self-play main starts the interactive loop."""
        seen = {}

        def fake_play(config, color=True):
            seen["config"] = config
            seen["color"] = color

        monkeypatch.setattr(cli, "play", fake_play)
        cli.main(["--mode", "ai", "--difficulty", "easy", "--no-color"])

        assert seen["config"].difficulty is Difficulty.EASY
        assert seen["config"].ai_side == WHITE
        assert seen["color"] is False
