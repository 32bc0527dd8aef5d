"""
Tests for the file-management command line scripts.
"""

import sys
from unittest.mock import Mock, patch

import pytest

from snake_engine.cli import generate_video, leaderboard, new_config, new_map, play, replay
from snake_engine.data_access import (
    ConfigRepository,
    LeaderboardRepository,
    MapRepository,
    RecordRepository,
    make_entry,
)
from snake_engine.domain.config import GameConfig, MapDefinition
from snake_engine.game import SnakeGame
from snake_engine.players import ScriptedPlayer


def run_cli(module, *args):
    with patch.object(sys, "argv", [module.__name__, *args]):
        module.main()


def save_record(data_dir, name="run"):
    game = SnakeGame(GameConfig(difficulty=4, random_seed=3), MapDefinition(width=8, height=8))
    RecordRepository(data_dir).save(name, game.run(ScriptedPlayer()))


class TestNewConfig:
    """Tests for snake-config."""

    def test_creates_and_selects(self, tmp_path):
        run_cli(new_config, "hard", "--data-dir", str(tmp_path), "--difficulty", "8",
                "--seed", "42", "--food-count", "3", "--probabilities", "0.2", "0.3", "0.5", "--select")

        assert (tmp_path / "config" / "hard.config").read_text() == "8\n42\n3\n0.2 0.3 0.5\n"
        relative, config = ConfigRepository(tmp_path).load_last()
        assert relative == "config/hard.config"
        assert config.food_count == 3

    def test_invalid_values_exit(self, tmp_path):
        with pytest.raises(SystemExit):
            run_cli(new_config, "bad", "--data-dir", str(tmp_path), "--difficulty", "0")
        assert not (tmp_path / "config" / "bad.config").exists()


class TestNewMap:
    """Tests for snake-map."""

    def test_creates_map(self, tmp_path):
        run_cli(new_map, "arena", "--data-dir", str(tmp_path), "--width", "20", "--height", "12",
                "--walls", "0", "0", "1", "1", "--obstacle", "2", "3", "--obstacle", "2", "4")

        text = (tmp_path / "map" / "arena.map").read_text()
        assert text == "20 12\n0 0 1 1\n2\n2 3\n2 4\n"
        assert MapRepository(tmp_path).load("arena")[1].obstacles == frozenset({(3, 4), (3, 5)})

    def test_existing_name_exits(self, tmp_path):
        run_cli(new_map, "arena", "--data-dir", str(tmp_path))
        with pytest.raises(SystemExit):
            run_cli(new_map, "arena", "--data-dir", str(tmp_path), "--width", "10")


class TestLeaderboard:
    """Tests for snake-leaderboard."""

    def test_table(self, tmp_path, capsys):
        repo = LeaderboardRepository(tmp_path)
        repo.add(make_entry("ann", 5, "config/default.config", "map/default.map"))
        repo.add(make_entry("bob", 9, "config/default.config", "map/default.map"))

        run_cli(leaderboard, "--data-dir", str(tmp_path))

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["Rank", "Name", "Score", "Date", "Time", "Configuration", "Map"]
        assert lines[1].split()[:3] == ["1", "bob", "9"]
        assert lines[2].split()[:3] == ["2", "ann", "5"]

    def test_limit(self, tmp_path, capsys):
        repo = LeaderboardRepository(tmp_path)
        for name, score in (("a", 1), ("b", 2), ("c", 3)):
            repo.add(make_entry(name, score, "config/x.config", "map/x.map"))

        run_cli(leaderboard, "--data-dir", str(tmp_path), "--limit", "1")
        assert len(capsys.readouterr().out.splitlines()) == 2


class TestReplay:
    """Tests for snake-replay in text mode."""

    def test_text_replay(self, tmp_path, capsys):
        save_record(tmp_path)
        run_cli(replay, "run", "--data-dir", str(tmp_path), "--text", "--delay", "0")

        out = capsys.readouterr().out
        assert "Replay finished" in out
        assert out.count("Press q to quit the replay.") == RecordRepository(tmp_path).load("run").frame_count - 1

    def test_missing_record_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            run_cli(replay, "nothing", "--data-dir", str(tmp_path), "--text")


class TestGenerateVideo:
    """Tests for snake-video."""

    def test_gif_export(self, tmp_path):
        save_record(tmp_path)
        run_cli(generate_video, "run", "--data-dir", str(tmp_path), "--format", "gif", "--cell-size", "8")
        assert (tmp_path / "record" / "run.gif").exists()

    def test_mp4_export_uses_moviepy(self, tmp_path):
        save_record(tmp_path)
        output = str(tmp_path / "out" / "run.mp4")
        with patch("snake_engine.services.video_generator.ImageSequenceClip") as clip_cls:
            run_cli(generate_video, "run", "--data-dir", str(tmp_path), "--output", output, "--fps", "6")

        assert clip_cls.call_args[1]["fps"] == 6
        assert clip_cls.return_value.write_videofile.call_args[0][0] == output


class TestPlay:
    """Tests for snake-play's game loop wiring."""

    def test_board_too_full_for_initial_food(self):
        snake = {(5, 5), (4, 5), (3, 5), (2, 5)}
        obstacles = {(x, y) for x in range(1, 9) for y in range(1, 9)} - snake - {(8, 8), (7, 8)}
        game_map = MapDefinition(width=8, height=8, obstacles=obstacles)
        stdscr = Mock()
        stdscr.getmaxyx.return_value = (40, 80)

        with patch.object(play, "CursesRenderer") as renderer_cls, \
                patch.object(play, "KeyboardPlayer") as player_cls, \
                patch.object(play, "post_game_menu") as menu:
            score = play.play_game(stdscr, "config/crowded.config", GameConfig(random_seed=1, food_count=5),
                                   "map/crowded.map", game_map, None)

        assert score == 0
        assert "aborted" in renderer_cls.return_value.message.call_args[0][0]
        player_cls.return_value.wait_for_key.assert_called_once_with()
        menu.assert_not_called()
