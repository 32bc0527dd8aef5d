"""
Tests for main.py - the headless runner and its command line.
"""

import json
import sys
from unittest.mock import patch

import pytest

from snake_engine.domain.config import GameConfig, MapDefinition
from snake_engine.domain.errors import AllocationExhausted
from snake_engine.domain.food import FoodAllocator, FoodItem
from snake_engine.main import main, parse_moves, run_simulation
from snake_engine.players import ScriptedPlayer
from snake_engine.recorder import GameRecord


class TestParseMoves:
    """Tests for the --moves script syntax."""

    def test_shorthands_and_intents(self):
        assert parse_moves("w, a,-,S,pause,resume,d") == [
            "up", "left", None, "down", "pause", "resume", "right"
        ]

    def test_unknown_move(self):
        with pytest.raises(ValueError):
            parse_moves("w,x")


class TestRunSimulation:
    """Tests for run_simulation."""

    def test_summary(self):
        result = run_simulation(
            GameConfig(random_seed=1), MapDefinition(), ScriptedPlayer(),
            config_path="config/default.config", map_path="map/default.map",
        )

        assert result["seed"] == 1
        assert result["cause"] == "wall"
        assert result["ticks"] == 8
        assert result["frames"] == 9
        assert result["aborted"] is None
        assert result["length"] >= 4
        assert isinstance(result["record"], GameRecord)
        assert result["record"].config_path == "config/default.config"
        assert result["final_score"] == result["record"].final_score

    def test_max_ticks(self):
        result = run_simulation(GameConfig(random_seed=1), MapDefinition(), ScriptedPlayer(), max_ticks=3)
        assert result["ticks"] == 3
        assert result["cause"] is None

    def test_allocation_exhausted_is_reported(self):
        with patch.object(FoodAllocator, "place", side_effect=[FoodItem(9, 8, 1), AllocationExhausted("full")]):
            result = run_simulation(GameConfig(random_seed=1), MapDefinition(), ScriptedPlayer())

        assert result["aborted"] == "full"
        assert result["final_score"] == 1
        assert result["frames"] == 2

    def test_board_too_full_for_initial_food(self):
        snake = {(5, 5), (4, 5), (3, 5), (2, 5)}
        free = {(8, 8), (7, 8)}
        obstacles = {(x, y) for x in range(1, 9) for y in range(1, 9)} - snake - free
        game_map = MapDefinition(width=8, height=8, obstacles=obstacles)

        result = run_simulation(GameConfig(random_seed=1, food_count=5), game_map, ScriptedPlayer(),
                                config_path="config/crowded.config", map_path="map/crowded.map")

        assert result["aborted"] == "no free cell left on the 8x8 board"
        assert result["game_id"] is None
        assert result["seed"] == 1
        assert result["ticks"] == 0
        assert result["frames"] == 0
        record = result["record"]
        assert record.frame_count == 0
        assert (record.width, record.height) == (8, 8)
        assert record.map_path == "map/crowded.map"


class TestMain:
    """Tests for the snake-run command line."""

    def test_scripted_run_saves_record(self, tmp_path, capsys):
        argv = ["snake-run", "--data-dir", str(tmp_path), "--seed", "5",
                "--moves", "d,d", "--max-ticks", "5", "--save", "run"]
        with patch.object(sys, "argv", argv):
            main()

        out = capsys.readouterr().out
        summary = json.loads(out.split("Simulation Result Summary:", 1)[1])
        assert summary["ticks"] == 5
        assert summary["seed"] == 5
        assert summary["saved_to"] == "record/run.rec"
        assert (tmp_path / "record" / "run.rec").exists()
        assert (tmp_path / "config" / "last.config").exists()

    def test_bad_config_exits(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "bad.config").write_text("0\n-1\n1\n0.6 0.3 0.1\n")
        argv = ["snake-run", "--data-dir", str(tmp_path), "--config", "bad"]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit):
                main()
