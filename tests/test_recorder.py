"""
Tests for recorder.py - frame capture, the .rec format and playback.
"""

import pytest

from snake_engine.domain.config import EdgeWalls, GameConfig, MapDefinition
from snake_engine.domain.errors import RecordCorrupt
from snake_engine.domain.frame import Frame
from snake_engine.domain.game_state import SimulationState
from snake_engine.domain.grid import Grid
from snake_engine.game import SnakeGame
from snake_engine.players import ScriptedPlayer
from snake_engine.recorder import (
    FrameRecorder,
    GameRecord,
    Playback,
    deserialize,
    serialize,
)


def small_record(frames=1, difficulty=2):
    rows = Grid(8, 8, EdgeWalls()).rows()
    return GameRecord(
        config_path="config/default.config",
        map_path="map/default.map",
        difficulty=difficulty,
        height=8,
        width=8,
        frames=[Frame(rows=rows, score=i) for i in range(frames)],
    )


def played_record():
    game = SnakeGame(GameConfig(difficulty=5, random_seed=9, food_count=2), MapDefinition(width=12, height=9),
                     config_path="config/fast.config", map_path="map/small.map")
    return game.run(ScriptedPlayer(["down", None, "left"]))


class TestFrameRecorder:
    """Tests for capturing frames."""

    def test_capture_snapshots_grid_and_score(self):
        state = SimulationState(MapDefinition(width=8, height=8))
        recorder = FrameRecorder("config/a.config", "map/b.map", 3, 8, 8)

        first = recorder.capture(state)
        state.score = 5
        state.grid.set((1, 1), "2")
        second = recorder.capture(state)

        assert len(recorder) == 2
        assert first.score == 0
        assert first.cell((1, 1)) == "0"
        assert second.score == 5
        assert second.cell((1, 1)) == "2"

    def test_record_header(self):
        recorder = FrameRecorder("config/a.config", "map/b.map", 3, 10, 8)
        record = recorder.record()
        assert record.config_path == "config/a.config"
        assert record.map_path == "map/b.map"
        assert record.difficulty == 3
        assert (record.width, record.height) == (10, 8)
        assert record.frame_count == 0
        assert record.final_score == 0


class TestSerialize:
    """Tests for the record file layout."""

    def test_layout(self):
        data = serialize(small_record(frames=2)).decode("utf-8")
        lines = data.split("\n")

        assert lines[:5] == ["config/default.config", "map/default.map", "2", "8 8", "2"]
        assert lines[5] == "-" * 10
        assert lines[6] == "|00000000|"
        assert lines[15] == "0"
        assert lines[26] == "1"
        assert data.endswith("1\n")
        assert len(lines) == 5 + 2 * 11 + 1

    def test_round_trip_played_game(self):
        record = played_record()
        data = serialize(record)
        restored = deserialize(data)

        assert restored == record
        assert serialize(restored) == data

    def test_empty_record(self):
        record = small_record(frames=0)
        assert deserialize(serialize(record)) == record

    def test_crlf_preserved(self):
        data = serialize(small_record(frames=2)).replace(b"\n", b"\r\n")
        record = deserialize(data)
        assert record.newline == "\r\n"
        assert record.frame_count == 2
        assert serialize(record) == data

    def test_line_break_in_path_rejected(self):
        record = small_record()
        record.config_path = "config/a\nb"
        with pytest.raises(ValueError):
            serialize(record)

    def test_frame_size_mismatch_rejected(self):
        record = small_record()
        record.width = 9
        with pytest.raises(ValueError):
            serialize(record)


class TestDeserializeRejects:
    """Malformed records raise RecordCorrupt instead of yielding partial data."""

    def lines(self):
        return serialize(small_record(frames=2)).decode("utf-8").split("\n")[:-1]

    def data(self, lines):
        return ("\n".join(lines) + "\n").encode("utf-8")

    def test_missing_final_newline(self):
        with pytest.raises(RecordCorrupt):
            deserialize(serialize(small_record())[:-1])

    def test_truncated_frames(self):
        with pytest.raises(RecordCorrupt, match="truncated"):
            deserialize(self.data(self.lines()[:-3]))

    def test_truncated_header(self):
        with pytest.raises(RecordCorrupt):
            deserialize(b"config/default.config\nmap/default.map\n")

    def test_empty_input(self):
        with pytest.raises(RecordCorrupt):
            deserialize(b"")

    def test_trailing_lines(self):
        with pytest.raises(RecordCorrupt):
            deserialize(self.data(self.lines() + ["extra"]))

    def test_trailing_lines_after_empty_record(self):
        data = serialize(small_record(frames=0)) + b"extra\n"
        with pytest.raises(RecordCorrupt, match="after the header of an empty record"):
            deserialize(data)

    def test_unknown_cell(self):
        lines = self.lines()
        lines[7] = "|000x0000|"
        with pytest.raises(RecordCorrupt, match="unknown cell"):
            deserialize(self.data(lines))

    def test_short_row(self):
        lines = self.lines()
        lines[7] = "|0000000|"
        with pytest.raises(RecordCorrupt):
            deserialize(self.data(lines))

    @pytest.mark.parametrize("index,value", [
        (2, "02"),
        (2, "two"),
        (2, "11"),
        (3, "8"),
        (3, "0 8"),
        (4, "-1"),
        (15, "+1"),
        (15, "-3"),
    ])
    def test_bad_numbers(self, index, value):
        lines = self.lines()
        lines[index] = value
        with pytest.raises(RecordCorrupt):
            deserialize(self.data(lines))

    def test_invalid_utf8(self):
        with pytest.raises(RecordCorrupt):
            deserialize(b"\xff\xfe\n")


class TestPlayback:
    """Tests for replaying a record."""

    def test_yields_every_frame_and_waits_between(self):
        waits = []

        def wait(seconds):
            waits.append(seconds)
            return False

        playback = Playback(small_record(frames=3, difficulty=4), wait=wait)
        items = list(playback)

        assert [item.index for item in items] == [0, 1, 2]
        assert [item.terminal for item in items] == [False, False, True]
        assert [item.frame.score for item in items] == [0, 1, 2]
        assert waits == [0.25, 0.25]
        assert playback.cancelled is False

    def test_delay_override(self):
        waits = []
        playback = Playback(small_record(frames=2), delay=0.5, wait=lambda s: waits.append(s) or False)
        list(playback)
        assert waits == [0.5]

    def test_wait_can_stop_replay(self):
        playback = Playback(small_record(frames=3), wait=lambda s: True)
        items = list(playback)
        assert len(items) == 1
        assert playback.cancelled is True

    def test_cancel_then_restart(self):
        playback = Playback(small_record(frames=3), wait=lambda s: False)
        shown = []
        for item in playback:
            shown.append(item.index)
            playback.cancel()
        assert shown == [0]
        assert playback.cancelled is True

        assert [item.index for item in playback] == [0, 1, 2]
        assert playback.cancelled is False

    def test_default_wait_with_zero_delay(self):
        playback = Playback(small_record(frames=3), delay=0)
        assert len(list(playback)) == 3
        assert len(playback) == 3

    def test_empty_record_yields_nothing(self):
        assert list(Playback(small_record(frames=0), delay=0)) == []
