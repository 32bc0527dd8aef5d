"""
Frame recording, the .rec record format and replay playback.

Record file layout (one value per line):

    config_path
    map_path
    difficulty
    height width
    frame_count
    <height + 2 rows of width + 2 cell characters>   \
    score                                            / repeated frame_count times
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, NamedTuple, Optional

from .domain.constants import CELL_ALPHABET, MAX_DIFFICULTY, MIN_DIFFICULTY
from .domain.errors import RecordCorrupt
from .domain.frame import Frame
from .domain.game_state import SimulationState

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
_CANONICAL_INT = re.compile(r"0|-?[1-9][0-9]*")


@dataclass
class GameRecord:
    """A finished (or in-progress) game: header fields plus the ordered frames."""
    config_path: str
    map_path: str
    difficulty: int
    height: int
    width: int
    frames: List[Frame] = field(default_factory=list)
    newline: str = "\n"

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def final_score(self) -> int:
        return self.frames[-1].score if self.frames else 0

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.difficulty


class FrameRecorder:
    """
    Append-only log of frames for one live game.
    """

    def __init__(self, config_path: str, map_path: str, difficulty: int, width: int, height: int):
        self.config_path = config_path
        self.map_path = map_path
        self.difficulty = difficulty
        self.width = width
        self.height = height
        self._frames: List[Frame] = []

    def capture(self, state: SimulationState) -> Frame:
        """Snapshot the grid and score and append the frame to the log."""
        frame = Frame(rows=state.grid.rows(), score=state.score)
        self._frames.append(frame)
        return frame

    @property
    def frames(self) -> tuple:
        return tuple(self._frames)

    def __len__(self):
        return len(self._frames)

    def record(self) -> GameRecord:
        return GameRecord(
            config_path=self.config_path,
            map_path=self.map_path,
            difficulty=self.difficulty,
            height=self.height,
            width=self.width,
            frames=list(self._frames),
        )


def serialize(record: GameRecord) -> bytes:
    """Encode a record in the line-oriented .rec format."""
    for name, value in (("config_path", record.config_path), ("map_path", record.map_path)):
        if "\n" in value or "\r" in value:
            raise ValueError(f"{name} may not contain line breaks: {value!r}")

    lines = [
        record.config_path,
        record.map_path,
        str(record.difficulty),
        f"{record.height} {record.width}",
        str(record.frame_count),
    ]
    for index, frame in enumerate(record.frames):
        if frame.height != record.height or frame.width != record.width:
            raise ValueError(
                f"frame {index} is {frame.width}x{frame.height}, record is {record.width}x{record.height}"
            )
        lines.extend(frame.rows)
        lines.append(str(frame.score))

    newline = record.newline
    return (newline.join(lines) + newline).encode(ENCODING)


class _Lines:
    """Cursor over record lines that reports truncation as RecordCorrupt."""

    def __init__(self, lines: List[str]):
        self.lines = lines
        self.pos = 0

    def next(self, what: str) -> str:
        if self.pos >= len(self.lines):
            raise RecordCorrupt(f"record truncated: expected {what} at line {self.pos + 1}")
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def next_int(self, what: str) -> int:
        return _parse_int(self.next(what), what, self.pos)

    @property
    def remaining(self) -> int:
        return len(self.lines) - self.pos


def _parse_int(text: str, what: str, line_no: int) -> int:
    if not _CANONICAL_INT.fullmatch(text):
        raise RecordCorrupt(f"line {line_no}: {what} is not an integer: {text!r}")
    return int(text)


def deserialize(data: bytes) -> GameRecord:
    """
    Decode a .rec file.

    Raises:
        RecordCorrupt: the data is not a complete, well-formed record
    """
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise RecordCorrupt(f"record is not valid {ENCODING}: {exc}") from exc

    newline = "\r\n" if text.split("\n", 1)[0].endswith("\r") else "\n"
    if not text.endswith(newline):
        raise RecordCorrupt("record truncated: missing final line break")
    raw_lines = text[: -len(newline)].split(newline)
    for line_no, line in enumerate(raw_lines, start=1):
        if "\r" in line or "\n" in line:
            raise RecordCorrupt(f"line {line_no}: inconsistent line endings")

    lines = _Lines(raw_lines)
    config_path = lines.next("config path")
    map_path = lines.next("map path")

    difficulty = lines.next_int("difficulty")
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise RecordCorrupt(f"difficulty {difficulty} is outside {MIN_DIFFICULTY}-{MAX_DIFFICULTY}")

    size = lines.next("board size").split(" ")
    if len(size) != 2:
        raise RecordCorrupt(f"line {lines.pos}: expected 'height width', got {' '.join(size)!r}")
    height = _parse_int(size[0], "height", lines.pos)
    width = _parse_int(size[1], "width", lines.pos)
    if height < 1 or width < 1:
        raise RecordCorrupt(f"board size {height}x{width} is not positive")

    frame_count = lines.next_int("frame count")
    if frame_count < 0:
        raise RecordCorrupt(f"frame count {frame_count} is negative")

    frames = []
    for index in range(frame_count):
        rows = []
        for _ in range(height + 2):
            row = lines.next(f"row of frame {index}")
            if len(row) != width + 2:
                raise RecordCorrupt(
                    f"line {lines.pos}: frame {index} row has {len(row)} cells, expected {width + 2}"
                )
            bad = set(row) - CELL_ALPHABET
            if bad:
                raise RecordCorrupt(f"line {lines.pos}: unknown cell characters {sorted(bad)}")
            rows.append(row)
        score = lines.next_int(f"score of frame {index}")
        if score < 0:
            raise RecordCorrupt(f"line {lines.pos}: negative score {score}")
        frames.append(Frame(rows=tuple(rows), score=score))

    if lines.remaining:
        where = f"frame {frame_count - 1}" if frame_count else "the header of an empty record"
        raise RecordCorrupt(f"{lines.remaining} unexpected lines after {where}")

    return GameRecord(
        config_path=config_path,
        map_path=map_path,
        difficulty=difficulty,
        height=height,
        width=width,
        frames=frames,
        newline=newline,
    )


class PlaybackFrame(NamedTuple):
    index: int
    frame: Frame
    terminal: bool


class Playback:
    """
    Replays a record frame by frame.

    Iterating yields PlaybackFrame items and pauses `delay` seconds between
    them through `wait(seconds)`, which returns True to stop the replay (for
    example when the viewer pressed quit). Each new iteration starts over
    from the first frame.
    """

    def __init__(
        self,
        record: GameRecord,
        delay: Optional[float] = None,
        wait: Optional[Callable[[float], bool]] = None,
    ):
        self.record = record
        self.delay = record.tick_seconds if delay is None else delay
        self._cancelled = threading.Event()
        self._wait = wait if wait is not None else self._cancelled.wait

    def cancel(self) -> None:
        """Stop after the frame currently being shown."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def __len__(self):
        return self.record.frame_count

    def __iter__(self) -> Iterator[PlaybackFrame]:
        self._cancelled.clear()
        frames = self.record.frames
        last = len(frames) - 1
        for index, frame in enumerate(frames):
            if self._cancelled.is_set():
                logger.info("Replay cancelled before frame %d/%d", index + 1, len(frames))
                return
            yield PlaybackFrame(index, frame, index == last)
            if index == last:
                return
            if self._wait(self.delay):
                self._cancelled.set()
            if self._cancelled.is_set():
                logger.info("Replay cancelled after frame %d/%d", index + 1, len(frames))
                return
