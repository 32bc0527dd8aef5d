"""
Repository for the leaderboard (leaderboard/leaderboard.txt).

One entry per line, whitespace separated, after a fixed header line:

    Name Score Date Time Configuration Map
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .base import FileRepository

logger = logging.getLogger(__name__)

HEADER = "Name Score Date Time Configuration Map"
LEADERBOARD_FILE = "leaderboard/leaderboard.txt"


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    score: int
    date: str
    time: str
    config_path: str
    map_path: str

    def to_line(self) -> str:
        return f"{self.name} {self.score} {self.date} {self.time} {self.config_path} {self.map_path}"


def make_entry(
    name: str,
    score: int,
    config_path: str,
    map_path: str,
    now: Optional[datetime] = None
) -> LeaderboardEntry:
    """Build an entry stamped with the local date (Y/M/D) and time (H:M:S)."""
    for label, value in (("name", name), ("config path", config_path), ("map path", map_path)):
        if not value or any(ch.isspace() for ch in value):
            raise ValueError(f"Leaderboard {label} must be a single non-empty word, got {value!r}")
    now = now or datetime.now()
    return LeaderboardEntry(
        name=name,
        score=score,
        date=f"{now.year}/{now.month}/{now.day}",
        time=f"{now.hour}:{now.minute}:{now.second}",
        config_path=config_path,
        map_path=map_path,
    )


class LeaderboardRepository(FileRepository):
    subdir = "leaderboard"
    suffix = ".txt"

    def entries(self) -> List[LeaderboardEntry]:
        """All entries, best score first; ties keep file order."""
        path = self.resolve(LEADERBOARD_FILE)
        if not path.exists():
            return []

        entries = []
        for line_no, line in enumerate(self.read_text(LEADERBOARD_FILE).splitlines(), start=1):
            if not line.strip() or line.strip() == HEADER:
                continue
            fields = line.split()
            if len(fields) != 6:
                logger.warning("Skipping malformed leaderboard line %d: %r", line_no, line)
                continue
            try:
                score = int(fields[1])
            except ValueError:
                logger.warning("Skipping leaderboard line %d with bad score: %r", line_no, line)
                continue
            entries.append(LeaderboardEntry(fields[0], score, *fields[2:]))

        entries.sort(key=lambda e: e.score, reverse=True)
        return entries

    def add(self, entry: LeaderboardEntry) -> int:
        """Insert an entry, rewrite the file sorted, and return the entry's 1-based rank."""
        entries = self.entries()
        entries.append(entry)
        entries.sort(key=lambda e: e.score, reverse=True)

        with self.writer(LEADERBOARD_FILE) as handle:
            handle.write(HEADER + "\n")
            for e in entries:
                handle.write(e.to_line() + "\n")

        rank = next(i for i, e in enumerate(entries, start=1) if e is entry)
        logger.info("Leaderboard updated: %s scored %d (rank %d)", entry.name, entry.score, rank)
        return rank
