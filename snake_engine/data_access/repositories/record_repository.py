"""
Repository for saved game records (record/*.rec).
"""

import logging

from ...recorder import GameRecord, deserialize, serialize
from .base import FileRepository

logger = logging.getLogger(__name__)


class RecordRepository(FileRepository):
    subdir = "record"
    suffix = ".rec"

    def save(self, name: str, record: GameRecord) -> str:
        """
        Save a record under a new name.

        Raises:
            FileExistsError: a record with that name already exists
        """
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"Invalid record name {name!r}")
        relative = self.relative_path(name)
        data = serialize(record)
        with self.writer(relative, overwrite=False, binary=True) as handle:
            handle.write(data)
        logger.info("Saved %d frames to %s", record.frame_count, relative)
        return relative

    def load(self, name: str) -> GameRecord:
        """
        Raises:
            FileNotFoundError: no record with that name
            RecordCorrupt: the file is not a well-formed record
        """
        relative = self.relative_path(name)
        record = deserialize(self.read_bytes(relative))
        logger.info("Loaded %d frames from %s", record.frame_count, relative)
        return record
