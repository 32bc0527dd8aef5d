"""
Base repository with file management.

Provides a context manager for writes that handles:
- Creating the target directory
- Writing to a temporary file and moving it into place on success
- Removing the temporary file on failure
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional, TextIO, Union

from ...settings import get_data_dir


class FileRepository:
    """
    Base class for all repositories.

    Every repository owns one sub-directory of the data directory and
    stores files with one suffix. Paths handed out are relative to the data
    directory (e.g. "config/default.config"), which is how they appear in
    record files and the leaderboard.
    """

    subdir = ""
    suffix = ""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()

    @property
    def directory(self) -> Path:
        return self.data_dir / self.subdir

    def relative_path(self, name: str) -> str:
        """Data-dir relative path for a bare name, e.g. 'hard' -> 'map/hard.map'."""
        return f"{self.subdir}/{name}{self.suffix}"

    def resolve(self, relative: str) -> Path:
        return self.data_dir / relative

    def exists(self, name: str) -> bool:
        return self.resolve(self.relative_path(name)).exists()

    def names(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{self.suffix}"))

    @contextmanager
    def writer(self, relative: str, overwrite: bool = True, binary: bool = False) -> Generator[TextIO, None, None]:
        """
        Context manager for writing one file.

        Automatically handles:
        - Refusing to replace an existing file unless overwrite=True
        - Moving the finished file into place on successful exit
        - Discarding the partial file on exception

        Example:
            with self.writer("config/easy.config", overwrite=False) as f:
                f.write(text)
        """
        target = self.resolve(relative)
        if not overwrite and target.exists():
            raise FileExistsError(f"{relative} already exists")
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.")
        mode = "wb" if binary else "w"
        kwargs = {} if binary else {"encoding": "utf-8", "newline": ""}
        try:
            with os.fdopen(fd, mode, **kwargs) as handle:
                yield handle
            if not overwrite and target.exists():
                raise FileExistsError(f"{relative} already exists")
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def read_text(self, relative: str) -> str:
        with self.resolve(relative).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def read_bytes(self, relative: str) -> bytes:
        return self.resolve(relative).read_bytes()
