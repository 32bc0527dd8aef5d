"""
Repository for definition files that can be selected as "last used".

Config and map files share the same lifecycle: a default file created on
first use, named files created on request, and a `last` pointer file whose
first line is the path of the definition to use for the next game.
"""

import logging
from typing import Generic, List, Tuple, TypeVar

from ...domain.errors import ConfigInvalid
from .base import FileRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

POINTER_NAME = "last"
DEFAULT_NAME = "default"


class SelectableRepository(FileRepository, Generic[T]):
    """
    Subclasses provide `default_text`, `parse(text)` and `format(obj)`.
    """

    default_text = ""

    def parse(self, text: str) -> T:
        raise NotImplementedError

    def format(self, obj: T) -> str:
        raise NotImplementedError

    @property
    def default_path(self) -> str:
        return self.relative_path(DEFAULT_NAME)

    @property
    def pointer_path(self) -> str:
        return self.relative_path(POINTER_NAME)

    def names(self) -> List[str]:
        return [name for name in super().names() if name != POINTER_NAME]

    def ensure_default(self) -> str:
        if not self.resolve(self.default_path).exists():
            with self.writer(self.default_path) as handle:
                handle.write(self.default_text)
            logger.info("Created %s", self.default_path)
        return self.default_path

    def create(self, name: str, obj: T) -> str:
        """Write a new definition file; refuses to replace an existing one."""
        if not name or name in (POINTER_NAME,) or "/" in name or "\\" in name:
            raise ValueError(f"Invalid file name {name!r}")
        relative = self.relative_path(name)
        with self.writer(relative, overwrite=False) as handle:
            handle.write(self.format(obj))
        logger.info("Created %s", relative)
        return relative

    def load_path(self, relative: str) -> T:
        """
        Load a definition by data-dir relative path.

        Raises:
            FileNotFoundError: the file does not exist
            ConfigInvalid: the file content is malformed or out of range
        """
        text = self.read_text(relative)
        try:
            return self.parse(text)
        except ConfigInvalid as exc:
            raise ConfigInvalid(f"{relative}: {exc}") from exc

    def load(self, name: str) -> Tuple[str, T]:
        relative = self.relative_path(name)
        return relative, self.load_path(relative)

    def set_last(self, relative: str) -> None:
        with self.writer(self.pointer_path) as handle:
            handle.write(relative + "\n")

    def select(self, name: str) -> Tuple[str, T]:
        """Load a named definition and remember it for the next game."""
        relative, obj = self.load(name)
        self.set_last(relative)
        return relative, obj

    def load_last(self) -> Tuple[str, T]:
        """
        Load the definition used last time.

        Falls back to the default file (creating it if needed) when the
        pointer or the file it points to is missing.
        """
        self.ensure_default()
        pointer = self.resolve(self.pointer_path)
        relative = None
        if pointer.exists():
            lines = self.read_text(self.pointer_path).splitlines()
            relative = lines[0].strip() if lines else None

        if not relative or not self.resolve(relative).exists():
            if relative:
                logger.warning("%s points to missing %s, using %s", self.pointer_path, relative, self.default_path)
            relative = self.default_path
            self.set_last(relative)

        return relative, self.load_path(relative)
