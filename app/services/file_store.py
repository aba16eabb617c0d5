import logging
import os
from typing import List, Tuple

import aiofiles

from app.core.exceptions import (
    FileAlreadyExistsError,
    FileNotFoundInStoreError,
    InvalidFileNameError,
    InvalidRootError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)


class FileStore:
    """Flat directory of files served by the API.

    Every operation works on the root it was created with, never on the
    process working directory. Names are reduced to their last path
    component so nothing can be written outside the root.
    """

    def __init__(self, root: str):
        self.root = root

    def ensure_root(self):
        if os.path.exists(self.root) and not os.path.isdir(self.root):
            raise InvalidRootError(f"File store root '{self.root}' is not a directory")
        os.makedirs(self.root, exist_ok=True)

    def _path(self, name: str) -> str:
        base = os.path.basename(name.replace("\\", "/"))
        if base in ("", ".", ".."):
            raise InvalidFileNameError(f"Invalid file name '{name}'")
        return os.path.join(self.root, base)

    def names(self) -> List[str]:
        """All entry names in the root, directories included."""
        return sorted(os.listdir(self.root))

    def file_names(self) -> List[str]:
        with os.scandir(self.root) as entries:
            return sorted(entry.name for entry in entries if not entry.is_dir())

    def exists(self, name: str) -> bool:
        return os.path.exists(self._path(name))

    def read(self, name: str) -> bytes:
        path = self._path(name)
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise ReadError(f"Failed to read file '{name}': {e.strerror or e}") from e

    def list(self) -> List[Tuple[str, bytes]]:
        """(name, content) for every regular file in the root.

        The directory is enumerated first and each file read afterwards, so a
        file removed in between fails the whole call with ReadError.
        """
        return [(name, self.read(name)) for name in self.file_names()]

    async def write(self, name: str, content: bytes):
        path = self._path(name)
        try:
            async with aiofiles.open(path, "wb") as out_file:
                await out_file.write(content)
        except OSError as e:
            raise WriteError(f"Failed to write file '{name}': {e.strerror or e}") from e
        logger.info("Wrote %s (%d bytes)", os.path.basename(path), len(content))

    async def create(self, name: str, content: bytes):
        if self.exists(name):
            raise FileAlreadyExistsError(f"File '{os.path.basename(self._path(name))}' already exists")
        await self.write(name, content)

    def delete(self, name: str):
        path = self._path(name)
        if not os.path.isfile(path):
            raise FileNotFoundInStoreError(f"File '{name}' not found")
        try:
            os.remove(path)
        except OSError as e:
            raise WriteError(f"Failed to remove file '{name}': {e.strerror or e}") from e
        logger.info("Removed %s", os.path.basename(path))
