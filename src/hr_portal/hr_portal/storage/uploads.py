from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """A submitted file, already read into memory."""

    filename: str
    data: bytes

    @property
    def is_empty(self) -> bool:
        # Browsers send a nameless, empty part for a file input left blank.
        return not self.filename or not self.data

    @classmethod
    def from_storage(cls, storage: FileStorage) -> "UploadedFile":
        return cls(filename=storage.filename or "", data=storage.read())


class UploadStorage(Protocol):
    def write(self, name: str, data: bytes) -> str:
        """Store ``data`` and return the path to record for it."""

        raise NotImplementedError


class LocalUploadStorage(UploadStorage):
    """Stores uploads in a local directory under timestamp-prefixed names.

    Returned paths are relative (``uploads/<stored name>``) and are served
    back under the public upload prefix.
    """

    def __init__(self, root: str | Path, *, clock: Optional[Callable[[], float]] = None):
        self._root = Path(root)
        self._clock = clock or time.time

    @property
    def root(self) -> Path:
        return self._root

    def stored_name(self, name: str) -> str:
        safe = secure_filename(name) or "upload"
        return f"{int(self._clock() * 1000)}_{safe}"

    def write(self, name: str, data: bytes) -> str:
        self._root.mkdir(parents=True, exist_ok=True)
        stored = self.stored_name(name)
        (self._root / stored).write_bytes(data)
        logger.debug("Stored upload %s (%d bytes)", stored, len(data))
        return f"{self._root.name}/{stored}"


def public_url(stored_path: str, prefix: str) -> str:
    """Map a recorded upload path to the URL it is served from."""
    return f"{prefix.rstrip('/')}/{Path(stored_path).name}"
