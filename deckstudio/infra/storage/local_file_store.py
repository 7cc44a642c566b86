"""
Local file storage under the configured upload root.

Uploaded files are written through ``reserve``: the reserved file is deleted
on every exit from the block unless ``commit`` was called, so a rejected
upload or a failed database insert never leaves an orphan on disk.
"""

import asyncio
import re
import secrets
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Union

from deckstudio.infra.config.logging_config import get_logger

TEMPLATES_DIR = "presentation_templates"
GENERATED_DIR = "generated_presentations"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.]")


def sanitize_filename(filename: str) -> str:
    return _UNSAFE_CHARS.sub("_", filename)


def unique_filename(original_filename: str) -> str:
    """``<epoch ms>-<8 hex>-<sanitized original>``"""
    millis = int(time.time() * 1000)
    return f"{millis}-{secrets.token_hex(4)}-{sanitize_filename(original_filename)}"


class StoredFile:
    def __init__(self, path: Path):
        self.path = path
        self.committed = False

    @property
    def name(self) -> str:
        return self.path.name

    async def write(self, data: bytes) -> None:
        await asyncio.to_thread(self.path.write_bytes, data)

    def commit(self) -> None:
        self.committed = True


class LocalFileStore:
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self._log = get_logger("infra.file_store")

    @property
    def templates_dir(self) -> Path:
        return self.root / TEMPLATES_DIR

    @property
    def generated_dir(self) -> Path:
        return self.root / GENERATED_DIR

    def ensure_dirs(self) -> None:
        for directory in (self.templates_dir, self.generated_dir):
            directory.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def reserve(self, original_filename: str) -> AsyncIterator[StoredFile]:
        """Reserve a unique template path; removed again unless committed."""
        self.templates_dir.mkdir(parents=True, exist_ok=True)
        stored = StoredFile(self.templates_dir / unique_filename(original_filename))
        try:
            yield stored
        finally:
            if not stored.committed:
                self.unlink(stored.path)
                self._log.info("file_store.released", filename=stored.name)

    def generated_path(self) -> Path:
        """A fresh path for a generated deck."""
        self.generated_dir.mkdir(parents=True, exist_ok=True)
        return self.generated_dir / f"{uuid.uuid4()}.pptx"

    def unlink(self, path: Union[str, Path]) -> None:
        Path(path).unlink(missing_ok=True)
