# files_manager/services/storage.py
from pathlib import Path
from typing import Optional, Union
from uuid import uuid4

from loguru import logger

from files_manager.core.errors import NoContent, NotFound
from files_manager.models.file import FOLDER, FileRecord


def ensure_directory(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def variant_path(local_path: Union[str, Path], width: Union[int, str]) -> Path:
    """Where the `width` derivative of an original lives: `<localPath>_<width>`."""
    return Path(f"{local_path}_{width}")


def atomic_write_bytes(target: Path, content: bytes) -> Path:
    """Write to a temp sibling then rename over `target`."""
    ensure_directory(target.parent)
    temp_path = target.with_name(f".{target.name}.tmp-{uuid4().hex}")
    try:
        temp_path.write_bytes(content)
        temp_path.replace(target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    return target


class FileStorageEngine:
    """Maps file records to bytes on disk."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def write(self, content: bytes) -> str:
        # fresh random name per write, so concurrent uploads never collide
        ensure_directory(self.base_dir)
        local_path = self.base_dir / str(uuid4())
        local_path.write_bytes(content)
        logger.info(f"Stored {len(content)} bytes at {local_path}")
        return str(local_path)

    def resolve(self, record: FileRecord, variant: Optional[Union[int, str]] = None) -> Path:
        """Canonical absolute path of the record's bytes (or of one size variant)."""
        if record.type == FOLDER:
            raise NoContent()
        if not record.local_path:
            raise NotFound()

        path = Path(record.local_path) if variant is None else variant_path(record.local_path, variant)
        if not path.exists() or not path.is_file():
            raise NotFound()
        return path.resolve()

    def read(self, record: FileRecord, variant: Optional[Union[int, str]] = None) -> bytes:
        return self.resolve(record, variant).read_bytes()
