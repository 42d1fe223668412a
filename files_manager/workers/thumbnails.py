# files_manager/workers/thumbnails.py
import asyncio
import io
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from PIL import Image

from files_manager.core.errors import JobFailure
from files_manager.core.ids import is_valid_id, normalize_id
from files_manager.models.file import IMAGE, FileRecord
from files_manager.services.storage import atomic_write_bytes, variant_path

THUMBNAIL_WIDTHS = (500, 250, 100)


def render_thumbnail(source: Path, width: int) -> bytes:
    """Resize `source` to `width` pixels wide, keeping the aspect ratio. Never upscales."""
    with Image.open(source) as img:
        fmt = img.format or "PNG"
        if img.width > width:
            height = max(1, round(img.height * width / img.width))
            img = img.resize((width, height), Image.Resampling.LANCZOS)
        else:
            img = img.copy()

        if fmt == "JPEG" and img.mode not in ("RGB", "L"):
            img = img.convert("RGB")

        buffer = io.BytesIO()
        img.save(buffer, format=fmt)
        return buffer.getvalue()


def write_thumbnails(source: Path) -> Dict[int, Path]:
    """
    All-or-nothing: every width is rendered in memory before anything is
    written, and a failed write removes the variants written by this run.
    """
    rendered = {width: render_thumbnail(source, width) for width in THUMBNAIL_WIDTHS}

    written: Dict[int, Path] = {}
    try:
        for width, content in rendered.items():
            written[width] = atomic_write_bytes(variant_path(source, width), content)
    except OSError:
        for path in written.values():
            path.unlink(missing_ok=True)
        raise
    return written


async def generate_thumbnails(
    ctx,
    *,
    file_id: Optional[str] = None,
    user_id: Optional[str] = None,
    display_name: Optional[str] = None,
) -> Dict[str, str]:
    """saq task: derive the 500/250/100 px copies of an uploaded image."""
    if not file_id:
        raise JobFailure("Missing fileId")
    if not user_id:
        raise JobFailure("Missing userId")

    logger.info(f"Processing {display_name or file_id}")

    record = None
    if is_valid_id(file_id) and is_valid_id(user_id):
        with ctx["session_factory"]() as db:
            record = (
                db.query(FileRecord)
                .filter(
                    FileRecord.id == normalize_id(file_id),
                    FileRecord.user_id == normalize_id(user_id),
                )
                .first()
            )
    if record is None or record.type != IMAGE or not record.local_path:
        raise JobFailure("File not found")

    source = Path(record.local_path)
    if not source.is_file():
        raise JobFailure("File not found")

    try:
        written = await asyncio.to_thread(write_thumbnails, source)
    except (OSError, Image.DecompressionBombError) as e:
        raise JobFailure(f"Thumbnail generation failed: {e}") from e

    logger.info(f"Thumbnails ready for {file_id}")
    return {str(width): str(path) for width, path in written.items()}
