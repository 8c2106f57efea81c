"""
Transcript upload intake: extension/size checks and transient staging on disk.
"""

import asyncio
import functools
import logging
import os
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

ALLOWED_EXTENSION = ".txt"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
CHUNK_SIZE = 64 * 1024


class UploadError(Exception):
    """Base error for rejected uploads."""


class UploadRejected(UploadError):
    """Upload missing, unnamed, or not a .txt file."""


class UploadTooLarge(UploadError):
    """Upload exceeds the size ceiling."""


def check_upload(upload: Optional[UploadFile], max_bytes: int = DEFAULT_MAX_BYTES) -> UploadFile:
    """
    Validate an upload without reading its content.

    Returns:
        The same upload, known to carry a .txt filename

    Raises:
        UploadRejected: no file, no filename, or extension other than .txt
        UploadTooLarge: declared size already above max_bytes
    """
    if upload is None or not upload.filename:
        raise UploadRejected("Missing or invalid transcript file (must be .txt)")

    # Exact, case-sensitive match
    if os.path.splitext(upload.filename)[1] != ALLOWED_EXTENSION:
        raise UploadRejected("Only .txt files are allowed")

    if upload.size is not None and upload.size > max_bytes:
        raise UploadTooLarge(_too_large_message(max_bytes))

    return upload


def staged_name(filename: str) -> str:
    """Timestamp-prefixed name for the staged copy; directory parts are dropped."""
    return f"{int(time.time() * 1000)}-{os.path.basename(filename)}"


def _too_large_message(max_bytes: int) -> str:
    return f"File too large (max {max_bytes // (1024 * 1024)} MB)"


async def _write_upload(upload: UploadFile, path: Path, max_bytes: int) -> int:
    # Blocking file calls run in the default executor
    loop = asyncio.get_running_loop()
    written = 0
    f = await loop.run_in_executor(None, open, path, "wb")
    try:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            written += len(chunk)
            if written > max_bytes:
                raise UploadTooLarge(_too_large_message(max_bytes))
            await loop.run_in_executor(None, f.write, chunk)
    finally:
        await loop.run_in_executor(None, f.close)
    return written


async def read_transcript(path: Path) -> str:
    """
    Read a staged transcript as UTF-8 text.

    Undecodable bytes become U+FFFD instead of failing the request.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, functools.partial(path.read_text, encoding="utf-8", errors="replace")
    )


@asynccontextmanager
async def staged_upload(
    upload: Optional[UploadFile],
    upload_dir: str | Path,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> AsyncIterator[Path]:
    """
    Validate an upload, stage it in upload_dir and yield the staged path.

    The staged file is removed when the block exits, whether it exits
    normally or with an exception.
    """
    upload = check_upload(upload, max_bytes)

    path = Path(upload_dir) / staged_name(upload.filename)
    try:
        size = await _write_upload(upload, path, max_bytes)
        logger.info(f"Staged upload {upload.filename} ({size} bytes) at {path}")
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug(f"Removed staged upload {path}")
