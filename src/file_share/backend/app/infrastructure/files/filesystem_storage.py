from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import AsyncIterator
from uuid import uuid4

import anyio
from anyio import AsyncFile

from file_share.backend.app.domain.files import StoredFile, UploadTooLarge
from file_share.backend.app.domain.files.interfaces import AsyncReadable

logger = logging.getLogger(__name__)

STAGING_DIR_NAME = ".staging"
COPY_CHUNK_SIZE = 1024 * 1024


class FilesystemFileStorage:
    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir
        # a sub-directory never shows up in listings and shares the filesystem,
        # so the final move is an atomic rename
        self._staging_dir = base_dir / STAGING_DIR_NAME

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    async def ensure_root(self) -> None:
        await anyio.to_thread.run_sync(lambda: self._staging_dir.mkdir(parents=True, exist_ok=True))

    async def save(
        self,
        *,
        name: str,
        source: AsyncReadable,
        max_bytes: int,
    ) -> StoredFile:
        staging_path = self._staging_dir / f"{uuid4().hex}.part"
        final_path = self._base_dir / name
        written = 0

        try:
            async with await anyio.open_file(staging_path, "wb") as out:
                while True:
                    chunk = await source.read(COPY_CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > max_bytes:
                        raise UploadTooLarge(max_bytes)
                    await out.write(chunk)

            # last rename wins when two uploads race on the same name
            await anyio.to_thread.run_sync(os.replace, staging_path, final_path)
        except BaseException:
            _discard(staging_path)
            raise

        return StoredFile(name=name, size_bytes=written)

    async def list_names(self) -> list[str]:
        return await anyio.to_thread.run_sync(self._scan)

    def _scan(self) -> list[str]:
        names: list[str] = []
        with os.scandir(self._base_dir) as entries:
            for entry in entries:
                try:
                    mode = os.stat(entry.path).st_mode
                except OSError as e:
                    logger.warning("Could not stat file %s: %s", entry.name, e)
                    continue
                if stat.S_ISREG(mode):
                    names.append(entry.name)
        return names

    async def open_stream(self, *, name: str, chunk_size: int) -> AsyncIterator[bytes]:
        path = self._base_dir / name
        f = await anyio.open_file(path, "rb")
        try:
            mode = (await anyio.to_thread.run_sync(os.fstat, f.wrapped.fileno())).st_mode
        except BaseException:
            await _close(f)
            raise
        if not stat.S_ISREG(mode):
            await _close(f)
            raise FileNotFoundError(str(path))
        return _iter_chunks(f, name=name, chunk_size=chunk_size)

    async def delete(self, *, name: str) -> None:
        await anyio.to_thread.run_sync(os.unlink, self._base_dir / name)


async def _iter_chunks(f: AsyncFile[bytes], *, name: str, chunk_size: int) -> AsyncIterator[bytes]:
    try:
        while True:
            try:
                chunk = await f.read(chunk_size)
            except OSError as e:
                # headers are already out, all that is left is to end the body
                logger.error("Error streaming file %s: %s", name, e)
                return
            if not chunk:
                return
            yield chunk
    finally:
        await _close(f)


async def _close(f: AsyncFile[bytes]) -> None:
    with anyio.CancelScope(shield=True):
        await f.aclose()


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove staging file %s: %s", path, e)
