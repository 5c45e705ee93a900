from __future__ import annotations

import errno
import logging
from dataclasses import dataclass
from pathlib import Path

import anyio

from file_share.backend.app.domain.files.errors import StaticAssetMissing, StaticAssetUnreadable

logger = logging.getLogger(__name__)

INDEX_PAGE = "client.html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}


@dataclass(frozen=True)
class StaticAsset:
    path: Path
    content: bytes
    content_type: str


def content_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


class PublicAssets:
    """
    Read-only lookup of the client page and its companion files.
    Request paths are resolved under `root`; anything escaping it is reported missing.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    async def resolve(self, request_path: str) -> Path:
        relative = request_path.lstrip("/") or INDEX_PAGE
        try:
            root = await anyio.Path(self._root).resolve()
            candidate = await (root / relative).resolve()
        except ValueError as e:
            # e.g. an embedded NUL byte, which no file name can contain
            raise StaticAssetMissing(request_path) from e
        resolved = Path(candidate)
        if not resolved.is_relative_to(Path(root)):
            raise StaticAssetMissing(request_path)
        return resolved

    async def read(self, request_path: str) -> StaticAsset:
        path = await self.resolve(request_path)
        content_type = content_type_for(path)
        logger.debug("Serving static file: %s with type %s", path, content_type)

        try:
            content = await anyio.Path(path).read_bytes()
        except (FileNotFoundError, NotADirectoryError) as e:
            logger.warning("Static file not found: %s", path)
            raise StaticAssetMissing(request_path) from e
        except OSError as e:
            code = errno.errorcode.get(e.errno, type(e).__name__) if e.errno else type(e).__name__
            logger.error("Error reading static file %s: %s", path, e)
            raise StaticAssetUnreadable(request_path, code) from e

        return StaticAsset(path=path, content=content, content_type=content_type)
