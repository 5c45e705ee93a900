from __future__ import annotations
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from file_share.backend.app.domain.files.interfaces import AsyncReadable


@dataclass(frozen=True)
class UploadFileInputDTO:
    filename: Optional[str]
    source: Optional[AsyncReadable]


@dataclass(frozen=True)
class DownloadFileInputDTO:
    name: str


@dataclass(frozen=True)
class DeleteFileInputDTO:
    name: str


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class UploadedFileDTO:
    name: str
    size_bytes: int


@dataclass(frozen=True)
class ListFilesDTO:
    names: list[str]


@dataclass(frozen=True)
class DownloadFileDTO:
    name: str
    chunks: AsyncIterator[bytes]
