from typing import AsyncIterator, Protocol, runtime_checkable

from file_share.backend.app.domain.files.entities import StoredFile


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes:
        ...


@runtime_checkable
class FileStorage(Protocol):
    async def ensure_root(self) -> None:
        ...

    async def save(self, *, name: str, source: AsyncReadable, max_bytes: int) -> StoredFile:
        """
        Copy `source` into a staging file, then move it over `name`.
        An existing file with the same name is replaced.
        """
        ...

    async def list_names(self) -> list[str]:
        ...

    async def open_stream(self, *, name: str, chunk_size: int) -> AsyncIterator[bytes]:
        """
        Open `name` for reading and return an iterator over its chunks.
        Raises FileNotFoundError before anything is read if the file is absent.
        """
        ...

    async def delete(self, *, name: str) -> None:
        ...
