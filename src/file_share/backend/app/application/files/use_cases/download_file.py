from __future__ import annotations

import errno
import logging

from file_share.backend.app.application.files.dto import DownloadFileInputDTO, DownloadFileDTO
from file_share.backend.app.domain.files import FileName
from file_share.backend.app.domain.files.errors import FailedToReadFile, InvalidFileName, StoredFileNotFound
from file_share.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)

# a name failing with one of these cannot refer to a file in storage
ABSENT_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.EISDIR, errno.ENAMETOOLONG, errno.ELOOP})


class DownloadFileUseCase:
    def __init__(self, file_storage: FileStorage, *, chunk_size: int) -> None:
        self._file_storage = file_storage
        self._chunk_size = chunk_size

    async def execute(self, dto: DownloadFileInputDTO) -> DownloadFileDTO:
        try:
            name = FileName(dto.name)
        except InvalidFileName:
            raise StoredFileNotFound(dto.name)

        try:
            chunks = await self._file_storage.open_stream(name=name.value, chunk_size=self._chunk_size)
        except OSError as e:
            if e.errno in ABSENT_ERRNOS or isinstance(e, FileNotFoundError):
                logger.warning("File not found: %s", name)
                raise StoredFileNotFound(name.value) from e
            logger.error("Error opening file %s: %s", name, e)
            raise FailedToReadFile(str(e)) from e

        logger.info("Serving file: %s", name)
        return DownloadFileDTO(name=name.value, chunks=chunks)
