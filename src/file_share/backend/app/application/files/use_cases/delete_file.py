from __future__ import annotations

import logging

from file_share.backend.app.application.files.dto import DeleteFileInputDTO
from file_share.backend.app.domain.files import FileName
from file_share.backend.app.domain.files.errors import FailedToDeleteFile, InvalidFileName, StoredFileNotFound
from file_share.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class DeleteFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: DeleteFileInputDTO) -> None:
        try:
            name = FileName(dto.name)
        except InvalidFileName:
            raise StoredFileNotFound(dto.name)

        try:
            await self._file_storage.delete(name=name.value)
        except FileNotFoundError as e:
            logger.warning("Cannot delete %s, file not found", name)
            raise StoredFileNotFound(name.value) from e
        except OSError as e:
            logger.error("Error deleting file %s: %s", name, e)
            raise FailedToDeleteFile(str(e)) from e

        logger.info("File deleted: %s", name)
