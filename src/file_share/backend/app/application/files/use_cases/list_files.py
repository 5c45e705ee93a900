from __future__ import annotations

import logging

from file_share.backend.app.application.files.dto import ListFilesDTO
from file_share.backend.app.domain.files.errors import FailedToListFiles
from file_share.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class ListFilesUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self) -> ListFilesDTO:
        try:
            names = await self._file_storage.list_names()
        except OSError as e:
            logger.error("Error reading upload directory: %s", e)
            raise FailedToListFiles(str(e)) from e
        return ListFilesDTO(names=names)
