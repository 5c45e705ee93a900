from __future__ import annotations

import logging

from file_share.backend.app.application.files.dto import UploadFileInputDTO, UploadedFileDTO
from file_share.backend.app.domain.files import FileName
from file_share.backend.app.domain.files.errors import FailedToSaveFile, NoFileUploaded, UploadTooLarge
from file_share.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class UploadFileUseCase:
    def __init__(self, file_storage: FileStorage, *, field_name: str, max_bytes: int) -> None:
        self._file_storage = file_storage
        self._field_name = field_name
        self._max_bytes = max_bytes

    async def execute(self, dto: UploadFileInputDTO) -> UploadedFileDTO:
        if dto.source is None or not dto.filename:
            logger.warning('File field "%s" not found or empty, or no files uploaded.', self._field_name)
            raise NoFileUploaded(self._field_name)

        name = FileName(dto.filename)

        try:
            stored = await self._file_storage.save(
                name=name.value,
                source=dto.source,
                max_bytes=self._max_bytes,
            )
        except UploadTooLarge:
            logger.warning("Upload of %s rejected, larger than %d bytes", name, self._max_bytes)
            raise
        except OSError as e:
            logger.error("Error saving file %s: %s", name, e)
            raise FailedToSaveFile(str(e)) from e

        logger.info("File uploaded and saved: %s (%d bytes)", stored.name, stored.size_bytes)
        return UploadedFileDTO(name=stored.name, size_bytes=stored.size_bytes)
