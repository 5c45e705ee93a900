from typing import Annotated

from fastapi import Depends

from file_share.backend.app.application.files.use_cases import (
    UploadFileUseCase,
    ListFilesUseCase,
    DownloadFileUseCase,
    DeleteFileUseCase,
)
from file_share.backend.app.core import Settings, get_app_settings, get_file_storage
from file_share.backend.app.domain.files.interfaces import FileStorage


async def get_upload_file_use_case(
        settings: Annotated[Settings, Depends(get_app_settings)],
        storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> UploadFileUseCase:
    return UploadFileUseCase(
        storage,
        field_name=settings.UPLOAD_FIELD_NAME,
        max_bytes=settings.MAX_UPLOAD_BYTES,
    )


async def get_list_files_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> ListFilesUseCase:
    return ListFilesUseCase(storage)


async def get_download_file_use_case(
        settings: Annotated[Settings, Depends(get_app_settings)],
        storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> DownloadFileUseCase:
    return DownloadFileUseCase(storage, chunk_size=settings.DOWNLOAD_CHUNK_SIZE)


async def get_delete_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> DeleteFileUseCase:
    return DeleteFileUseCase(storage)
