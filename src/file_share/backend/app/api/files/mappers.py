from __future__ import annotations

from urllib.parse import quote

from starlette.datastructures import FormData, UploadFile

from file_share.backend.app.api.files.schemas import ApiResponse, ListFilesResponse, UploadResponse
from file_share.backend.app.application.files.dto import (
    DeleteFileInputDTO,
    DownloadFileInputDTO,
    ListFilesDTO,
    UploadedFileDTO,
    UploadFileInputDTO,
)


def get_upload_file_input_dto(form: FormData, field_name: str) -> UploadFileInputDTO:
    # several files under one field: only the first one is stored
    uploads = [value for value in form.getlist(field_name) if isinstance(value, UploadFile)]
    first = uploads[0] if uploads else None
    return UploadFileInputDTO(
        filename=first.filename if first else None,
        source=first,
    )


def last_path_segment(file_path: str) -> str:
    return file_path.rsplit("/", 1)[-1]


def get_download_file_input_dto(file_path: str) -> DownloadFileInputDTO:
    return DownloadFileInputDTO(name=last_path_segment(file_path))


def get_delete_file_input_dto(file_path: str) -> DeleteFileInputDTO:
    return DeleteFileInputDTO(name=last_path_segment(file_path))


def uploaded_dto_to_schema(dto: UploadedFileDTO) -> UploadResponse:
    return UploadResponse(success=True, message="File uploaded successfully!", file_name=dto.name)


def list_files_dto_to_schema(dto: ListFilesDTO) -> ListFilesResponse:
    return ListFilesResponse(success=True, files=dto.names)


def deleted_schema() -> ApiResponse:
    return ApiResponse(success=True, message="File deleted successfully!")


def content_disposition(name: str) -> str:
    try:
        name.encode("latin-1")
    except UnicodeEncodeError:
        fallback = name.encode("ascii", "replace").decode("ascii").replace('"', '\\"')
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(name)}"
    escaped = name.replace('"', '\\"')
    return f'attachment; filename="{escaped}"'
