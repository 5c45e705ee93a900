from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from file_share.backend.app.api.files.deps import (
    get_upload_file_use_case,
    get_list_files_use_case,
    get_download_file_use_case,
    get_delete_file_use_case,
)
from file_share.backend.app.api.files.mappers import (
    get_upload_file_input_dto,
    get_download_file_input_dto,
    get_delete_file_input_dto,
    uploaded_dto_to_schema,
    list_files_dto_to_schema,
    deleted_schema,
    content_disposition,
)
from file_share.backend.app.api.files.schemas import ApiResponse, ListFilesResponse, UploadResponse
from file_share.backend.app.application.files.use_cases import (
    UploadFileUseCase,
    ListFilesUseCase,
    DownloadFileUseCase,
    DeleteFileUseCase,
)
from file_share.backend.app.core import Settings, get_app_settings
from file_share.backend.app.domain.files.errors import FailedToReadFile, StoredFileNotFound, UploadParseError

router = APIRouter(tags=["files"])

settings_dep = Annotated[Settings, Depends(get_app_settings)]
upload_file_dep = Annotated[UploadFileUseCase, Depends(get_upload_file_use_case)]
list_files_dep = Annotated[ListFilesUseCase, Depends(get_list_files_use_case)]
download_file_dep = Annotated[DownloadFileUseCase, Depends(get_download_file_use_case)]
delete_file_dep = Annotated[DeleteFileUseCase, Depends(get_delete_file_use_case)]


@router.post("/upload", response_model=UploadResponse, response_model_exclude_none=True)
async def upload_file(
        request: Request,
        settings: settings_dep,
        use_case: upload_file_dep,
):
    # malformed multipart bodies map to UploadParseError
    try:
        form = await request.form()
    except (MultiPartException, StarletteHTTPException, ValueError) as e:
        detail = getattr(e, "message", None) or getattr(e, "detail", None) or str(e)
        raise UploadParseError(detail) from e

    try:
        dto = get_upload_file_input_dto(form, settings.UPLOAD_FIELD_NAME)
        uploaded = await use_case.execute(dto)
    finally:
        await form.close()
    return uploaded_dto_to_schema(uploaded)


@router.get("/files", response_model=ListFilesResponse, response_model_exclude_none=True)
async def list_files(
        use_case: list_files_dep,
):
    files_dto = await use_case.execute()
    return list_files_dto_to_schema(files_dto)


@router.get("/download/{file_path:path}")
async def download_file(
        use_case: download_file_dep,
        file_path: str,
):
    dto = get_download_file_input_dto(file_path)
    try:
        download = await use_case.execute(dto)
    except StoredFileNotFound:
        return PlainTextResponse("File not found.", status_code=status.HTTP_404_NOT_FOUND)
    except FailedToReadFile:
        return PlainTextResponse("Error downloading file.", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return StreamingResponse(
        download.chunks,
        media_type="application/octet-stream",
        headers={"Content-Disposition": content_disposition(download.name)},
    )


@router.delete("/delete/{file_path:path}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_file(
        use_case: delete_file_dep,
        file_path: str,
):
    dto = get_delete_file_input_dto(file_path)
    await use_case.execute(dto)
    return deleted_schema()
