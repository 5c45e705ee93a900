import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from file_share.backend.app.api.files.schemas import ErrorResponse
from file_share.backend.app.api.middleware.cors import CORS_HEADERS
from file_share.backend.app.domain.files import (
    NoFileUploaded,
    InvalidFileName,
    StoredFileNotFound,
    UploadParseError,
    FailedToSaveFile,
    FailedToListFiles,
    FailedToDeleteFile,
    StaticAssetMissing,
    StaticAssetUnreadable,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NoFileUploaded)
    async def no_file_uploaded(_: Request, exc: NoFileUploaded):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(InvalidFileName)
    async def invalid_file_name(_: Request, exc: InvalidFileName):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(UploadParseError)
    async def upload_parse_error(_: Request, exc: UploadParseError):
        logger.error("Error parsing form: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "File upload failed.", str(exc) or None)

    @app.exception_handler(FailedToSaveFile)
    async def failed_to_save_file(_: Request, exc: FailedToSaveFile):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error saving file.", str(exc) or None)

    @app.exception_handler(FailedToListFiles)
    async def failed_to_list_files(_: Request, __: FailedToListFiles):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Could not list files.")

    @app.exception_handler(StoredFileNotFound)
    async def stored_file_not_found(_: Request, __: StoredFileNotFound):
        return _error(status.HTTP_404_NOT_FOUND, "File not found.")

    @app.exception_handler(FailedToDeleteFile)
    async def failed_to_delete_file(_: Request, exc: FailedToDeleteFile):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to delete file: {exc}")

    @app.exception_handler(StaticAssetMissing)
    async def static_asset_missing(_: Request, __: StaticAssetMissing):
        return HTMLResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content="<h1>404 Not Found</h1><p>The requested file could not be found.</p>",
        )

    @app.exception_handler(StaticAssetUnreadable)
    async def static_asset_unreadable(_: Request, exc: StaticAssetUnreadable):
        return HTMLResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=f"<h1>500 Internal Server Error: {exc.code}</h1>",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        # this handler runs outside the middleware stack, so CORS headers are added here
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "Internal server error",
            },
            headers=CORS_HEADERS,
        )
