from .upload_file import UploadFileUseCase
from .list_files import ListFilesUseCase
from .download_file import DownloadFileUseCase
from .delete_file import DeleteFileUseCase

__all__ = [
    "UploadFileUseCase",
    "ListFilesUseCase",
    "DownloadFileUseCase",
    "DeleteFileUseCase",
]
