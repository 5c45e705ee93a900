from file_share.backend.app.domain.files.entities import StoredFile
from file_share.backend.app.domain.files.errors import (
    FileShareError,
    NoFileUploaded,
    InvalidFileName,
    StoredFileNotFound,
    UploadParseError,
    UploadTooLarge,
    FailedToSaveFile,
    FailedToListFiles,
    FailedToDeleteFile,
    FailedToReadFile,
    StaticAssetMissing,
    StaticAssetUnreadable,
)
from file_share.backend.app.domain.files.value_objects import FileName

__all__ = ['StoredFile', 'FileName', 'FileShareError', 'NoFileUploaded', 'InvalidFileName',
           'StoredFileNotFound', 'UploadParseError', 'UploadTooLarge', 'FailedToSaveFile',
           'FailedToListFiles', 'FailedToDeleteFile', 'FailedToReadFile', 'StaticAssetMissing', 'StaticAssetUnreadable']
