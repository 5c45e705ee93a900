class FileShareError(Exception):
    pass


class NoFileUploaded(FileShareError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f'No file uploaded or file field "{field_name}" not found.')


class InvalidFileName(FileShareError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid file name: {name!r}")


class StoredFileNotFound(FileShareError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"File {name} not found.")


class UploadParseError(FileShareError):
    """Raised when the multipart body could not be parsed."""
    pass


class UploadTooLarge(UploadParseError):
    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"maxFileSize exceeded, limit is {max_bytes} bytes")


class FailedToSaveFile(FileShareError):
    pass


class FailedToListFiles(FileShareError):
    pass


class FailedToDeleteFile(FileShareError):
    pass


class FailedToReadFile(FileShareError):
    pass


class StaticAssetMissing(FileShareError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Static file not found: {path}")


class StaticAssetUnreadable(FileShareError):
    def __init__(self, path: str, code: str):
        self.path = path
        self.code = code
        super().__init__(f"Error reading static file {path}: {code}")
