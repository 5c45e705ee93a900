import errno

import pytest

from file_share.backend.app.application.files.dto import UploadFileInputDTO
from file_share.backend.app.application.files.use_cases import UploadFileUseCase
from file_share.backend.app.domain.files import (
    FailedToSaveFile,
    InvalidFileName,
    NoFileUploaded,
    UploadParseError,
    UploadTooLarge,
)
from tests.unit.fakes.file_storage import BytesSource


pytestmark = pytest.mark.asyncio


def make_use_case(storage, max_bytes: int = 1024) -> UploadFileUseCase:
    return UploadFileUseCase(storage, field_name="myFile", max_bytes=max_bytes)


async def test_upload_stores_file_under_original_name(file_storage):
    use_case = make_use_case(file_storage)

    out = await use_case.execute(UploadFileInputDTO(filename="hello.txt", source=BytesSource(b"abc")))

    assert out.name == "hello.txt"
    assert out.size_bytes == 3
    assert file_storage.get("hello.txt") == b"abc"


async def test_upload_with_existing_name_overwrites(file_storage):
    use_case = make_use_case(file_storage)
    file_storage.put("report.pdf", b"old contents")

    await use_case.execute(UploadFileInputDTO(filename="report.pdf", source=BytesSource(b"new")))

    assert file_storage.get("report.pdf") == b"new"
    assert file_storage.count() == 1


async def test_upload_without_file_raises_no_file_uploaded(file_storage):
    use_case = make_use_case(file_storage)

    with pytest.raises(NoFileUploaded) as exc_info:
        await use_case.execute(UploadFileInputDTO(filename=None, source=None))

    assert '"myFile"' in str(exc_info.value)
    assert file_storage.count() == 0


async def test_upload_with_empty_filename_counts_as_missing(file_storage):
    use_case = make_use_case(file_storage)

    with pytest.raises(NoFileUploaded):
        await use_case.execute(UploadFileInputDTO(filename="", source=BytesSource(b"")))


async def test_upload_rejects_name_with_separator(file_storage):
    use_case = make_use_case(file_storage)

    with pytest.raises(InvalidFileName):
        await use_case.execute(UploadFileInputDTO(filename="../escape.txt", source=BytesSource(b"x")))

    assert file_storage.count() == 0


async def test_upload_over_limit_is_a_parse_error(file_storage):
    use_case = make_use_case(file_storage, max_bytes=4)

    with pytest.raises(UploadTooLarge) as exc_info:
        await use_case.execute(UploadFileInputDTO(filename="big.bin", source=BytesSource(b"12345")))

    assert isinstance(exc_info.value, UploadParseError)
    assert not file_storage.exists("big.bin")


async def test_upload_storage_failure_raises_failed_to_save(file_storage):
    use_case = make_use_case(file_storage)
    file_storage.save_error = OSError(errno.ENOSPC, "No space left on device")

    with pytest.raises(FailedToSaveFile) as exc_info:
        await use_case.execute(UploadFileInputDTO(filename="a.txt", source=BytesSource(b"abc")))

    assert "No space left on device" in str(exc_info.value)
