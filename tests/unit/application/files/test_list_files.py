import errno

import pytest

from file_share.backend.app.application.files.use_cases import ListFilesUseCase
from file_share.backend.app.domain.files import FailedToListFiles


pytestmark = pytest.mark.asyncio


async def test_list_files_empty_storage(file_storage):
    out = await ListFilesUseCase(file_storage).execute()

    assert out.names == []


async def test_list_files_returns_every_name_once(file_storage):
    file_storage.put("a.txt", b"a")
    file_storage.put("b.bin", b"\x00\x01")

    out = await ListFilesUseCase(file_storage).execute()

    assert sorted(out.names) == ["a.txt", "b.bin"]


async def test_list_files_unreadable_directory(file_storage):
    file_storage.list_error = PermissionError(errno.EACCES, "Permission denied")

    with pytest.raises(FailedToListFiles):
        await ListFilesUseCase(file_storage).execute()
