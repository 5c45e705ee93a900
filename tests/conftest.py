import pytest

from tests.unit.fakes.file_storage import FakeFileStorage


@pytest.fixture
def file_storage() -> FakeFileStorage:
    return FakeFileStorage()
