import pytest

from file_share.backend.app.domain.files import FileName, InvalidFileName


@pytest.mark.parametrize("value", ["hello.txt", "no extension", "ünïcødé.bin", ".hidden", "a..b"])
def test_file_name_accepts_flat_names(value):
    assert FileName(value).value == value
    assert str(FileName(value)) == value


@pytest.mark.parametrize("value", ["", ".", "..", "a/b", "..\\evil", "nul\x00byte"])
def test_file_name_rejects_names_outside_flat_directory(value):
    with pytest.raises(InvalidFileName):
        FileName(value)


def test_file_name_is_not_normalized():
    assert FileName("  spaced  ").value == "  spaced  "
