from dataclasses import dataclass

from file_share.backend.app.domain.files.errors import InvalidFileName

_FORBIDDEN = ("/", "\\", "\x00")


@dataclass(frozen=True)
class FileName:
    value: str

    def __post_init__(self) -> None:
        # names are storage keys in one flat directory, used as-is
        if self.value in ("", ".", ".."):
            raise InvalidFileName(self.value)
        if any(ch in self.value for ch in _FORBIDDEN):
            raise InvalidFileName(self.value)

    def __str__(self) -> str:
        return self.value
