from dataclasses import dataclass


@dataclass(frozen=True)
class StoredFile:
    name: str
    size_bytes: int
