from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """
    Common envelope of every JSON endpoint: `success` always present,
    `message` only when there is something to say.
    """
    success: bool
    message: Optional[str] = None


class ErrorResponse(ApiResponse):
    success: bool = False
    error: Optional[str] = None


class UploadResponse(ApiResponse):
    file_name: str = Field(alias="fileName")

    model_config = ConfigDict(populate_by_name=True)


class ListFilesResponse(ApiResponse):
    files: list[str]
