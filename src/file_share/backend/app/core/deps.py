from fastapi import Request

from file_share.backend.app.core.config import Settings
from file_share.backend.app.domain.files.interfaces import FileStorage
from file_share.backend.app.infrastructure.assets.public_assets import PublicAssets


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_file_storage(request: Request) -> FileStorage:
    """
    Storage instance built once by create_app().
    Swap implementation there without touching use cases.
    """
    return request.app.state.file_storage


def get_public_assets(request: Request) -> PublicAssets:
    return request.app.state.public_assets
