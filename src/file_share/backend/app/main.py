import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from file_share.backend.app.api.middleware.cors import PermissiveCORSMiddleware
from file_share.backend.app.api.router import api_router, assets_router
from file_share.backend.app.core import Settings, configure_logging, get_settings
from file_share.backend.app.exception_handlers import register_exception_handlers
from file_share.backend.app.infrastructure.assets.public_assets import PublicAssets
from file_share.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    file_storage = FilesystemFileStorage(settings.FILE_STORAGE_DIR.resolve())
    public_assets = PublicAssets(settings.PUBLIC_DIR.resolve())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.LOG_LEVEL)
        await file_storage.ensure_root()
        logger.info("Upload directory: %s", file_storage.base_dir)
        logger.info("Public directory (for static files): %s", public_assets.root)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.file_storage = file_storage
    app.state.public_assets = public_assets

    app.add_middleware(PermissiveCORSMiddleware)
    app.include_router(api_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(assets_router)
    register_exception_handlers(app)
    return app

app = create_app()
