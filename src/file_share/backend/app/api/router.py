from fastapi import APIRouter

from file_share.backend.app.api.files import router as files_router
from file_share.backend.app.api.static import router as static_router

api_router = APIRouter()
api_router.include_router(files_router.router)

# the static catch-all must be included after every other route
assets_router = static_router.router
