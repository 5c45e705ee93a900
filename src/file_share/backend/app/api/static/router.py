from typing import Annotated

from fastapi import APIRouter, Depends, Response

from file_share.backend.app.core import get_public_assets
from file_share.backend.app.infrastructure.assets.public_assets import PublicAssets

router = APIRouter(tags=["static"])

public_assets_dep = Annotated[PublicAssets, Depends(get_public_assets)]


# registered last: every GET no other route claims ends up here
@router.get("/{asset_path:path}", include_in_schema=False)
async def serve_static(
        assets: public_assets_dep,
        asset_path: str,
) -> Response:
    asset = await assets.read(asset_path)
    return Response(content=asset.content, media_type=asset.content_type)
