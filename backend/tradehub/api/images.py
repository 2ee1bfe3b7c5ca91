import logging
from typing import Annotated, Optional

import httpx
from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import Response

from tradehub.services.image_proxy_service import (
    ImageNotFoundError,
    ImageProxyService,
    InvalidImageURLError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Images"])


@router.get("/image-proxy")
async def proxy_image(
    url: Annotated[Optional[str], Query(description="Image URL on the allowed host")] = None,
) -> Response:
    image_service = ImageProxyService()
    try:
        image = await image_service.fetch(url)
    except InvalidImageURLError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid image URL",
        ) from None
    except ImageNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image not found",
        ) from None
    except httpx.HTTPError as e:
        logger.error(f"Image proxy error for {url}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to proxy image",
        ) from None

    return Response(
        content=image.content,
        media_type=image.content_type,
        headers={
            "Cache-Control": "public, max-age=86400",
            "Access-Control-Allow-Origin": "*",
        },
    )
