import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from tradehub.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Some image hosts refuse requests without a browser user agent
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_CONTENT_TYPE = "image/png"


class InvalidImageURLError(ValueError):
    pass


class ImageNotFoundError(Exception):
    pass


@dataclass
class ProxiedImage:
    content: bytes
    content_type: str


class ImageProxyService:
    """Fetches item images from the allowed image host on behalf of the browser."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def validate_url(self, url: Optional[str]) -> str:
        if not url or not url.startswith(self.settings.image_proxy_allowed_prefix):
            raise InvalidImageURLError("Invalid image URL")
        return url

    async def fetch(self, url: Optional[str]) -> ProxiedImage:
        """
        Raises:
            InvalidImageURLError: URL is not on the allowed host
            ImageNotFoundError: Upstream answered with a non-success status
            httpx.HTTPError: On transport failure
        """
        image_url = self.validate_url(url)

        async with httpx.AsyncClient(
            timeout=self.settings.image_proxy_timeout, follow_redirects=True
        ) as client:
            response = await client.get(image_url, headers={"User-Agent": BROWSER_USER_AGENT})

        if not response.is_success:
            logger.info("Image proxy upstream returned %s for %s", response.status_code, image_url)
            raise ImageNotFoundError(image_url)

        return ProxiedImage(
            content=response.content,
            content_type=response.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
        )
