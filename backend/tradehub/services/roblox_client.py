import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from tradehub.config import Settings, get_settings

logger = logging.getLogger(__name__)

AVATAR_SIZE = "150x150"
AVATAR_FORMAT = "Png"


class RobloxAPIError(Exception):
    """Non-success answer from a Roblox endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AvatarFetchError(RobloxAPIError):
    pass


@dataclass
class IdentityClaims:
    sub: str
    preferred_username: str
    name: Optional[str] = None


class RobloxOAuthClient:
    """Client for the Roblox OAuth2/OIDC and thumbnail endpoints.

    Every call opens its own httpx client; nothing is retried.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.timeout = self.settings.roblox_http_timeout

    async def exchange_code(self, code: str, redirect_uri: str) -> str:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code returned to the redirect URI
            redirect_uri: The exact redirect URI used in the authorization request

        Returns:
            The access token

        Raises:
            RobloxAPIError: If the token endpoint rejects the request
            httpx.HTTPError: On transport failure
        """
        data = {
            "client_id": self.settings.roblox_client_id or "",
            "client_secret": self.settings.roblox_client_secret or "",
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
        }
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(self.settings.roblox_token_url, data=data)

        if not response.is_success:
            logger.error(
                "Token exchange failed (%s): %s", response.status_code, response.text
            )
            raise RobloxAPIError("Token exchange rejected", response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None
        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token or not isinstance(access_token, str):
            logger.error("Token exchange response did not include an access token")
            raise RobloxAPIError("Token response missing access_token", response.status_code)
        return access_token

    async def fetch_identity(self, access_token: str) -> IdentityClaims:
        """
        Fetch the OIDC userinfo claims for an access token.

        Raises:
            RobloxAPIError: If the userinfo endpoint rejects the token or the
                claims are unusable
            httpx.HTTPError: On transport failure
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.settings.roblox_userinfo_url, headers=headers)

        if not response.is_success:
            logger.error("User info fetch failed (%s): %s", response.status_code, response.text)
            raise RobloxAPIError("User info request rejected", response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise RobloxAPIError("User info response was not JSON", response.status_code)
        if not isinstance(data, dict):
            raise RobloxAPIError("User info response was not an object", response.status_code)

        sub = str(data.get("sub") or "")
        preferred_username = data.get("preferred_username")
        if not sub.isdigit() or not preferred_username or not isinstance(preferred_username, str):
            logger.error("User info response missing subject or username")
            raise RobloxAPIError("User info response missing claims", response.status_code)

        name = data.get("name")
        return IdentityClaims(
            sub=sub,
            preferred_username=preferred_username,
            name=name if isinstance(name, str) else None,
        )

    async def fetch_avatar_url(self, user_id: int) -> str:
        """
        Look up the 150x150 PNG headshot for a Roblox user.

        Raises:
            AvatarFetchError: On any failure, including transport errors
        """
        params = {
            "userIds": str(user_id),
            "size": AVATAR_SIZE,
            "format": AVATAR_FORMAT,
            "isCircular": "false",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.settings.roblox_thumbnails_url, params=params)
        except httpx.HTTPError as e:
            raise AvatarFetchError(f"Avatar request failed: {e}") from e

        if not response.is_success:
            raise AvatarFetchError("Avatar request rejected", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise AvatarFetchError(f"Malformed avatar response: {e}") from e

        entries = data.get("data") if isinstance(data, dict) else None
        if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
            raise AvatarFetchError("Avatar response has no entries")
        image_url = entries[0].get("imageUrl")
        if not image_url or not isinstance(image_url, str):
            raise AvatarFetchError("Avatar response has no imageUrl")
        return image_url

    async def probe(self) -> dict:
        """Check that the authorization and token endpoints are reachable."""
        client_id = self.settings.roblox_client_id or ""
        results: dict = {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.head(
                    self.settings.roblox_authorize_url,
                    params={
                        "client_id": client_id,
                        "response_type": "code",
                        "redirect_uri": "http://localhost:5000/auth/callback",
                        "scope": "openid",
                        "state": "diagnostic",
                    },
                )
                results["authorization"] = {
                    "status": response.status_code,
                    "working": response.status_code == 200,
                }
            except httpx.HTTPError as e:
                results["authorization"] = {"error": str(e)}

            try:
                # Expected to answer 400 without a code; 404 means the endpoint is gone
                response = await client.post(
                    self.settings.roblox_token_url,
                    data={"grant_type": "authorization_code"},
                )
                results["token_endpoint"] = {
                    "status": response.status_code,
                    "endpoint_exists": response.status_code != 404,
                }
            except httpx.HTTPError as e:
                results["token_endpoint"] = {"error": str(e)}
        return results
