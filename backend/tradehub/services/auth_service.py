"""
Roblox sign-in flow.

Building the authorization request and completing the callback. The
callback runs four network-bound stages in order: token exchange, identity
fetch, avatar lookup and local user upsert. Failures in the first two end
the login; the last two degrade silently.
"""

import logging
import secrets
from typing import Optional
from urllib.parse import urlencode

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.config import Settings, get_settings
from tradehub.models.oauth_state import OAuthState
from tradehub.models.user import OAUTH_PASSWORD_SENTINEL
from tradehub.schemas.auth import AuthorizationResponse, ResolvedProfile
from tradehub.schemas.user import UserCreate
from tradehub.services.roblox_client import (
    AvatarFetchError,
    IdentityClaims,
    RobloxAPIError,
    RobloxOAuthClient,
)
from tradehub.services.user_service import UserService
from tradehub.utils.avatar import generate_avatar

logger = logging.getLogger(__name__)

OAUTH_SCOPE = "openid"
CALLBACK_PATH = "/auth/callback"


class AuthFlowError(Exception):
    """Login failure reported to the caller as {"error": message}."""

    status_code = 400
    message = "Authentication failed"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class MissingCodeError(AuthFlowError):
    message = "Authorization code required"


class InvalidStateError(AuthFlowError):
    message = "Invalid or expired state"


class MissingOriginError(AuthFlowError):
    message = "Origin required"


class TokenExchangeError(AuthFlowError):
    message = "Failed to exchange authorization code"


class IdentityFetchError(AuthFlowError):
    message = "Failed to get user information"


class OAuthNotConfiguredError(AuthFlowError):
    status_code = 503
    message = "Roblox OAuth is not configured"


class UnexpectedAuthError(AuthFlowError):
    status_code = 500
    message = "Authentication failed"


def build_redirect_uri(origin: str) -> str:
    return f"{origin.rstrip('/')}{CALLBACK_PATH}"


class RobloxAuthService:
    def __init__(
        self,
        db: AsyncSession,
        client: Optional[RobloxOAuthClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.db = db
        self.settings = settings or get_settings()
        self.client = client or RobloxOAuthClient(self.settings)

    async def create_authorization_request(self, origin: Optional[str]) -> AuthorizationResponse:
        """
        Build the provider authorization URL for a new login attempt.

        The generated state and the redirect URI are stored so the callback
        can verify the state and repeat the redirect URI verbatim.

        Raises:
            OAuthNotConfiguredError: If no client id is configured
            MissingOriginError: If the caller's origin is unknown
        """
        client_id = self.settings.roblox_client_id
        if not client_id:
            logger.error("Roblox client ID not configured")
            raise OAuthNotConfiguredError()
        if not origin:
            raise MissingOriginError()

        state = secrets.token_urlsafe(32)
        redirect_uri = build_redirect_uri(origin)

        self.db.add(
            OAuthState(
                state=state,
                redirect_uri=redirect_uri,
                expires_at=OAuthState.get_expiry_time(self.settings.oauth_state_ttl_minutes),
            )
        )
        await self.db.commit()

        query = urlencode(
            {
                "client_id": client_id,
                "redirect_uri": redirect_uri,
                "scope": OAUTH_SCOPE,
                "response_type": "code",
                "state": state,
            }
        )
        logger.info("Starting Roblox login with redirect URI %s", redirect_uri)

        return AuthorizationResponse(
            authorization_url=f"{self.settings.roblox_authorize_url}?{query}",
            state=state,
            redirect_uri=redirect_uri,
            client_id=client_id,
            scope=OAUTH_SCOPE,
        )

    async def _consume_state(self, state: Optional[str]) -> str:
        """Delete the pending state and return its redirect URI."""
        if not state:
            raise InvalidStateError()

        result = await self.db.execute(select(OAuthState).where(OAuthState.state == state))
        pending = result.scalar_one_or_none()
        if pending is None:
            logger.warning("Login callback with unknown or reused state")
            raise InvalidStateError()

        redirect_uri = pending.redirect_uri
        expired = pending.is_expired()
        await self.db.execute(delete(OAuthState).where(OAuthState.state == state))
        await self.db.commit()

        if expired:
            logger.warning("Login callback with expired state")
            raise InvalidStateError()
        return redirect_uri

    async def _resolve_avatar(self, identity: IdentityClaims) -> str:
        try:
            return await self.client.fetch_avatar_url(int(identity.sub))
        except AvatarFetchError as e:
            logger.info("Avatar fetch failed for %s, using fallback: %s", identity.sub, e)
            return generate_avatar(identity.preferred_username)

    async def _store_local_user(self, profile: ResolvedProfile) -> None:
        user_service = UserService(self.db)
        try:
            user_data = UserCreate(
                username=profile.username,
                password=OAUTH_PASSWORD_SENTINEL,
                roblox_username=profile.username,
                reputation=0,
            )
        except ValidationError as e:
            logger.warning("Skipping local user for %s: %s", profile.username, e)
            return

        try:
            _, is_new = await user_service.get_or_create(user_data)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.warning("Could not store local user %s: %s", profile.username, e)
            try:
                await self.db.rollback()
            except SQLAlchemyError:
                logger.warning("Rollback after failed user store also failed", exc_info=True)
            return

        if is_new:
            logger.info("Created local user for Roblox account %s", profile.username)

    async def complete_login(self, code: Optional[str], state: Optional[str]) -> ResolvedProfile:
        """
        Finish the authorization-code flow and resolve the user's profile.

        Raises:
            MissingCodeError: No code in the callback
            InvalidStateError: State unknown, reused or expired
            TokenExchangeError: Provider rejected the code
            IdentityFetchError: Provider rejected the access token
        """
        if not code:
            raise MissingCodeError()

        redirect_uri = await self._consume_state(state)

        try:
            access_token = await self.client.exchange_code(code, redirect_uri)
        except RobloxAPIError:
            raise TokenExchangeError() from None

        try:
            identity = await self.client.fetch_identity(access_token)
        except RobloxAPIError:
            raise IdentityFetchError() from None

        profile = ResolvedProfile(
            id=int(identity.sub),
            username=identity.preferred_username,
            display_name=identity.name or identity.preferred_username,
            profile_image_url=await self._resolve_avatar(identity),
        )

        await self._store_local_user(profile)

        logger.info("Roblox login completed for %s (%s)", profile.username, profile.id)
        return profile
