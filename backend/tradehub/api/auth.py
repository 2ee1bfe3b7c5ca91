import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.config import get_settings
from tradehub.database import get_db
from tradehub.schemas.auth import (
    AuthorizationResponse,
    CallbackRequest,
    CurrentUserResponse,
    LoginResponse,
    ResolvedProfile,
)
from tradehub.services.auth_service import AuthFlowError, RobloxAuthService, UnexpectedAuthError
from tradehub.services.roblox_client import RobloxOAuthClient
from tradehub.utils.auth import CurrentProfile, CurrentProfileOptional, create_session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_roblox_client() -> RobloxOAuthClient:
    return RobloxOAuthClient(get_settings())


@router.get("/roblox/authorize", response_model=AuthorizationResponse)
async def roblox_authorize(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    origin: Annotated[Optional[str], Query(description="Origin of the web client")] = None,
) -> AuthorizationResponse:
    auth_service = RobloxAuthService(db)
    return await auth_service.create_authorization_request(
        origin or request.headers.get("origin")
    )


@router.post("/roblox/callback", response_model=LoginResponse)
async def roblox_callback(
    payload: CallbackRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    client: Annotated[RobloxOAuthClient, Depends(get_roblox_client)],
) -> LoginResponse:
    auth_service = RobloxAuthService(db, client)
    try:
        profile = await auth_service.complete_login(payload.code, payload.state)
    except AuthFlowError:
        raise
    except Exception:
        logger.exception("OAuth callback error")
        raise UnexpectedAuthError() from None

    return LoginResponse(
        **profile.model_dump(),
        access_token=create_session_token(profile),
    )


@router.get("/user", response_model=CurrentUserResponse)
async def get_current_user(profile: CurrentProfileOptional) -> CurrentUserResponse:
    return CurrentUserResponse(user=profile)


@router.get("/session", response_model=ResolvedProfile)
async def get_session(profile: CurrentProfile) -> ResolvedProfile:
    return profile
