from datetime import UTC, datetime, timedelta
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from tradehub.config import get_settings
from tradehub.schemas.auth import ResolvedProfile, SessionTokenPayload
from tradehub.utils.avatar import generate_avatar

settings = get_settings()

ALGORITHM = "HS256"

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


def create_session_token(
    profile: ResolvedProfile, expires_delta: timedelta | None = None
) -> str:
    """Sign the resolved profile into a session token handed back after login."""
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=settings.session_token_days)
    to_encode = {
        "sub": str(profile.id),
        "username": profile.username,
        "name": profile.display_name,
        "picture": profile.profile_image_url,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def decode_session_token(token: str) -> SessionTokenPayload:
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
            options={"verify_exp": True},
        )
        return SessionTokenPayload(**payload)
    except (JWTError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )


def profile_from_payload(payload: SessionTokenPayload) -> ResolvedProfile:
    return ResolvedProfile(
        id=int(payload.sub),
        username=payload.username,
        display_name=payload.name or payload.username,
        profile_image_url=payload.picture or generate_avatar(payload.username),
    )


async def get_current_profile_optional(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[ResolvedProfile]:
    """
    Profile from the session token if one was sent.

    Returns None when no token is present; a token that fails verification
    is still rejected with 401.
    """
    if not credentials:
        return None
    return profile_from_payload(decode_session_token(credentials.credentials))


async def get_current_profile(
    profile: Annotated[Optional[ResolvedProfile], Depends(get_current_profile_optional)],
) -> ResolvedProfile:
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return profile


# Type aliases for dependency injection
CurrentProfile = Annotated[ResolvedProfile, Depends(get_current_profile)]
CurrentProfileOptional = Annotated[Optional[ResolvedProfile], Depends(get_current_profile_optional)]
