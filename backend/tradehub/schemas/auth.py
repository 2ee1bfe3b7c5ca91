from pydantic import BaseModel, Field

from tradehub.schemas.base import CamelModel


class AuthorizationResponse(CamelModel):
    authorization_url: str
    state: str
    redirect_uri: str
    client_id: str
    scope: str = "openid"


class CallbackRequest(BaseModel):
    # Both optional so a missing code is reported by the login flow, not as a 422
    code: str | None = None
    state: str | None = None


class ResolvedProfile(CamelModel):
    id: int
    username: str
    display_name: str
    profile_image_url: str


class LoginResponse(ResolvedProfile):
    access_token: str = Field(..., description="Signed session token for API authentication")


class CurrentUserResponse(BaseModel):
    user: ResolvedProfile | None = None


class SessionTokenPayload(BaseModel):
    sub: str  # Roblox subject claim
    exp: int
    iat: int | None = None
    username: str
    name: str | None = None
    picture: str | None = None
