from pydantic import Field

from tradehub.schemas.base import CamelModel


class UserBase(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    roblox_username: str | None = Field(None, max_length=100)
    discord_username: str | None = Field(None, max_length=100)
    reputation: int = 0


class UserCreate(UserBase):
    password: str = Field(..., min_length=1, max_length=255)
