from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models.user import User
from tradehub.schemas.user import UserCreate


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def create(self, user_data: UserCreate) -> User:
        user = User(
            username=user_data.username,
            password=user_data.password,
            roblox_username=user_data.roblox_username,
            discord_username=user_data.discord_username,
            reputation=user_data.reputation,
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def get_or_create(self, user_data: UserCreate) -> tuple[User, bool]:
        """Return (user, is_new_user), creating the user if the username is free."""
        user = await self.get_by_username(user_data.username)
        if user is not None:
            return user, False
        return await self.create(user_data), True
