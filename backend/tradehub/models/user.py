from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tradehub.database import Base

if TYPE_CHECKING:
    from tradehub.models.chat import ChatMessage
    from tradehub.models.trade_ad import TradeAd

# OAuth users never log in with a password
OAUTH_PASSWORD_SENTINEL = "oauth_user"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    roblox_username: Mapped[Optional[str]] = mapped_column(String(100))
    discord_username: Mapped[Optional[str]] = mapped_column(String(100))
    reputation: Mapped[int] = mapped_column(Integer, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    trade_ads: Mapped[list["TradeAd"]] = relationship("TradeAd", back_populates="user")
    chat_messages: Mapped[list["ChatMessage"]] = relationship(
        "ChatMessage", back_populates="user"
    )
