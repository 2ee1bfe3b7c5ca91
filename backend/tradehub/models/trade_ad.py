import enum
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tradehub.database import Base

if TYPE_CHECKING:
    from tradehub.models.chat import ChatMessage
    from tradehub.models.user import User


class TradeAdStatus(str, enum.Enum):
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class TradeAd(Base):
    __tablename__ = "trade_ads"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL")
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    offering_items: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    wanting_items: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(String(20), default=TradeAdStatus.active.value)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    user: Mapped[Optional["User"]] = relationship("User", back_populates="trade_ads")
    chat_messages: Mapped[list["ChatMessage"]] = relationship(
        "ChatMessage", back_populates="trade_ad", cascade="all, delete-orphan"
    )
