from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from tradehub.database import Base


class TradingItem(Base):
    __tablename__ = "trading_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)  # crop, gear, egg, seed...
    rarity: Mapped[str] = mapped_column(String(50), nullable=False)

    # Price history
    current_value: Mapped[int] = mapped_column(Integer, nullable=False)
    previous_value: Mapped[Optional[int]] = mapped_column(Integer)
    change_percent: Mapped[Optional[str]] = mapped_column(String(20))

    image_url: Mapped[Optional[str]] = mapped_column(String(500))
    tradeable: Mapped[bool] = mapped_column(Boolean, default=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
