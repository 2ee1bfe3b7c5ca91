from datetime import datetime

from pydantic import Field

from tradehub.schemas.base import CamelModel


class TradingItemBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: str = Field(..., min_length=1, max_length=50)
    rarity: str = Field(..., min_length=1, max_length=50)
    current_value: int = Field(..., ge=0)
    previous_value: int | None = Field(None, ge=0)
    change_percent: str | None = Field(None, max_length=20)
    image_url: str | None = Field(None, max_length=500)
    tradeable: bool = True


class TradingItemCreate(TradingItemBase):
    pass


class TradingItemResponse(TradingItemBase):
    id: int
    updated_at: datetime | None = None
