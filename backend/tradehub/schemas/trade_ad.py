from datetime import datetime
from typing import Literal

from pydantic import Field

from tradehub.schemas.base import CamelModel

TradeAdStatusLiteral = Literal["active", "completed", "cancelled"]


class TradeAdBase(CamelModel):
    user_id: int | None = None
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    offering_items: list[str] = Field(..., min_length=1)
    wanting_items: list[str] = Field(..., min_length=1)
    status: TradeAdStatusLiteral = "active"


class TradeAdCreate(TradeAdBase):
    pass


class TradeAdResponse(TradeAdBase):
    id: int
    created_at: datetime | None = None
