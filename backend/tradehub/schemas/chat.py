from datetime import datetime

from pydantic import Field

from tradehub.schemas.base import CamelModel


class ChatMessageCreate(CamelModel):
    user_id: int | None = None
    trade_ad_id: int
    message: str = Field(..., min_length=1, max_length=2000)


class ChatMessageResponse(ChatMessageCreate):
    id: int
    created_at: datetime | None = None
