from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models.chat import ChatMessage
from tradehub.schemas.chat import ChatMessageCreate


class ChatService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_trade_ad(self, trade_ad_id: int) -> list[ChatMessage]:
        result = await self.db.execute(
            select(ChatMessage)
            .where(ChatMessage.trade_ad_id == trade_ad_id)
            .order_by(ChatMessage.created_at, ChatMessage.id)
        )
        return list(result.scalars().all())

    async def create(self, message_data: ChatMessageCreate) -> ChatMessage:
        message = ChatMessage(
            user_id=message_data.user_id,
            trade_ad_id=message_data.trade_ad_id,
            message=message_data.message,
        )
        self.db.add(message)
        await self.db.flush()
        await self.db.refresh(message)
        return message
