from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models.chat import ChatMessage
from tradehub.models.trade_ad import TradeAd, TradeAdStatus
from tradehub.models.trading_item import TradingItem
from tradehub.models.user import User
from tradehub.schemas.stats import CommunityStats


class StatsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, query) -> int:
        result = await self.db.execute(query)
        return result.scalar() or 0

    async def get_community_stats(self) -> CommunityStats:
        return CommunityStats(
            total_users=await self._count(select(func.count(User.id))),
            active_trade_ads=await self._count(
                select(func.count(TradeAd.id)).where(
                    TradeAd.status == TradeAdStatus.active.value
                )
            ),
            trading_items=await self._count(select(func.count(TradingItem.id))),
            chat_messages=await self._count(select(func.count(ChatMessage.id))),
        )
