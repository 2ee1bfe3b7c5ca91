from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models.trade_ad import TradeAd
from tradehub.schemas.trade_ad import TradeAdCreate


class TradeAdService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, trade_ad_id: int) -> Optional[TradeAd]:
        result = await self.db.execute(select(TradeAd).where(TradeAd.id == trade_ad_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[TradeAd]:
        result = await self.db.execute(
            select(TradeAd).order_by(TradeAd.created_at.desc(), TradeAd.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, ad_data: TradeAdCreate) -> TradeAd:
        ad = TradeAd(
            user_id=ad_data.user_id,
            title=ad_data.title,
            description=ad_data.description,
            offering_items=list(ad_data.offering_items),
            wanting_items=list(ad_data.wanting_items),
            status=ad_data.status,
        )
        self.db.add(ad)
        await self.db.flush()
        await self.db.refresh(ad)
        return ad
