from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models.trading_item import TradingItem
from tradehub.schemas.trading_item import TradingItemCreate


def calculate_change_percent(current_value: int, previous_value: Optional[int]) -> Optional[str]:
    """Signed percent change, e.g. "+12.5%", or None without a usable previous value."""
    if not previous_value:
        return None
    change = (Decimal(current_value) - Decimal(previous_value)) / Decimal(previous_value) * 100
    change = change.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    sign = "+" if change > 0 else ""
    return f"{sign}{change}%"


class TradingItemService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, item_id: int) -> Optional[TradingItem]:
        result = await self.db.execute(select(TradingItem).where(TradingItem.id == item_id))
        return result.scalar_one_or_none()

    async def list_tradeable(self) -> list[TradingItem]:
        # NULL tradeable counts as tradeable
        result = await self.db.execute(
            select(TradingItem)
            .where(TradingItem.tradeable.is_not(False))
            .order_by(TradingItem.id)
        )
        return list(result.scalars().all())

    async def create(self, item_data: TradingItemCreate) -> TradingItem:
        change_percent = item_data.change_percent
        if change_percent is None:
            change_percent = calculate_change_percent(
                item_data.current_value, item_data.previous_value
            )

        item = TradingItem(
            name=item_data.name,
            type=item_data.type,
            rarity=item_data.rarity,
            current_value=item_data.current_value,
            previous_value=item_data.previous_value,
            change_percent=change_percent,
            image_url=item_data.image_url,
            tradeable=item_data.tradeable,
        )
        self.db.add(item)
        await self.db.flush()
        await self.db.refresh(item)
        return item
