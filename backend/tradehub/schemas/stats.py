from tradehub.schemas.base import CamelModel


class CommunityStats(CamelModel):
    total_users: int
    active_trade_ads: int
    trading_items: int
    chat_messages: int
