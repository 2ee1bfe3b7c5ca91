"""Database models."""

from tradehub.models.chat import ChatMessage
from tradehub.models.oauth_state import OAuthState
from tradehub.models.trade_ad import TradeAd, TradeAdStatus
from tradehub.models.trading_item import TradingItem
from tradehub.models.user import User

__all__ = [
    "ChatMessage",
    "OAuthState",
    "TradeAd",
    "TradeAdStatus",
    "TradingItem",
    "User",
]
