"""Services layer."""

from tradehub.services.auth_service import RobloxAuthService
from tradehub.services.chat_service import ChatService
from tradehub.services.image_proxy_service import ImageProxyService
from tradehub.services.roblox_client import RobloxOAuthClient
from tradehub.services.stats_service import StatsService
from tradehub.services.trade_ad_service import TradeAdService
from tradehub.services.trading_item_service import TradingItemService
from tradehub.services.user_service import UserService

__all__ = [
    "ChatService",
    "ImageProxyService",
    "RobloxAuthService",
    "RobloxOAuthClient",
    "StatsService",
    "TradeAdService",
    "TradingItemService",
    "UserService",
]
