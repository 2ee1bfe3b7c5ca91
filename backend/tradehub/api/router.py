from fastapi import APIRouter

from tradehub.api.auth import router as auth_router
from tradehub.api.chat import router as chat_router
from tradehub.api.diagnostics import router as diagnostics_router
from tradehub.api.health import router as health_router
from tradehub.api.images import router as images_router
from tradehub.api.stats import router as stats_router
from tradehub.api.trade_ads import router as trade_ads_router
from tradehub.api.trading_items import router as trading_items_router

api_router = APIRouter()

# Include sub-routers
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router)
api_router.include_router(diagnostics_router)
api_router.include_router(trading_items_router)
api_router.include_router(trade_ads_router)
api_router.include_router(chat_router)
api_router.include_router(images_router)
api_router.include_router(stats_router)
