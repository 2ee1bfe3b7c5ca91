import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.database import get_db
from tradehub.schemas.trade_ad import TradeAdCreate, TradeAdResponse
from tradehub.services.trade_ad_service import TradeAdService
from tradehub.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trade-ads", tags=["Trade Ads"])


@router.get("", response_model=list[TradeAdResponse])
async def list_trade_ads(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TradeAdResponse]:
    ad_service = TradeAdService(db)
    ads = await ad_service.list_all()
    return [TradeAdResponse.model_validate(ad) for ad in ads]


@router.post("", response_model=TradeAdResponse, status_code=status.HTTP_201_CREATED)
async def create_trade_ad(
    ad_data: TradeAdCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TradeAdResponse:
    if ad_data.user_id is not None:
        user = await UserService(db).get_by_id(ad_data.user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid trade ad data: unknown user",
            )

    ad_service = TradeAdService(db)
    ad = await ad_service.create(ad_data)
    await db.commit()
    logger.info("Trade ad %s created: %s", ad.id, ad.title)
    return TradeAdResponse.model_validate(ad)
