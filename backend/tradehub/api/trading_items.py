from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.database import get_db
from tradehub.schemas.trading_item import TradingItemCreate, TradingItemResponse
from tradehub.services.trading_item_service import TradingItemService

router = APIRouter(prefix="/trading-items", tags=["Trading Items"])


@router.get("", response_model=list[TradingItemResponse])
async def list_trading_items(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TradingItemResponse]:
    item_service = TradingItemService(db)
    items = await item_service.list_tradeable()
    return [TradingItemResponse.model_validate(item) for item in items]


@router.get("/{item_id}", response_model=TradingItemResponse)
async def get_trading_item(
    item_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TradingItemResponse:
    item_service = TradingItemService(db)
    item = await item_service.get_by_id(item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trading item not found",
        )
    return TradingItemResponse.model_validate(item)


@router.post("", response_model=TradingItemResponse, status_code=status.HTTP_201_CREATED)
async def create_trading_item(
    item_data: TradingItemCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TradingItemResponse:
    item_service = TradingItemService(db)
    item = await item_service.create(item_data)
    await db.commit()
    return TradingItemResponse.model_validate(item)
