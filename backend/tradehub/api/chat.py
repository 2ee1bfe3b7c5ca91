from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.database import get_db
from tradehub.schemas.chat import ChatMessageCreate, ChatMessageResponse
from tradehub.services.chat_service import ChatService
from tradehub.services.trade_ad_service import TradeAdService

router = APIRouter(prefix="/chat-messages", tags=["Chat"])


@router.get("/{trade_ad_id}", response_model=list[ChatMessageResponse])
async def list_chat_messages(
    trade_ad_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ChatMessageResponse]:
    chat_service = ChatService(db)
    messages = await chat_service.list_for_trade_ad(trade_ad_id)
    return [ChatMessageResponse.model_validate(m) for m in messages]


@router.post("", response_model=ChatMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_chat_message(
    message_data: ChatMessageCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ChatMessageResponse:
    trade_ad = await TradeAdService(db).get_by_id(message_data.trade_ad_id)
    if not trade_ad:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trade ad not found",
        )

    chat_service = ChatService(db)
    message = await chat_service.create(message_data)
    await db.commit()
    return ChatMessageResponse.model_validate(message)
