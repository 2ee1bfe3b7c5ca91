import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.models import ChatMessage, TradeAd


@pytest.mark.asyncio
async def test_stats_empty(client: AsyncClient):
    response = await client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalUsers": 0,
        "activeTradeAds": 0,
        "tradingItems": 0,
        "chatMessages": 0,
    }


@pytest.mark.asyncio
async def test_stats_counts(
    client: AsyncClient, db_session: AsyncSession, test_trade_ad, trading_items
):
    db_session.add(
        TradeAd(title="Done", offering_items=["A"], wanting_items=["B"], status="completed")
    )
    db_session.add(ChatMessage(trade_ad_id=test_trade_ad.id, message="hi"))
    await db_session.commit()

    response = await client.get("/api/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["totalUsers"] == 1
    assert data["activeTradeAds"] == 1
    assert data["tradingItems"] == 3
    assert data["chatMessages"] == 1
