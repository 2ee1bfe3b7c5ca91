from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.database import get_db
from tradehub.schemas.stats import CommunityStats
from tradehub.services.stats_service import StatsService

router = APIRouter(tags=["Stats"])


@router.get("/stats", response_model=CommunityStats)
async def community_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CommunityStats:
    return await StatsService(db).get_community_stats()
