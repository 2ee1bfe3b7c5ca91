from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tradehub.config import get_settings
from tradehub.database import get_db

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    try:
        await db.execute(text("SELECT 1"))
        database = "healthy"
    except Exception as e:
        database = f"unhealthy: {str(e)}"

    # Sign-in being unconfigured degrades login only, not readiness
    roblox_oauth = "configured" if get_settings().roblox_oauth_configured() else "not configured"

    return {
        "status": "healthy" if database == "healthy" else "unhealthy",
        "checks": {
            "database": database,
            "roblox_oauth": roblox_oauth,
        },
    }
