from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from tradehub.api.auth import get_roblox_client
from tradehub.config import get_settings
from tradehub.services.roblox_client import RobloxOAuthClient

router = APIRouter(tags=["Diagnostics"])


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}...{value[-4:]}"


@router.get("/oauth-diagnostic")
async def oauth_diagnostic(
    client: Annotated[RobloxOAuthClient, Depends(get_roblox_client)],
) -> dict[str, Any]:
    settings = get_settings()
    client_id = settings.roblox_client_id or ""

    results: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "credentials": {
            "has_client_id": bool(client_id),
            "has_client_secret": bool(settings.roblox_client_secret),
            "client_id_length": len(client_id),
            "client_id_masked": _mask(client_id) if client_id else "missing",
        },
    }
    if not client_id:
        results["error"] = "Client ID missing"
        return results

    tests = await client.probe()
    likely_issues = []
    recommendations = []

    auth_status = tests.get("authorization", {}).get("status")
    if auth_status == 404:
        likely_issues.append("OAuth application not published or active")
        recommendations.append("Check application status in Creator Dashboard")
    elif auth_status == 400:
        likely_issues.append("Invalid redirect URI or parameters")
        recommendations.append("Verify redirect URI matches exactly")

    results["tests"] = tests
    results["analysis"] = {
        "likely_issues": likely_issues,
        "recommendations": recommendations,
    }
    return results
