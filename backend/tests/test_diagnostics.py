import re

import pytest
from httpx import AsyncClient
from pytest_httpx import HTTPXMock

from tradehub.config import get_settings

AUTHORIZE_URL_PATTERN = re.compile(r"^https://apis\.roblox\.com/oauth/v1/authorize\?.*")
TOKEN_URL = "https://apis.roblox.com/oauth/v1/token"


class TestOAuthDiagnostic:
    """Tests for the sign-in configuration diagnostic."""

    @pytest.mark.asyncio
    async def test_reports_working_endpoints(self, client: AsyncClient, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="HEAD", url=AUTHORIZE_URL_PATTERN, status_code=200)
        httpx_mock.add_response(method="POST", url=TOKEN_URL, status_code=400)

        response = await client.get("/api/oauth-diagnostic")
        assert response.status_code == 200
        data = response.json()
        assert data["credentials"] == {
            "has_client_id": True,
            "has_client_secret": True,
            "client_id_length": 14,
            "client_id_masked": "test...t-id",
        }
        assert data["tests"]["authorization"] == {"status": 200, "working": True}
        assert data["tests"]["token_endpoint"] == {"status": 400, "endpoint_exists": True}
        assert data["analysis"]["likely_issues"] == []
        assert "test-client-secret" not in response.text

    @pytest.mark.asyncio
    async def test_flags_unpublished_application(
        self, client: AsyncClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="HEAD", url=AUTHORIZE_URL_PATTERN, status_code=404)
        httpx_mock.add_response(method="POST", url=TOKEN_URL, status_code=404)

        response = await client.get("/api/oauth-diagnostic")
        data = response.json()
        assert data["tests"]["authorization"]["working"] is False
        assert data["tests"]["token_endpoint"]["endpoint_exists"] is False
        assert data["analysis"]["likely_issues"] == [
            "OAuth application not published or active"
        ]

    @pytest.mark.asyncio
    async def test_missing_client_id(
        self, client: AsyncClient, httpx_mock: HTTPXMock, monkeypatch
    ):
        monkeypatch.setattr(get_settings(), "roblox_client_id", None)

        response = await client.get("/api/oauth-diagnostic")
        assert response.status_code == 200
        data = response.json()
        assert data["error"] == "Client ID missing"
        assert data["credentials"]["client_id_masked"] == "missing"
        assert httpx_mock.get_requests() == []
