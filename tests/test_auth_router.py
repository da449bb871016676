from contextlib import ExitStack, asynccontextmanager

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tests.conftest import RecordingHandler
from zoho_books.api import build_auth_router
from zoho_books.sdk import ZohoBooksSDK


@pytest.fixture
def build_app(credential):
    """Mount the auth router on a throwaway app; the SDK closes with the app's lifespan."""
    with ExitStack() as stack:

        def _build(responder, *, access_token=None, refresh_token=None):
            credential.access_token = access_token
            credential.refresh_token = refresh_token
            handler = RecordingHandler(responder)
            sdk = ZohoBooksSDK(credential, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

            @asynccontextmanager
            async def lifespan(app):
                yield
                await sdk.aclose()

            app = FastAPI(lifespan=lifespan)
            app.include_router(build_auth_router(sdk), prefix="/zoho")
            client = stack.enter_context(TestClient(app))
            return client, sdk, handler

        yield _build


def test_auth_url_endpoint(build_app):
    client, sdk, handler = build_app(lambda r: httpx.Response(200, json={}))

    resp = client.get("/zoho/auth/url")

    assert resp.status_code == 200
    assert resp.json() == {"auth_url": sdk.get_auth_url()}
    assert handler.calls == 0


def test_callback_exchanges_code_without_leaking_tokens(build_app):
    client, sdk, _ = build_app(
        lambda r: httpx.Response(
            200,
            json={
                "access_token": "secret-access",
                "refresh_token": "secret-refresh",
                "expires_in": 3600,
                "token_type": "Bearer",
            },
        )
    )

    resp = client.get("/zoho/auth/callback", params={"code": "abc"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["authenticated"] is True
    assert body["expires_in"] == 3600
    assert "secret-access" not in resp.text
    assert "secret-refresh" not in resp.text
    assert sdk.get_access_token() == "secret-access"


def test_callback_without_code_is_rejected(build_app):
    client, _, handler = build_app(lambda r: httpx.Response(200, json={}))

    assert client.get("/zoho/auth/callback").status_code == 400
    assert client.get("/zoho/auth/callback", params={"error": "access_denied"}).status_code == 400
    assert handler.calls == 0


def test_callback_passes_through_token_endpoint_status(build_app):
    client, _, _ = build_app(lambda r: httpx.Response(400, json={"error": "invalid_code"}))

    resp = client.get("/zoho/auth/callback", params={"code": "stale"})

    assert resp.status_code == 400
    assert resp.json()["detail"]["message"] == "failed to exchange code for token"
    assert resp.json()["detail"]["details"] == {"error": "invalid_code"}


def test_callback_network_failure_is_bad_gateway(build_app):
    def responder(request):
        raise httpx.ConnectError("down", request=request)

    client, _, _ = build_app(responder)

    resp = client.get("/zoho/auth/callback", params={"code": "abc"})

    assert resp.status_code == 502
    assert resp.json()["detail"]["cause"] == "NETWORK"


def test_refresh_without_refresh_token_is_bad_request(build_app):
    client, _, handler = build_app(lambda r: httpx.Response(200, json={}))

    resp = client.post("/zoho/auth/refresh")

    assert resp.status_code == 400
    assert resp.json()["detail"]["cause"] == "PRECONDITION"
    assert handler.calls == 0


def test_status_and_logout(build_app):
    client, sdk, _ = build_app(lambda r: httpx.Response(200, json={}), access_token="A", refresh_token="R")

    assert client.get("/zoho/auth/status").json() == {"authenticated": True, "expired": False}

    resp = client.post("/zoho/auth/logout")
    assert resp.json() == {"success": True, "authenticated": False}
    assert sdk.get_refresh_token() is None
    assert client.get("/zoho/auth/status").json()["authenticated"] is False
