"""
FastAPI routes for the OAuth2 authorization-code flow.

Mount on an app whose redirect URI points at ``<prefix>/auth/callback``:

    app.include_router(build_auth_router(sdk), prefix="/zoho")

Tokens stay inside the SDK's Credential; responses only report state.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from zoho_books.integrations.contracts.auth import TokenResponse
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError
from zoho_books.sdk import ZohoBooksSDK

logger = logging.getLogger(__name__)


def _http_error(exc: ZohoBooksError) -> HTTPException:
    if exc.cause is ErrorCause.PRECONDITION:
        status_code = 400
    elif 400 <= exc.http_status < 600:
        status_code = exc.http_status
    else:
        # Upstream unreachable or answered with something unusable.
        status_code = 502
    return HTTPException(status_code=status_code, detail=exc.to_dict())


def _token_summary(tokens: TokenResponse) -> dict:
    return {
        "success": True,
        "authenticated": True,
        "token_type": tokens.token_type,
        "expires_in": tokens.expires_in,
        "api_domain": tokens.api_domain,
    }


def build_auth_router(sdk: ZohoBooksSDK) -> APIRouter:
    router = APIRouter(tags=["Zoho Auth"])

    @router.get("/auth/url")
    async def auth_url():
        return {"auth_url": sdk.get_auth_url()}

    @router.get("/auth/callback")
    async def auth_callback(
        code: Optional[str] = Query(default=None),
        error: Optional[str] = Query(default=None),
    ):
        if error:
            raise HTTPException(status_code=400, detail=f"Authorization denied: {error}")
        if not code:
            raise HTTPException(status_code=400, detail="Missing authorization code")
        try:
            tokens = await sdk.exchange_code_for_token(code)
        except ZohoBooksError as exc:
            logger.error("OAuth callback failed: %s (status=%s)", exc.message, exc.http_status)
            raise _http_error(exc) from exc
        return _token_summary(tokens)

    @router.post("/auth/refresh")
    async def auth_refresh():
        try:
            tokens = await sdk.refresh_access_token()
        except ZohoBooksError as exc:
            logger.error("Token refresh failed: %s (status=%s)", exc.message, exc.http_status)
            raise _http_error(exc) from exc
        return _token_summary(tokens)

    @router.post("/auth/logout")
    async def auth_logout():
        sdk.clear_credentials()
        return {"success": True, "authenticated": False}

    @router.get("/auth/status")
    async def auth_status():
        return {
            "authenticated": sdk.is_authenticated,
            "expired": sdk.access_token_expired(),
        }

    return router
