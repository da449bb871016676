"""
OAuth2 token lifecycle for Zoho accounts.

Purpose
- Build the authorization (consent) URL
- Exchange an authorization code for tokens
- Refresh the access token
- Keep the shared Credential current

The manager mutates the Credential only after a successful exchange or refresh.
A failed call leaves it exactly as it was.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from zoho_books.integrations.contracts.auth import Credential, TokenResponse
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError
from zoho_books.integrations.clients.transport import DEFAULT_TIMEOUT_SECONDS, decode_body

logger = logging.getLogger(__name__)

AUTHORIZATION_URL = "https://accounts.zoho.com/oauth/v2/auth"
TOKEN_URL = "https://accounts.zoho.com/oauth/v2/token"

EXCHANGE_FAILED_MESSAGE = "failed to exchange code for token"
REFRESH_FAILED_MESSAGE = "failed to refresh access token"
MISSING_REFRESH_TOKEN_MESSAGE = "refresh token is required for token refresh"


class TokenManager:
    def __init__(self, credential: Credential, *, client: Optional[httpx.AsyncClient] = None) -> None:
        self.credential = credential
        self._client = client

    # ------------------------------------------------------------------
    # Authorization request
    # ------------------------------------------------------------------

    def build_authorization_url(self) -> str:
        params = {
            "response_type": "code",
            "client_id": self.credential.client_id,
            "scope": self.credential.scope,
            "redirect_uri": self.credential.redirect_uri,
            "access_type": "offline",
        }
        return f"{AUTHORIZATION_URL}?{urlencode(params)}"

    # ------------------------------------------------------------------
    # Token grants
    # ------------------------------------------------------------------

    async def exchange_code(self, code: str) -> TokenResponse:
        form = {
            "code": code,
            "client_id": self.credential.client_id,
            "client_secret": self.credential.client_secret,
            "redirect_uri": self.credential.redirect_uri,
            "grant_type": "authorization_code",
        }
        tokens = await self._post_token_form(form, failure_message=EXCHANGE_FAILED_MESSAGE)
        self._store(tokens)
        logger.info("Exchanged authorization code for Zoho tokens")
        return tokens

    async def refresh(self) -> TokenResponse:
        if not self.credential.refresh_token:
            raise ZohoBooksError(MISSING_REFRESH_TOKEN_MESSAGE, 0, cause=ErrorCause.PRECONDITION)

        form = {
            "refresh_token": self.credential.refresh_token,
            "client_id": self.credential.client_id,
            "client_secret": self.credential.client_secret,
            "grant_type": "refresh_token",
        }
        tokens = await self._post_token_form(form, failure_message=REFRESH_FAILED_MESSAGE)
        self._store(tokens)
        logger.info("Refreshed Zoho access token")
        return tokens

    async def _post_token_form(self, form: Dict[str, str], *, failure_message: str) -> TokenResponse:
        try:
            if self._client is not None:
                response = await self._client.post(TOKEN_URL, data=form, timeout=DEFAULT_TIMEOUT_SECONDS)
            else:
                async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS) as client:
                    response = await client.post(TOKEN_URL, data=form)
        except httpx.TransportError as exc:
            logger.error("%s: no response from token endpoint (%s)", failure_message, exc)
            raise ZohoBooksError(failure_message, 0, cause=ErrorCause.NETWORK) from exc
        except Exception as exc:
            logger.error("%s: request could not be sent (%s)", failure_message, exc)
            raise ZohoBooksError(failure_message, 0, str(exc), cause=ErrorCause.CONSTRUCTION) from exc

        body = decode_body(response)
        if not response.is_success:
            logger.error("%s: status=%s", failure_message, response.status_code)
            raise ZohoBooksError(failure_message, response.status_code, body, cause=ErrorCause.REMOTE)

        # Zoho reports grant errors such as {"error": "invalid_code"} with a 200.
        if not isinstance(body, dict) or not body.get("access_token"):
            logger.error("%s: token endpoint returned no access_token", failure_message)
            raise ZohoBooksError(failure_message, response.status_code, body, cause=ErrorCause.REMOTE)

        try:
            return TokenResponse.model_validate(body)
        except ValidationError as exc:
            raise ZohoBooksError(failure_message, response.status_code, body, cause=ErrorCause.REMOTE) from exc

    def _store(self, tokens: TokenResponse) -> None:
        self.credential.access_token = tokens.access_token
        # Refresh-grant replies usually omit refresh_token; keep the one we hold.
        if tokens.refresh_token:
            self.credential.refresh_token = tokens.refresh_token
        if tokens.expires_in is not None:
            self.credential.expires_at = time.time() + tokens.expires_in
        else:
            self.credential.expires_at = None

    # ------------------------------------------------------------------
    # Direct credential access
    # ------------------------------------------------------------------

    def set_access_token(self, token: Optional[str]) -> None:
        self.credential.access_token = token
        self.credential.expires_at = None

    def set_refresh_token(self, token: Optional[str]) -> None:
        self.credential.refresh_token = token

    def get_access_token(self) -> Optional[str]:
        return self.credential.access_token

    def get_refresh_token(self) -> Optional[str]:
        return self.credential.refresh_token

    def clear_credentials(self) -> None:
        self.credential.access_token = None
        self.credential.refresh_token = None
        self.credential.expires_at = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.credential.access_token)

    def access_token_expired(self, leeway_seconds: float = 0.0) -> bool:
        """
        True when the recorded expiry has passed. Unknown expiry counts as not
        expired; nothing here refreshes automatically.
        """
        if self.credential.expires_at is None:
            return False
        return time.time() + leeway_seconds >= self.credential.expires_at
