"""
ZohoBooksSDK - single entry point for the Zoho Books client.

Owns one Credential, one transport, one token manager and one client per
resource. Several SDK instances never share state unless the caller hands
them the same Credential.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from zoho_books.config import ZohoBooksSettings
from zoho_books.integrations.clients.contacts import ContactsClient
from zoho_books.integrations.clients.customer_payments import CustomerPaymentsClient
from zoho_books.integrations.clients.invoices import InvoicesClient
from zoho_books.integrations.clients.sales_receipts import SalesReceiptsClient
from zoho_books.integrations.clients.token_manager import TokenManager
from zoho_books.integrations.clients.transport import ZohoBooksTransport
from zoho_books.integrations.contracts.auth import Credential, TokenResponse

logger = logging.getLogger(__name__)


class ZohoBooksSDK:
    def __init__(
        self,
        credential: Credential,
        *,
        organization_id: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.credential = credential
        self._client = client
        self._transport = ZohoBooksTransport(credential, organization_id=organization_id, client=client)
        self._tokens = TokenManager(credential, client=client)

        self.contacts = ContactsClient(self._transport)
        self.invoices = InvoicesClient(self._transport)
        self.customer_payments = CustomerPaymentsClient(self._transport)
        self.sales_receipts = SalesReceiptsClient(self._transport)

    @classmethod
    def from_settings(
        cls,
        settings: ZohoBooksSettings,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "ZohoBooksSDK":
        credential = Credential(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            redirect_uri=settings.redirect_uri,
            scope=settings.scope,
            access_token=settings.access_token,
            refresh_token=settings.refresh_token,
        )
        return cls(credential, organization_id=settings.organization_id, client=client)

    @classmethod
    def from_env(cls, *, client: Optional[httpx.AsyncClient] = None) -> "ZohoBooksSDK":
        return cls.from_settings(ZohoBooksSettings.from_env(), client=client)

    async def __aenter__(self) -> "ZohoBooksSDK":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close an injected HTTP client. Per-call clients need no teardown."""
        if self._client is not None:
            await self._client.aclose()

    @property
    def transport(self) -> ZohoBooksTransport:
        return self._transport

    @property
    def tokens(self) -> TokenManager:
        return self._tokens

    # ------------------------------------------------------------------
    # Credential operations (forwarded to the token manager)
    # ------------------------------------------------------------------

    def get_auth_url(self) -> str:
        return self._tokens.build_authorization_url()

    async def exchange_code_for_token(self, code: str) -> TokenResponse:
        return await self._tokens.exchange_code(code)

    async def refresh_access_token(self) -> TokenResponse:
        return await self._tokens.refresh()

    def set_access_token(self, token: Optional[str]) -> None:
        self._tokens.set_access_token(token)

    def set_refresh_token(self, token: Optional[str]) -> None:
        self._tokens.set_refresh_token(token)

    def get_access_token(self) -> Optional[str]:
        return self._tokens.get_access_token()

    def get_refresh_token(self) -> Optional[str]:
        return self._tokens.get_refresh_token()

    def clear_credentials(self) -> None:
        self._tokens.clear_credentials()
        logger.info("Cleared Zoho credentials")

    @property
    def is_authenticated(self) -> bool:
        return self._tokens.is_authenticated

    def access_token_expired(self, leeway_seconds: float = 0.0) -> bool:
        return self._tokens.access_token_expired(leeway_seconds)
