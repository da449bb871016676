"""Pytest fixtures: a Credential and an SDK wired to an in-process fake Zoho."""

import json
from urllib.parse import parse_qs

import httpx
import pytest
import pytest_asyncio

from zoho_books.integrations.contracts.auth import Credential
from zoho_books.sdk import ZohoBooksSDK


class RecordingHandler:
    """httpx.MockTransport handler that remembers every request it served."""

    def __init__(self, responder):
        self.responder = responder
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_body(request: httpx.Request):
    return json.loads(request.content) if request.content else None


def form_body(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


@pytest.fixture
def credential():
    return Credential(
        client_id="test_client_id",
        client_secret="test_client_secret",
        redirect_uri="http://localhost:3000/callback",
        scope="ZohoBooks.fullaccess.all",
    )


@pytest_asyncio.fixture
async def make_sdk(credential):
    """Build an SDK whose HTTP traffic goes to ``responder(request) -> httpx.Response``."""
    clients = []

    def _make(responder, *, access_token=None, refresh_token=None, organization_id=None):
        credential.access_token = access_token
        credential.refresh_token = refresh_token
        handler = RecordingHandler(responder)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        sdk = ZohoBooksSDK(credential, organization_id=organization_id, client=client)
        return sdk, handler

    yield _make

    for client in clients:
        await client.aclose()
