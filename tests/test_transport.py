import httpx
import pytest

from tests.conftest import json_body
from zoho_books.integrations.clients.transport import (
    Err,
    Ok,
    RequestDescriptor,
    ResponseKind,
    ZohoBooksTransport,
)
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError


def _transport(credential, handler, **kwargs):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ZohoBooksTransport(credential, client=client, **kwargs)


@pytest.mark.asyncio
async def test_attaches_zoho_oauthtoken_header_when_token_present(credential):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"code": 0})

    credential.access_token = "tok-123"
    transport = _transport(credential, handler)

    await transport.get("/contacts")

    assert seen[0].headers["Authorization"] == "Zoho-oauthtoken tok-123"
    assert seen[0].headers["Accept"] == "application/json"
    assert seen[0].headers["Content-Type"] == "application/json"
    assert str(seen[0].url) == "https://books.zoho.com/api/v3/contacts"


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, ""])
async def test_no_authorization_header_without_token(credential, token):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    credential.access_token = token
    transport = _transport(credential, handler)

    await transport.get("/contacts")

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_token_is_read_at_dispatch_time(credential):
    seen = []

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={})

    credential.access_token = "first"
    transport = _transport(credential, handler)

    await transport.get("/invoices")
    credential.access_token = "second"
    await transport.get("/invoices")

    assert seen == ["Zoho-oauthtoken first", "Zoho-oauthtoken second"]


@pytest.mark.asyncio
async def test_send_returns_ok_with_decoded_json(credential):
    transport = _transport(credential, lambda r: httpx.Response(200, json={"code": 0, "contacts": []}))

    result = await transport.send(RequestDescriptor("GET", "/contacts"))

    assert isinstance(result, Ok)
    assert result.ok is True
    assert result.value == {"code": 0, "contacts": []}


@pytest.mark.asyncio
async def test_send_returns_bytes_for_binary_responses(credential):
    pdf = b"%PDF-1.4 fake"
    transport = _transport(
        credential,
        lambda r: httpx.Response(200, content=pdf, headers={"Content-Type": "application/pdf"}),
    )

    result = await transport.send(RequestDescriptor("GET", "/invoices/1/pdf", response_kind=ResponseKind.BINARY))

    assert result.unwrap() == pdf


@pytest.mark.asyncio
async def test_remote_error_uses_server_message_and_keeps_body(credential):
    body = {"code": 1002, "message": "Contact not found"}
    transport = _transport(credential, lambda r: httpx.Response(404, json=body))

    result = await transport.send(RequestDescriptor("GET", "/contacts/missing"))

    assert isinstance(result, Err)
    assert result.error.http_status == 404
    assert result.error.message == "Contact not found"
    assert result.error.details == body
    assert result.error.cause is ErrorCause.REMOTE


@pytest.mark.asyncio
async def test_remote_error_without_message_falls_back_to_status_text(credential):
    transport = _transport(credential, lambda r: httpx.Response(500, text="upstream exploded"))

    result = await transport.send(RequestDescriptor("GET", "/contacts"))

    assert result.error.http_status == 500
    assert result.error.message == "HTTP 500 Internal Server Error"
    assert result.error.details == "upstream exploded"


@pytest.mark.asyncio
async def test_network_failure_is_status_zero(credential):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = _transport(credential, handler)

    result = await transport.send(RequestDescriptor("GET", "/contacts"))

    assert result.error.http_status == 0
    assert result.error.message == "network error: no response received"
    assert result.error.cause is ErrorCause.NETWORK


@pytest.mark.asyncio
async def test_timeout_is_reported_as_network_error(credential):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    transport = _transport(credential, handler)

    with pytest.raises(ZohoBooksError) as exc_info:
        await transport.get("/contacts")

    assert exc_info.value.http_status == 0
    assert exc_info.value.cause is ErrorCause.NETWORK


@pytest.mark.asyncio
async def test_unserializable_body_never_leaves_the_process(credential):
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        return httpx.Response(200, json={})

    transport = _transport(credential, handler)

    result = await transport.send(RequestDescriptor("POST", "/contacts", body={"bad": object()}))

    assert calls["n"] == 0
    assert result.error.http_status == 0
    assert result.error.cause is ErrorCause.CONSTRUCTION
    assert result.error.message


@pytest.mark.asyncio
async def test_exactly_one_attempt_per_call(credential):
    calls = {"n": 0}

    def handler(request):
        calls["n"] += 1
        return httpx.Response(503, json={"message": "try later"})

    transport = _transport(credential, handler)

    with pytest.raises(ZohoBooksError):
        await transport.get("/contacts")

    assert calls["n"] == 1


@pytest.mark.asyncio
async def test_organization_id_and_query_are_appended(credential):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    transport = _transport(credential, handler, organization_id="10234695")

    await transport.get("/contacts", query=[("page", "2")])

    assert seen[0].url.params.multi_items() == [("page", "2"), ("organization_id", "10234695")]


@pytest.mark.asyncio
async def test_post_sends_json_body(credential):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"code": 0})

    transport = _transport(credential, handler)

    await transport.post("/contacts", {"contact_name": "Acme"})

    assert seen[0].method == "POST"
    assert json_body(seen[0]) == {"contact_name": "Acme"}


@pytest.mark.asyncio
async def test_ok_carries_the_response_status(credential):
    transport = _transport(credential, lambda r: httpx.Response(201, json={"code": 0}))

    result = await transport.send(RequestDescriptor("POST", "/contacts", body={"contact_name": "Acme"}))

    assert result.status == 201
    assert result.value == {"code": 0}
