"""
Zoho Books transport core.

Purpose:
- Turn a ``RequestDescriptor`` into a decoded response or a ``ZohoBooksError``
- Attach ``Authorization: Zoho-oauthtoken <token>`` from the shared Credential
- Normalize every failure into one of three branches (remote / network / construction)

Implementation notes:
- Uses httpx for async requests; one attempt per call, no retries
- The access token is read at dispatch time, so a token replaced mid-flight
  applies to the next request only
- Tokens are never logged
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, Sequence, Tuple, TypeVar, Union

import httpx

from zoho_books.integrations.contracts.auth import Credential
from zoho_books.integrations.errors import NETWORK_ERROR_MESSAGE, ErrorCause, ZohoBooksError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BASE_URL = "https://books.zoho.com/api/v3"
DEFAULT_TIMEOUT_SECONDS = 30.0
AUTH_SCHEME = "Zoho-oauthtoken"
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ResponseKind(str, Enum):
    JSON = "json"
    BINARY = "binary"


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    query: Optional[Sequence[Tuple[str, str]]] = None
    body: Optional[Dict[str, Any]] = None
    response_kind: ResponseKind = ResponseKind.JSON


# ---------------------------------------------------------------------------
# Result union
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    status: int = 0

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ZohoBooksError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class ZohoBooksTransport:
    def __init__(
        self,
        credential: Credential,
        *,
        organization_id: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.credential = credential
        self.organization_id = organization_id
        # An injected client is reused for every call and never closed here
        # (ZohoBooksSDK.aclose closes it); otherwise a client is opened per request.
        self._client = client

    @property
    def base_url(self) -> str:
        return BASE_URL

    def build_headers(self) -> Dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        token = self.credential.access_token
        if token:
            headers["Authorization"] = f"{AUTH_SCHEME} {token}"
        return headers

    def _build_request(self, client: httpx.AsyncClient, descriptor: RequestDescriptor) -> httpx.Request:
        params = list(descriptor.query or [])
        if self.organization_id:
            params.append(("organization_id", self.organization_id))
        return client.build_request(
            descriptor.method.upper(),
            f"{BASE_URL}{descriptor.path}",
            params=params or None,
            json=descriptor.body,
            headers=self.build_headers(),
            timeout=DEFAULT_TIMEOUT_SECONDS,
        )

    async def send(self, descriptor: RequestDescriptor) -> Result[Any]:
        """
        Dispatch one request. Never raises: failures come back as ``Err``.
        """
        try:
            if self._client is not None:
                return await self._dispatch(self._client, descriptor)
            async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECONDS) as client:
                return await self._dispatch(client, descriptor)
        except ZohoBooksError as exc:
            return Err(exc)
        except httpx.TransportError as exc:
            logger.error("No response from Zoho Books for %s %s: %s", descriptor.method, descriptor.path, exc)
            return Err(ZohoBooksError(NETWORK_ERROR_MESSAGE, 0, cause=ErrorCause.NETWORK))
        except Exception as exc:
            logger.error("Could not send %s %s: %s", descriptor.method, descriptor.path, exc)
            return Err(ZohoBooksError(str(exc), 0, cause=ErrorCause.CONSTRUCTION))

    async def _dispatch(self, client: httpx.AsyncClient, descriptor: RequestDescriptor) -> Result[Any]:
        request = self._build_request(client, descriptor)
        logger.info("Zoho Books request: %s %s", request.method, descriptor.path)
        response = await client.send(request)

        if not response.is_success:
            error = error_from_response(response)
            logger.error(
                "Zoho Books rejected %s %s: status=%s message=%s",
                request.method,
                descriptor.path,
                response.status_code,
                error.message,
            )
            return Err(error)

        if descriptor.response_kind is ResponseKind.BINARY:
            return Ok(response.content, response.status_code)
        if not response.content:
            return Ok({}, response.status_code)
        try:
            return Ok(response.json(), response.status_code)
        except ValueError:
            return Err(
                ZohoBooksError(
                    "invalid JSON in response",
                    response.status_code,
                    response.text,
                    cause=ErrorCause.DECODE,
                )
            )

    async def request(self, descriptor: RequestDescriptor) -> Any:
        """Like ``send`` but raises the ``ZohoBooksError`` instead of returning it."""
        result = await self.send(descriptor)
        return result.unwrap()

    async def get(self, path: str, *, query: Optional[Sequence[Tuple[str, str]]] = None) -> Any:
        return await self.request(RequestDescriptor("GET", path, query=query))

    async def get_binary(self, path: str) -> bytes:
        return await self.request(RequestDescriptor("GET", path, response_kind=ResponseKind.BINARY))

    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(RequestDescriptor("POST", path, body=body))

    async def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request(RequestDescriptor("PUT", path, body=body))

    async def delete(self, path: str) -> Any:
        return await self.request(RequestDescriptor("DELETE", path))


def decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def error_from_response(response: httpx.Response) -> ZohoBooksError:
    details = decode_body(response)
    message = None
    if isinstance(details, dict):
        message = details.get("message")
    if not message:
        message = f"HTTP {response.status_code} {response.reason_phrase}".strip()
    return ZohoBooksError(str(message), response.status_code, details, cause=ErrorCause.REMOTE)
