"""
Shared shape for every Zoho Books resource client.

Each method is a single pass-through to the transport with a fixed URL
template. The only local logic is query assembly for ``list`` and validation
of the reply into its record type.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from zoho_books.integrations.clients.transport import RequestDescriptor, ZohoBooksTransport
from zoho_books.integrations.contracts.common import (
    ApiResponse,
    CommentListResponse,
    CommentResponse,
    EmailContentResponse,
    EmailRequest,
    ListFilters,
    PaginatedEnvelope,
    PrintUrlResponse,
    TemplateListResponse,
    dump_body,
)
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError
from zoho_books.utils.query import build_query_params

ModelT = TypeVar("ModelT", bound=BaseModel)

Body = Union[BaseModel, Mapping[str, Any]]
Filters = Union[ListFilters, Mapping[str, Any], None]


def parse_response(model_type: Type[ModelT], data: Any, http_status: int = 0) -> ModelT:
    """Validate a decoded 2xx body; ``http_status`` is the status it arrived with."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise ZohoBooksError(
            f"response validation failed for {model_type.__name__}: {exc}",
            http_status,
            data,
            cause=ErrorCause.DECODE,
        ) from exc


class ResourceClient:
    collection: ClassVar[str]
    record_response: ClassVar[Type[ApiResponse]] = ApiResponse
    list_response: ClassVar[Type[PaginatedEnvelope]] = PaginatedEnvelope

    def __init__(self, transport: ZohoBooksTransport) -> None:
        self.transport = transport

    def _path(self, *parts: str) -> str:
        # Ids are single path segments; "/", "?" and "#" must not escape them.
        return "/".join([self.collection, *(quote(str(p), safe="") for p in parts)])

    async def _fetch(
        self,
        model_type: Type[ModelT],
        method: str,
        path: str,
        *,
        query: Optional[Sequence[Tuple[str, str]]] = None,
        body: Optional[Body] = None,
    ) -> ModelT:
        result = await self.transport.send(RequestDescriptor(method, path, query=query, body=dump_body(body)))
        return parse_response(model_type, result.unwrap(), result.status)

    async def list(self, filters: Filters = None):
        query = build_query_params(filters)
        return await self._fetch(self.list_response, "GET", self.collection, query=query or None)

    async def get(self, record_id: str):
        return await self._fetch(self.record_response, "GET", self._path(record_id))

    async def create(self, body: Body):
        return await self._fetch(self.record_response, "POST", self.collection, body=body)

    async def update(self, record_id: str, body: Body):
        return await self._fetch(self.record_response, "PUT", self._path(record_id), body=body)

    async def delete(self, record_id: str) -> ApiResponse:
        return await self._fetch(ApiResponse, "DELETE", self._path(record_id))

    async def _post_action(self, record_id: str, *action: str, body: Optional[Body] = None):
        return await self._fetch(self.record_response, "POST", self._path(record_id, *action), body=body)


class CommentsMixin(ResourceClient):
    async def get_comments(self, record_id: str) -> CommentListResponse:
        return await self._fetch(CommentListResponse, "GET", self._path(record_id, "comments"))

    async def add_comment(self, record_id: str, description: str) -> CommentResponse:
        return await self._fetch(
            CommentResponse, "POST", self._path(record_id, "comments"), body={"description": description}
        )

    async def update_comment(self, record_id: str, comment_id: str, description: str) -> CommentResponse:
        return await self._fetch(
            CommentResponse,
            "PUT",
            self._path(record_id, "comments", comment_id),
            body={"description": description},
        )

    async def delete_comment(self, record_id: str, comment_id: str) -> ApiResponse:
        return await self._fetch(ApiResponse, "DELETE", self._path(record_id, "comments", comment_id))


class DocumentMixin(ResourceClient):
    """PDF and print endpoints shared by printable documents."""

    async def get_pdf(self, record_id: str) -> bytes:
        return await self.transport.get_binary(self._path(record_id, "pdf"))

    async def get_print_url(self, record_id: str) -> PrintUrlResponse:
        return await self._fetch(PrintUrlResponse, "GET", self._path(record_id, "print"))


class SalesDocumentMixin(DocumentMixin):
    """Status transitions and email dispatch for invoices and sales receipts."""

    async def mark_as_sent(self, record_id: str):
        return await self._post_action(record_id, "status", "sent")

    async def mark_as_void(self, record_id: str):
        return await self._post_action(record_id, "status", "void")

    async def mark_as_draft(self, record_id: str):
        return await self._post_action(record_id, "status", "draft")

    async def email(self, record_id: str, email: Union[EmailRequest, Mapping[str, Any]]) -> ApiResponse:
        return await self._fetch(ApiResponse, "POST", self._path(record_id, "email"), body=email)

    async def get_email_content(self, record_id: str) -> EmailContentResponse:
        return await self._fetch(EmailContentResponse, "GET", self._path(record_id, "email"))

    async def get_templates(self) -> TemplateListResponse:
        return await self._fetch(TemplateListResponse, "GET", self._path("templates"))
