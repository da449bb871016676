"""
Shared contracts used by every resource.

Response records allow extra fields: the remote service adds keys freely and a
caller must be able to read everything it sent back, typed or not.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


ItemT = TypeVar("ItemT")

SortOrder = Literal["ascending", "descending"]
SearchOperator = Literal["is", "contains", "starts_with", "ends_with", "is_empty", "is_not_empty"]


class ZohoModel(BaseModel):
    # Zoho sends some ids and codes as JSON numbers.
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

class Address(ZohoModel):
    address: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None


class CustomField(ZohoModel):
    customfield_id: Optional[str] = None
    value: Any = None


class Comment(ZohoModel):
    comment_id: Optional[str] = None
    description: Optional[str] = None
    commented_by: Optional[str] = None
    commented_by_id: Optional[str] = None
    comment_date: Optional[str] = None
    comment_date_formatted: Optional[str] = None


class Template(ZohoModel):
    template_id: Optional[str] = None
    template_name: Optional[str] = None
    template_type: Optional[str] = None


class EmailContent(ZohoModel):
    subject: Optional[str] = None
    body: Optional[str] = None
    email_template_id: Optional[str] = None
    email_template_name: Optional[str] = None


class PageContext(ZohoModel):
    page: Optional[int] = None
    per_page: Optional[int] = None
    has_more_page: Optional[bool] = None
    report_name: Optional[str] = None
    sort_column: Optional[str] = None
    sort_order: Optional[str] = None


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------

class ApiResponse(ZohoModel):
    """Base envelope: ``{"code": 0, "message": "success", ...}``."""
    code: Optional[int] = None
    message: Optional[str] = None


class PaginatedEnvelope(ApiResponse, Generic[ItemT]):
    """List envelope whose array key depends on the resource.

    Subclasses declare the array field (``contacts``, ``invoices`` ...) and name
    it in ``items_field`` so generic code can reach it through ``items``.
    """
    items_field: ClassVar[str] = "items"

    page_context: Optional[PageContext] = None

    @property
    def items(self) -> List[ItemT]:
        return getattr(self, self.items_field, None) or []

    @property
    def has_more_page(self) -> bool:
        return bool(self.page_context and self.page_context.has_more_page)


class CommentResponse(ApiResponse):
    comment: Optional[Comment] = None


class CommentListResponse(ApiResponse):
    comments: List[Comment] = Field(default_factory=list)


class TemplateListResponse(ApiResponse):
    templates: List[Template] = Field(default_factory=list)


class EmailContentResponse(ApiResponse):
    data: Optional[EmailContent] = None


class PrintUrlResponse(ApiResponse):
    print_url: Optional[str] = None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class SearchCriterion(BaseModel):
    search_text: str
    search_operator: SearchOperator


class ListFilters(BaseModel):
    page: Optional[int] = None
    per_page: Optional[int] = None
    sort_column: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    search_text: Optional[str] = None
    filter_by: Optional[str] = None
    search_criteria: List[SearchCriterion] = Field(default_factory=list)


class EmailRequest(BaseModel):
    to_mail_ids: Optional[List[str]] = None
    cc_mail_ids: Optional[List[str]] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    send_from_org_email_id: Optional[bool] = None
    send_customer_statement: Optional[bool] = None
    send_attachment: Optional[bool] = None


def dump_body(body: Any) -> Optional[Dict[str, Any]]:
    """Turn a request model or mapping into a JSON-ready dict, dropping unset keys."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return {k: v for k, v in dict(body).items() if v is not None}
