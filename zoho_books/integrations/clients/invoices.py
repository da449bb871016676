from typing import Any, Mapping, Union

from zoho_books.integrations.clients.base import CommentsMixin, SalesDocumentMixin
from zoho_books.integrations.contracts.common import ApiResponse
from zoho_books.integrations.contracts.invoices import (
    ApplyCreditsRequest,
    InvoiceListResponse,
    InvoicePaymentListResponse,
    InvoiceResponse,
    ReminderRequest,
)


class InvoicesClient(SalesDocumentMixin, CommentsMixin):
    """Invoices: ``/invoices``."""

    collection = "/invoices"
    record_response = InvoiceResponse
    list_response = InvoiceListResponse

    async def send_reminder(self, invoice_id: str, reminder: Union[ReminderRequest, Mapping[str, Any]]) -> ApiResponse:
        return await self._fetch(ApiResponse, "POST", self._path(invoice_id, "reminder"), body=reminder)

    async def get_payments(self, invoice_id: str) -> InvoicePaymentListResponse:
        return await self._fetch(InvoicePaymentListResponse, "GET", self._path(invoice_id, "payments"))

    async def apply_credits(self, invoice_id: str, credits: Union[ApplyCreditsRequest, Mapping[str, Any]]) -> InvoiceResponse:
        return await self._post_action(invoice_id, "credits", body=credits)

    async def delete_applied_credit(self, invoice_id: str, credit_id: str) -> InvoiceResponse:
        return await self._fetch(InvoiceResponse, "DELETE", self._path(invoice_id, "credits", credit_id))
