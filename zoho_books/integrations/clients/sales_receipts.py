from typing import Any, Mapping, Optional, Union

from zoho_books.integrations.clients.base import CommentsMixin, SalesDocumentMixin
from zoho_books.integrations.contracts.sales_receipts import (
    ConvertedCreditNoteResponse,
    ConvertedInvoiceResponse,
    ConvertToCreditNoteRequest,
    ConvertToInvoiceRequest,
    SalesReceiptListResponse,
    SalesReceiptResponse,
)


class SalesReceiptsClient(SalesDocumentMixin, CommentsMixin):
    """Sales receipts: ``/salesreceipts``."""

    collection = "/salesreceipts"
    record_response = SalesReceiptResponse
    list_response = SalesReceiptListResponse

    async def convert_to_invoice(
        self,
        salesreceipt_id: str,
        invoice: Optional[Union[ConvertToInvoiceRequest, Mapping[str, Any]]] = None,
    ) -> ConvertedInvoiceResponse:
        return await self._fetch(
            ConvertedInvoiceResponse, "POST", self._path(salesreceipt_id, "converttoinvoice"), body=invoice
        )

    async def convert_to_credit_note(
        self,
        salesreceipt_id: str,
        credit_note: Optional[Union[ConvertToCreditNoteRequest, Mapping[str, Any]]] = None,
    ) -> ConvertedCreditNoteResponse:
        return await self._fetch(
            ConvertedCreditNoteResponse, "POST", self._path(salesreceipt_id, "converttocreditnote"), body=credit_note
        )
