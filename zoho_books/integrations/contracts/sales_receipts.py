from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field

from .common import ApiResponse, CustomField, PaginatedEnvelope, ZohoModel
from .invoices import InvoiceLineItemRequest, LineItem


class SalesReceipt(ZohoModel):
    salesreceipt_id: Optional[str] = None
    salesreceipt_number: Optional[str] = None
    date: Optional[str] = None
    status: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    currency_code: Optional[str] = None
    payment_mode: Optional[str] = None
    reference_number: Optional[str] = None
    line_items: List[LineItem] = Field(default_factory=list)
    sub_total: Optional[float] = None
    tax_total: Optional[float] = None
    total: Optional[float] = None
    custom_fields: List[CustomField] = Field(default_factory=list)
    notes: Optional[str] = None
    terms: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class CreateSalesReceiptRequest(BaseModel):
    customer_id: str
    line_items: List[InvoiceLineItemRequest]
    payment_mode: Optional[str] = None
    salesreceipt_number: Optional[str] = None
    date: Optional[str] = None
    currency_id: Optional[str] = None
    exchange_rate: Optional[float] = None
    reference_number: Optional[str] = None
    account_id: Optional[str] = None
    template_id: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None
    notes: Optional[str] = None
    terms: Optional[str] = None


class ConvertToInvoiceRequest(BaseModel):
    invoice_number: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    payment_terms: Optional[int] = None
    notes: Optional[str] = None
    terms: Optional[str] = None


class ConvertToCreditNoteRequest(BaseModel):
    creditnote_number: Optional[str] = None
    date: Optional[str] = None
    notes: Optional[str] = None
    terms: Optional[str] = None


class ConvertedInvoice(ZohoModel):
    invoice_id: Optional[str] = None
    invoice_number: Optional[str] = None
    status: Optional[str] = None
    total: Optional[float] = None
    balance: Optional[float] = None


class ConvertedCreditNote(ZohoModel):
    creditnote_id: Optional[str] = None
    creditnote_number: Optional[str] = None
    status: Optional[str] = None
    total: Optional[float] = None
    balance: Optional[float] = None


class SalesReceiptResponse(ApiResponse):
    sales_receipt: Optional[SalesReceipt] = None


class SalesReceiptListResponse(PaginatedEnvelope[SalesReceipt]):
    items_field: ClassVar[str] = "sales_receipts"

    sales_receipts: List[SalesReceipt] = Field(default_factory=list)


class ConvertedInvoiceResponse(ApiResponse):
    invoice: Optional[ConvertedInvoice] = None


class ConvertedCreditNoteResponse(ApiResponse):
    creditnote: Optional[ConvertedCreditNote] = None
