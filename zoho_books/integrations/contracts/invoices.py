from typing import ClassVar, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import Address, ApiResponse, CustomField, PaginatedEnvelope, ZohoModel


DiscountType = Literal["entity_level", "item_level"]


class LineItem(ZohoModel):
    line_item_id: Optional[str] = None
    item_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    rate: Optional[float] = None
    discount: Optional[float] = None
    tax_id: Optional[str] = None
    tax_percentage: Optional[float] = None
    item_total: Optional[float] = None


class Invoice(ZohoModel):
    invoice_id: Optional[str] = None
    invoice_number: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    status: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    currency_code: Optional[str] = None
    exchange_rate: Optional[float] = None
    line_items: List[LineItem] = Field(default_factory=list)
    sub_total: Optional[float] = None
    tax_total: Optional[float] = None
    total: Optional[float] = None
    payment_made: Optional[float] = None
    credits_applied: Optional[float] = None
    balance: Optional[float] = None
    is_draft: Optional[bool] = None
    is_voided: Optional[bool] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    custom_fields: List[CustomField] = Field(default_factory=list)
    notes: Optional[str] = None
    terms: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class InvoiceLineItemRequest(BaseModel):
    item_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    quantity: float = 1
    rate: Optional[float] = None
    discount: Optional[float] = None
    tax_id: Optional[str] = None
    item_custom_fields: Optional[List[CustomField]] = None


class CreateInvoiceRequest(BaseModel):
    customer_id: str
    line_items: List[InvoiceLineItemRequest]
    invoice_number: Optional[str] = None
    date: Optional[str] = None
    due_date: Optional[str] = None
    payment_terms: Optional[int] = None
    currency_id: Optional[str] = None
    exchange_rate: Optional[float] = None
    discount: Optional[float] = None
    is_discount_before_tax: Optional[bool] = None
    discount_type: Optional[DiscountType] = None
    shipping_charge: Optional[float] = None
    adjustment: Optional[float] = None
    adjustment_description: Optional[str] = None
    allow_partial_payments: Optional[bool] = None
    salesperson_id: Optional[str] = None
    project_id: Optional[str] = None
    custom_fields: Optional[List[CustomField]] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    template_id: Optional[str] = None
    notes: Optional[str] = None
    terms: Optional[str] = None


class ReminderRequest(BaseModel):
    reminder_type: Literal["overdue", "reminder"] = "reminder"
    subject: Optional[str] = None
    body: Optional[str] = None
    send_from_org_email_id: Optional[bool] = None


class CreditApplication(BaseModel):
    creditnote_id: str
    amount_applied: float


class ApplyCreditsRequest(BaseModel):
    credits: List[CreditApplication] = Field(default_factory=list)


class InvoicePayment(ZohoModel):
    payment_id: Optional[str] = None
    payment_number: Optional[str] = None
    date: Optional[str] = None
    payment_mode: Optional[str] = None
    amount: Optional[float] = None
    reference_number: Optional[str] = None


class InvoiceResponse(ApiResponse):
    invoice: Optional[Invoice] = None


class InvoiceListResponse(PaginatedEnvelope[Invoice]):
    items_field: ClassVar[str] = "invoices"

    invoices: List[Invoice] = Field(default_factory=list)


class InvoicePaymentListResponse(ApiResponse):
    payments: List[InvoicePayment] = Field(default_factory=list)
