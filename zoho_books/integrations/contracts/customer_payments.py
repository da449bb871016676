from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field

from .common import ApiResponse, CustomField, PaginatedEnvelope, ZohoModel


class AppliedInvoice(ZohoModel):
    invoice_id: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_amount: Optional[float] = None
    balance_amount: Optional[float] = None
    amount_applied: Optional[float] = None


class CustomerPayment(ZohoModel):
    payment_id: Optional[str] = None
    payment_number: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    payment_mode: Optional[str] = None
    amount: Optional[float] = None
    currency_code: Optional[str] = None
    exchange_rate: Optional[float] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None
    account_id: Optional[str] = None
    account_name: Optional[str] = None
    invoices: List[AppliedInvoice] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class InvoiceAllocation(BaseModel):
    invoice_id: str
    amount_applied: float


class CreateCustomerPaymentRequest(BaseModel):
    customer_id: str
    payment_mode: str
    amount: float
    date: str
    currency_id: Optional[str] = None
    exchange_rate: Optional[float] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None
    account_id: Optional[str] = None
    invoices: Optional[List[InvoiceAllocation]] = None
    custom_fields: Optional[List[CustomField]] = None
    notes: Optional[str] = None


class RefundRequest(BaseModel):
    refund_mode: str
    amount: float
    date: str
    reference_number: Optional[str] = None
    description: Optional[str] = None
    from_account_id: Optional[str] = None


class Refund(ZohoModel):
    payment_refund_id: Optional[str] = None
    refund_mode: Optional[str] = None
    date: Optional[str] = None
    amount: Optional[float] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None


class PaymentMode(ZohoModel):
    payment_mode_id: Optional[str] = None
    payment_mode_name: Optional[str] = None
    is_default: Optional[bool] = None


class CustomerPaymentResponse(ApiResponse):
    payment: Optional[CustomerPayment] = None


class CustomerPaymentListResponse(PaginatedEnvelope[CustomerPayment]):
    items_field: ClassVar[str] = "customerpayments"

    customerpayments: List[CustomerPayment] = Field(default_factory=list)


class RefundResponse(ApiResponse):
    payment_refund: Optional[Refund] = None


class RefundListResponse(ApiResponse):
    payment_refunds: List[Refund] = Field(default_factory=list)


class PaymentModeListResponse(ApiResponse):
    payment_modes: List[PaymentMode] = Field(default_factory=list)
