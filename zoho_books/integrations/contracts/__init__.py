"""
Contracts (data models).

This folder defines the request/response shapes exchanged with Zoho Books:
- the held OAuth credential and the token endpoint reply
- per-resource records (contacts, invoices, customer payments, sales receipts)
- the envelopes the service wraps them in

Response records keep unknown keys, so a caller never loses data the service
returned. Request records drop unset fields when serialized.
"""

from .auth import Credential, TokenResponse
from .common import (
    Address,
    ApiResponse,
    Comment,
    CommentListResponse,
    CommentResponse,
    CustomField,
    EmailContentResponse,
    EmailRequest,
    ListFilters,
    PageContext,
    PaginatedEnvelope,
    PrintUrlResponse,
    SearchCriterion,
    TemplateListResponse,
)
from .contacts import (
    Contact,
    ContactListResponse,
    ContactResponse,
    ContactStatementResponse,
    CreateContactRequest,
)
from .invoices import (
    ApplyCreditsRequest,
    CreateInvoiceRequest,
    CreditApplication,
    Invoice,
    InvoiceLineItemRequest,
    InvoiceListResponse,
    InvoicePaymentListResponse,
    InvoiceResponse,
    ReminderRequest,
)
from .customer_payments import (
    CreateCustomerPaymentRequest,
    CustomerPayment,
    CustomerPaymentListResponse,
    CustomerPaymentResponse,
    PaymentModeListResponse,
    RefundListResponse,
    RefundRequest,
    RefundResponse,
)
from .sales_receipts import (
    ConvertedCreditNoteResponse,
    ConvertedInvoiceResponse,
    ConvertToCreditNoteRequest,
    ConvertToInvoiceRequest,
    CreateSalesReceiptRequest,
    SalesReceipt,
    SalesReceiptListResponse,
    SalesReceiptResponse,
)

__all__ = [
    # auth
    "Credential", "TokenResponse",
    # common
    "Address", "ApiResponse", "Comment", "CommentListResponse", "CommentResponse",
    "CustomField", "EmailContentResponse", "EmailRequest", "ListFilters",
    "PageContext", "PaginatedEnvelope", "PrintUrlResponse", "SearchCriterion",
    "TemplateListResponse",
    # contacts
    "Contact", "ContactListResponse", "ContactResponse", "ContactStatementResponse",
    "CreateContactRequest",
    # invoices
    "ApplyCreditsRequest", "CreateInvoiceRequest", "CreditApplication", "Invoice",
    "InvoiceLineItemRequest", "InvoiceListResponse", "InvoicePaymentListResponse",
    "InvoiceResponse", "ReminderRequest",
    # customer payments
    "CreateCustomerPaymentRequest", "CustomerPayment", "CustomerPaymentListResponse",
    "CustomerPaymentResponse", "PaymentModeListResponse", "RefundListResponse",
    "RefundRequest", "RefundResponse",
    # sales receipts
    "ConvertedCreditNoteResponse", "ConvertedInvoiceResponse", "ConvertToCreditNoteRequest",
    "ConvertToInvoiceRequest", "CreateSalesReceiptRequest", "SalesReceipt",
    "SalesReceiptListResponse", "SalesReceiptResponse",
]
