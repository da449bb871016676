from typing import ClassVar, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import Address, ApiResponse, CustomField, PaginatedEnvelope, ZohoModel


ContactType = Literal["customer", "vendor", "customer_vendor"]
SubType = Literal["individual", "business"]


class Contact(ZohoModel):
    contact_id: Optional[str] = None
    contact_name: Optional[str] = None
    company_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    contact_type: Optional[str] = None
    customer_sub_type: Optional[str] = None
    is_taxable: Optional[bool] = None
    payment_terms: Optional[int] = None
    currency_id: Optional[str] = None
    currency_code: Optional[str] = None
    outstanding_receivable_amount: Optional[float] = None
    outstanding_payable_amount: Optional[float] = None
    unused_credits_receivable_amount: Optional[float] = None
    status: Optional[str] = None
    payment_reminder_enabled: Optional[bool] = None
    custom_fields: List[CustomField] = Field(default_factory=list)
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    notes: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None


class CreateContactRequest(BaseModel):
    contact_name: str
    contact_type: ContactType = "customer"
    company_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    website: Optional[str] = None
    customer_sub_type: Optional[SubType] = None
    vendor_sub_type: Optional[SubType] = None
    is_taxable: Optional[bool] = None
    tax_id: Optional[str] = None
    gst_no: Optional[str] = None
    gst_treatment: Optional[str] = None
    vat_treatment: Optional[str] = None
    payment_terms: Optional[int] = None
    currency_id: Optional[str] = None
    opening_balance_amount: Optional[float] = None
    exchange_rate: Optional[float] = None
    payment_reminder_enabled: Optional[bool] = None
    custom_fields: Optional[List[CustomField]] = None
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    notes: Optional[str] = None


class ContactResponse(ApiResponse):
    contact: Optional[Contact] = None


class ContactListResponse(PaginatedEnvelope[Contact]):
    items_field: ClassVar[str] = "contacts"

    contacts: List[Contact] = Field(default_factory=list)


class StatementTransaction(ZohoModel):
    transaction_id: Optional[str] = None
    transaction_type: Optional[str] = None
    transaction_date: Optional[str] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None
    debit_amount: Optional[float] = None
    credit_amount: Optional[float] = None
    balance: Optional[float] = None


class ContactStatement(ZohoModel):
    statement_date: Optional[str] = None
    contact_id: Optional[str] = None
    contact_name: Optional[str] = None
    currency_code: Optional[str] = None
    opening_balance: Optional[float] = None
    closing_balance: Optional[float] = None
    transactions: List[StatementTransaction] = Field(default_factory=list)


class ContactStatementResponse(ApiResponse):
    data: Optional[ContactStatement] = None
