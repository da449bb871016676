"""
Consumption-side state holders for SDK calls.

A UI (or any long-lived caller) wants three things around each call: the last
data, whether a call is in flight, and the last error message. These wrappers
track exactly that and nothing else. Errors are recorded and then re-raised;
the SDK call itself is never altered.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from zoho_books.integrations.contracts.auth import TokenResponse
from zoho_books.sdk import ZohoBooksSDK

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _error_message(exc: Exception, fallback: str) -> str:
    return getattr(exc, "message", None) or str(exc) or fallback


class OperationState(Generic[T]):
    def __init__(self, operation: Callable[..., Awaitable[T]], name: Optional[str] = None) -> None:
        self._operation = operation
        self.name = name or getattr(operation, "__name__", "operation")
        self.data: Optional[T] = None
        self.is_loading = False
        self.error: Optional[str] = None

    async def execute(self, *args: Any, **kwargs: Any) -> T:
        self.is_loading = True
        self.error = None
        try:
            result = await self._operation(*args, **kwargs)
            self.data = result
            return result
        except Exception as exc:
            self.error = _error_message(exc, "Operation failed")
            logger.warning("%s failed: %s", self.name, self.error)
            raise
        finally:
            self.is_loading = False

    def reset(self) -> None:
        self.data = None
        self.error = None
        self.is_loading = False


class AuthSession:
    """Login/logout/refresh state on top of one SDK instance."""

    def __init__(self, sdk: ZohoBooksSDK) -> None:
        self.sdk = sdk
        self.is_authenticated = bool(sdk.get_access_token())
        self.is_loading = False
        self.error: Optional[str] = None

    def get_auth_url(self) -> str:
        return self.sdk.get_auth_url()

    async def login(self, code: str) -> TokenResponse:
        self.is_loading = True
        self.error = None
        try:
            tokens = await self.sdk.exchange_code_for_token(code)
            self.is_authenticated = True
            return tokens
        except Exception as exc:
            self.error = _error_message(exc, "Login failed")
            raise
        finally:
            self.is_loading = False

    async def refresh_token(self) -> TokenResponse:
        self.is_loading = True
        self.error = None
        try:
            tokens = await self.sdk.refresh_access_token()
            self.is_authenticated = True
            return tokens
        except Exception as exc:
            self.error = _error_message(exc, "Token refresh failed")
            self.is_authenticated = False
            raise
        finally:
            self.is_loading = False

    def logout(self) -> None:
        self.sdk.clear_credentials()
        self.is_authenticated = False
        self.error = None


class ContactsOperations:
    def __init__(self, sdk: ZohoBooksSDK) -> None:
        contacts = sdk.contacts
        self.list_contacts = OperationState(contacts.list, "list_contacts")
        self.get_contact = OperationState(contacts.get, "get_contact")
        self.create_contact = OperationState(contacts.create, "create_contact")
        self.update_contact = OperationState(contacts.update, "update_contact")
        self.delete_contact = OperationState(contacts.delete, "delete_contact")


class InvoicesOperations:
    def __init__(self, sdk: ZohoBooksSDK) -> None:
        invoices = sdk.invoices
        self.list_invoices = OperationState(invoices.list, "list_invoices")
        self.get_invoice = OperationState(invoices.get, "get_invoice")
        self.create_invoice = OperationState(invoices.create, "create_invoice")
        self.update_invoice = OperationState(invoices.update, "update_invoice")
        self.delete_invoice = OperationState(invoices.delete, "delete_invoice")
        self.email_invoice = OperationState(invoices.email, "email_invoice")
        self.get_invoice_pdf = OperationState(invoices.get_pdf, "get_invoice_pdf")


class CustomerPaymentsOperations:
    def __init__(self, sdk: ZohoBooksSDK) -> None:
        payments = sdk.customer_payments
        self.list_payments = OperationState(payments.list, "list_payments")
        self.get_payment = OperationState(payments.get, "get_payment")
        self.create_payment = OperationState(payments.create, "create_payment")
        self.update_payment = OperationState(payments.update, "update_payment")
        self.delete_payment = OperationState(payments.delete, "delete_payment")
        self.get_payment_pdf = OperationState(payments.get_pdf, "get_payment_pdf")


class SalesReceiptsOperations:
    def __init__(self, sdk: ZohoBooksSDK) -> None:
        receipts = sdk.sales_receipts
        self.list_sales_receipts = OperationState(receipts.list, "list_sales_receipts")
        self.get_sales_receipt = OperationState(receipts.get, "get_sales_receipt")
        self.create_sales_receipt = OperationState(receipts.create, "create_sales_receipt")
        self.update_sales_receipt = OperationState(receipts.update, "update_sales_receipt")
        self.delete_sales_receipt = OperationState(receipts.delete, "delete_sales_receipt")
        self.email_sales_receipt = OperationState(receipts.email, "email_sales_receipt")
        self.get_sales_receipt_pdf = OperationState(receipts.get_pdf, "get_sales_receipt_pdf")


class OperationTracker:
    """Loading flags and error messages keyed by caller-chosen operation ids."""

    def __init__(self) -> None:
        self._loading: Dict[str, bool] = {}
        self._errors: Dict[str, Optional[str]] = {}

    async def execute_operation(self, operation_id: str, operation: Callable[[], Awaitable[T]]) -> T:
        self._loading[operation_id] = True
        self._errors[operation_id] = None
        try:
            return await operation()
        except Exception as exc:
            self._errors[operation_id] = _error_message(exc, "Operation failed")
            raise
        finally:
            self._loading[operation_id] = False

    def is_operation_loading(self, operation_id: str) -> bool:
        return self._loading.get(operation_id, False)

    def get_operation_error(self, operation_id: str) -> Optional[str]:
        return self._errors.get(operation_id)
