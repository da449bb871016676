from typing import Any, Mapping, Union

from zoho_books.integrations.clients.base import CommentsMixin, DocumentMixin
from zoho_books.integrations.contracts.customer_payments import (
    CustomerPaymentListResponse,
    CustomerPaymentResponse,
    PaymentModeListResponse,
    RefundListResponse,
    RefundRequest,
    RefundResponse,
)


class CustomerPaymentsClient(DocumentMixin, CommentsMixin):
    """Customer payments: ``/customerpayments``."""

    collection = "/customerpayments"
    record_response = CustomerPaymentResponse
    list_response = CustomerPaymentListResponse

    async def get_refunds(self, payment_id: str) -> RefundListResponse:
        return await self._fetch(RefundListResponse, "GET", self._path(payment_id, "refunds"))

    async def create_refund(self, payment_id: str, refund: Union[RefundRequest, Mapping[str, Any]]) -> RefundResponse:
        return await self._fetch(RefundResponse, "POST", self._path(payment_id, "refunds"), body=refund)

    async def get_payment_modes(self) -> PaymentModeListResponse:
        # Payment modes live under organization settings, not the collection.
        return await self._fetch(PaymentModeListResponse, "GET", "/settings/paymentmodes")
