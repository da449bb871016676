"""
HTTP clients for Zoho Books.

- ``transport``: the single place that talks HTTP to ``books.zoho.com``
- ``token_manager``: the single place that talks to ``accounts.zoho.com``
- one resource client per endpoint family, all built on the transport

Resource clients never open their own connections and never retry.
"""

from .contacts import ContactsClient
from .customer_payments import CustomerPaymentsClient
from .invoices import InvoicesClient
from .sales_receipts import SalesReceiptsClient
from .token_manager import TokenManager
from .transport import Err, Ok, RequestDescriptor, ResponseKind, ZohoBooksTransport

__all__ = [
    "ContactsClient", "CustomerPaymentsClient", "InvoicesClient", "SalesReceiptsClient",
    "TokenManager", "Err", "Ok", "RequestDescriptor", "ResponseKind", "ZohoBooksTransport",
]
