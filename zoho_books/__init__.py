"""
Typed async client for the Zoho Books API.

    sdk = ZohoBooksSDK.from_env()
    contact = await sdk.contacts.get("460000000026049")
"""

from zoho_books.config import ZohoBooksSettings
from zoho_books.integrations.contracts import Credential, ListFilters, SearchCriterion, TokenResponse
from zoho_books.integrations.errors import ErrorCause, ZohoBooksError
from zoho_books.sdk import ZohoBooksSDK

__version__ = "1.0.0"

__all__ = [
    "ZohoBooksSDK", "ZohoBooksSettings", "Credential", "TokenResponse",
    "ListFilters", "SearchCriterion", "ErrorCause", "ZohoBooksError",
]
