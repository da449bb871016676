from zoho_books.integrations.clients.base import CommentsMixin
from zoho_books.integrations.contracts.contacts import (
    ContactListResponse,
    ContactResponse,
    ContactStatementResponse,
)


class ContactsClient(CommentsMixin):
    """Contacts (customers and vendors): ``/contacts``."""

    collection = "/contacts"
    record_response = ContactResponse
    list_response = ContactListResponse

    async def mark_as_active(self, contact_id: str) -> ContactResponse:
        return await self._post_action(contact_id, "active")

    async def mark_as_inactive(self, contact_id: str) -> ContactResponse:
        return await self._post_action(contact_id, "inactive")

    async def enable_payment_reminder(self, contact_id: str) -> ContactResponse:
        return await self._post_action(contact_id, "paymentreminder", "enable")

    async def disable_payment_reminder(self, contact_id: str) -> ContactResponse:
        return await self._post_action(contact_id, "paymentreminder", "disable")

    async def get_statement(self, contact_id: str, start_date: str, end_date: str) -> ContactStatementResponse:
        return await self._fetch(
            ContactStatementResponse,
            "GET",
            self._path(contact_id, "statements"),
            query=[("start_date", start_date), ("end_date", end_date)],
        )
