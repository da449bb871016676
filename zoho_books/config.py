"""
Configuration loader for the Zoho Books client.

Values come from the environment (a local ``.env`` is loaded first and never
overrides variables already set).
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "ZohoBooks.fullaccess.all"
DEFAULT_REDIRECT_URI = "http://localhost:3000/callback"


class ZohoBooksSettings(BaseModel):
    """OAuth client registration plus optional pre-issued tokens."""

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scope: str = DEFAULT_SCOPE
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    organization_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ZohoBooksSettings":
        """
        Build settings from ``ZOHO_*`` environment variables.

        Raises:
            ValueError: If ZOHO_CLIENT_ID or ZOHO_CLIENT_SECRET is missing
        """
        load_dotenv(override=False)
        client_id = os.getenv("ZOHO_CLIENT_ID")
        client_secret = os.getenv("ZOHO_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise ValueError("Missing ZOHO_CLIENT_ID or ZOHO_CLIENT_SECRET")

        settings = cls(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=os.getenv("ZOHO_REDIRECT_URI", DEFAULT_REDIRECT_URI),
            scope=os.getenv("ZOHO_SCOPE", DEFAULT_SCOPE),
            access_token=os.getenv("ZOHO_ACCESS_TOKEN") or None,
            refresh_token=os.getenv("ZOHO_REFRESH_TOKEN") or None,
            organization_id=os.getenv("ZOHO_ORGANIZATION_ID") or None,
        )
        logger.info(
            "Loaded Zoho Books settings (organization_id=%s, has_access_token=%s, has_refresh_token=%s)",
            settings.organization_id,
            bool(settings.access_token),
            bool(settings.refresh_token),
        )
        return settings
