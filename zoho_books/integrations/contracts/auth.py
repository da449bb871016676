"""
Authentication contracts: the held credential and the token endpoint reply.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


@dataclass
class Credential:
    """OAuth2 client registration plus the tokens currently held.

    One instance is shared by reference between a transport and its token
    manager. ``access_token`` being empty means unauthenticated.
    """
    client_id: str
    client_secret: str
    redirect_uri: str
    scope: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[float] = None   # epoch seconds, set on exchange/refresh


class TokenResponse(BaseModel):
    """Body returned by ``accounts.zoho.com/oauth/v2/token``.

    Zoho omits ``refresh_token`` on refresh-grant replies, so it is optional.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    api_domain: Optional[str] = None
    scope: Optional[str] = None
