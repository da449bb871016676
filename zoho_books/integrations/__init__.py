"""
Integrations layer.

This package contains all code used to communicate with Zoho:
- ``clients``: the transport core, the OAuth token manager and the resource clients
- ``contracts``: the request/response shapes those clients exchange
- ``errors``: the single normalized error type every failure converges to

Key rule:
- Callers (adapters, scripts, web routes) MUST NOT call Zoho directly.
- They go through ``zoho_books.sdk.ZohoBooksSDK``, which wires one transport,
  one token manager and one client per resource around a single Credential.
"""

from .errors import ErrorCause, ZohoBooksError

__all__ = ["ErrorCause", "ZohoBooksError"]
