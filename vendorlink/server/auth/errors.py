"""Error types raised by the OpenID Connect client.

Catch `OIDCError` for any failed call to the identity provider and inspect
`status_code` or `details` for diagnosis.
"""

from __future__ import annotations

from typing import Any, Optional


class OIDCError(Exception):
    """Identity provider call failed.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code returned by the provider.
        details: Optional structured payload from the provider (e.g., JSON error body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
