"""
Authentication: OpenID Connect client, login flow and session validation.
"""

from .errors import OIDCError
from .flow import AuthFlow
from .oidc import OIDCClient, TokenSet
from .provider import close_oidc_client, get_oidc_client

__all__ = [
    "AuthFlow",
    "OIDCClient",
    "OIDCError",
    "TokenSet",
    "close_oidc_client",
    "get_oidc_client",
]
