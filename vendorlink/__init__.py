"""VendorLink.

This package contains the backend of VendorLink, a B2B marketplace that connects
vendors (buyers) with suppliers (sellers) for procurement, group buying, order
tracking, reviews and credit scoring.

High-level architecture
-----------------------

- ``vendorlink.core``:

  - Logging and monitoring configuration.
  - SQLModel entities and async repositories (``vendorlink.core.database``).
  - Domain enums, pricing arithmetic and the API I/O schemas
    (``vendorlink.core.models``).

- ``vendorlink.server``:

  - The FastAPI application, settings, OpenID Connect authentication with
    server-side sessions, business services and the ``/api`` routers.

Typical request
---------------

1. The session middleware resolves the signed cookie to a session id.
2. The ``CurrentUser`` dependency loads the stored session, refreshes the
   access token when it has expired, and loads the user row.
3. The router calls a repository or a service, which raises a
   ``MarketplaceError`` subclass for domain failures.
4. Exception handlers turn errors into ``{"message": ...}`` JSON bodies.
"""
