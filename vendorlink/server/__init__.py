"""
VendorLink Server Package.

This package contains the web server implementation for the VendorLink marketplace.
It includes the API definition, authentication, business services and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    auth: OpenID Connect client, server-side sessions and the login flow.
    core: Settings and constants.
    services: Business logic and FastAPI dependencies.
    exception_handlers: Uniform JSON error responses.
    middleware: Request logging and timing.
"""
