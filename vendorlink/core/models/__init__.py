"""Core models shared by the database layer and the API.

- domain: enums and pricing arithmetic of the marketplace
- io: request/response schemas for the HTTP API
"""
