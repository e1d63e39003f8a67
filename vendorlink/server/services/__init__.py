"""
Business logic behind the API routers.

Simple reads and single-row writes live in the routers; anything that checks
roles, spans several rows or must be atomic lives here.
"""
