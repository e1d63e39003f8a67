"""Unit tests for the database layer.

Repository tests run against in-memory SQLite so that the conditional
updates and constraints are exercised for real.
"""
