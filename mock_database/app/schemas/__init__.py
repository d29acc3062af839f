"""
Pydantic schema definitions for API payloads.

Each resource (users, products) defines its own Pydantic model.  The
models are frozen: seed records are built once at startup and shared
between requests, so nothing may modify them afterwards.
"""
