"""
Application package initializer.

This package contains the main entrypoint for the mock database
service and its submodules.  Each resource (users, products) has its
own schema, service and router; health and metadata endpoints live
alongside them under ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
