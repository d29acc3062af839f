"""
Top-level package for the Mock Database Server.

This file makes ``mock_database`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``mock_database.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
