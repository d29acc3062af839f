"""
Version 1 of the API.

The mock database has only ever had one version of its routes; they
are mounted at the application root rather than under ``/api/v1`` so
that existing clients keep working.
"""
