"""
Service layer abstraction.

Each service encapsulates the lookups for one resource.  Services
receive the seed store explicitly instead of reaching for global
state, so tests can run them against any store they like.
"""
