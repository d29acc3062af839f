"""
Domain errors raised by the service layer.

The mock database has a single failure mode: a lookup for an id that
is not in the seed data.  ``create_app`` registers a handler that
turns :class:`NotFoundError` into an HTTP 404 with a small JSON body.
"""


class NotFoundError(Exception):
    """Raised when a record with the requested id does not exist."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")
