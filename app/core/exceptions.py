"""
Domain exceptions.

Raised by the CRUD layer and translated to HTTP responses by the exception
handlers registered in app.main.
"""

from typing import List


class PostoAquiError(Exception):
    """Base class for domain errors."""


class ValidationFailed(PostoAquiError):
    """Input broke one or more domain rules; nothing was written."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class StationNotFound(PostoAquiError):
    """No station exists with the requested id."""

    def __init__(self, station_id: int):
        self.station_id = station_id
        super().__init__(f"Station with id {station_id} not found")
