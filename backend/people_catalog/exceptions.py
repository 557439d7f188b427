"""Application errors rendered as JSON error envelopes."""
from typing import Optional

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error: str = "Bad request"

    def __init__(self, error: Optional[str] = None, *, message: Optional[str] = None) -> None:
        if error is not None:
            self.error = error
        self.message = message
        super().__init__(self.error)


class PersonNotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Person not found"


class ImageNotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Image not found"


class MissingQueryError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Query parameter 'q' is required"
