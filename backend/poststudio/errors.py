"""
Error types shared by the pipeline, storage layer and API.

Every error carries the HTTP status it maps to; the handlers registered in
main.py turn them into ``{"error": message}`` responses.
"""

from typing import Optional


class PostStudioError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PostStudioError):
    """Missing, empty or invalid input."""

    status_code = 400


class NotFoundError(PostStudioError):
    """Requested resource does not exist."""

    status_code = 404


class UpstreamError(PostStudioError):
    """A call to an external service failed."""

    status_code = 500


class GenerationError(UpstreamError):
    """The LLM API returned an error, empty output, or timed out."""


class StorageError(PostStudioError):
    """A database operation failed."""

    status_code = 500


def handle_database_error(error: Exception, default_message: Optional[str] = None) -> StorageError:
    """
    Wrap a database client exception in a StorageError.

    Known failure patterns get a sanitized message; anything else keeps the
    driver message.
    """
    if isinstance(error, StorageError):
        return error

    message = str(error) or default_message or "Database operation failed"
    lowered = message.lower()

    if "unique constraint" in lowered or "duplicate" in lowered:
        return StorageError("A record with this information already exists.")
    if "connection" in lowered or "timeout" in lowered:
        return StorageError("Database connection error. Please try again.")

    return StorageError(message)
