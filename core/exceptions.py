"""Domain errors raised by the issue service and mapped to HTTP responses in the API layer."""


class IssueTrackerError(Exception):
    """Base class for errors the API layer knows how to render."""

    status_code = 500

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class NotFoundError(IssueTrackerError):
    """Raised when an issue or comment does not exist."""

    status_code = 404


class PersistenceError(IssueTrackerError):
    """Raised when a record could not be written to the database."""

    status_code = 500


__all__ = ["IssueTrackerError", "NotFoundError", "PersistenceError"]
