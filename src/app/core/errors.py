"""Error taxonomy shared by the repository, usecase and transport layers.

Transports translate these into their native representation:

- ``ValidationError`` -> HTTP 400 / gRPC INVALID_ARGUMENT
- ``NotFoundError``   -> HTTP 404 / gRPC NOT_FOUND
- ``StorageError``    -> HTTP 500 / gRPC INTERNAL
"""


class BookServiceError(Exception):
    """Base class for all book service errors."""


class ValidationError(BookServiceError):
    """A book is missing a required field or carries an invalid value."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid book")


class NotFoundError(BookServiceError):
    """No book matches the requested identifier."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")


class StorageError(BookServiceError):
    """The database failed to execute a statement."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}")
