"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.app.core.errors import ValidationError
from src.app.entities.core._base import INT32_MAX, Entity


class Book(Entity):
    """Book entity representing a book in the catalogue.

    This is the domain model that carries the field validation rule shared by
    every transport. The identifier is assigned by the data store.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    year: int = Field(description="Publication year")

    def validation_errors(self) -> list[str]:
        """Return a message for every required field that is missing or invalid."""
        errors = []
        if not self.title.strip():
            errors.append("title is required")
        if not self.author.strip():
            errors.append("author is required")
        if self.year <= 0:
            errors.append("year must be a positive integer")
        elif self.year > INT32_MAX:
            errors.append(f"year must not exceed {INT32_MAX}")
        return errors

    def ensure_valid(self) -> "Book":
        """Raise ValidationError unless title, author and year are all acceptable."""
        errors = self.validation_errors()
        if errors:
            raise ValidationError(errors)
        return self

    def __eq__(self, other: Any) -> bool:
        """Compare books by identity and business attributes."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.year == other.year
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.author, self.year))
