"""Book database table model."""

from src.app.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Maps to ``books(id, title, author, year)``. It's separate from the domain
    entity so that repositories never leak table rows to callers.
    """

    __tablename__ = "books"

    title: str
    author: str
    year: int
