"""Repository: Book."""

from sqlalchemy import delete, insert, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Executable
from sqlmodel import Session, select

from src.app.core.errors import NotFoundError, StorageError
from src.app.entities.core._base import INT32_MAX
from src.app.entities.service.book.entity import Book
from src.app.entities.service.book.table import BookTable


def _storable_id(book_id: int | None) -> bool:
    return book_id is not None and 0 < book_id <= INT32_MAX


class BookRepository:
    """Data-access layer for books.

    Every operation issues a single parameterized statement and commits it
    immediately. Reads bypass stale identity-map state so that rows changed by
    earlier statements in the same session are always reloaded.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _write(self, statement: Executable, operation: str) -> CursorResult:
        try:
            result = self._session.connection().execute(statement)
            self._session.commit()
            return result
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StorageError(operation) from e

    def create(self, book: Book) -> Book:
        """Insert a new row and return the book with its generated id."""
        statement = insert(BookTable).values(
            title=book.title, author=book.author, year=book.year
        )
        result = self._write(statement, "create")
        return book.model_copy(update={"id": result.inserted_primary_key[0]})

    def find_all(self) -> list[Book]:
        """Return every book in store order; an empty list when there are none."""
        statement = select(BookTable).execution_options(populate_existing=True)
        try:
            rows = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StorageError("find_all") from e
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, book_id: int) -> Book:
        if not _storable_id(book_id):
            raise NotFoundError(book_id)
        statement = (
            select(BookTable)
            .where(BookTable.id == book_id)
            .execution_options(populate_existing=True)
        )
        try:
            row = self._session.exec(statement).first()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StorageError("find_by_id") from e
        if row is None:
            raise NotFoundError(book_id)
        return Book.model_validate(row, from_attributes=True)

    def update(self, book: Book) -> Book:
        """Overwrite title, author and year of the row matching ``book.id``."""
        if not _storable_id(book.id):
            raise NotFoundError(book.id)
        statement = (
            update(BookTable)
            .where(BookTable.id == book.id)
            .values(title=book.title, author=book.author, year=book.year)
        )
        result = self._write(statement, "update")
        if result.rowcount == 0:
            raise NotFoundError(book.id)
        return book

    def delete(self, book_id: int) -> None:
        if not _storable_id(book_id):
            raise NotFoundError(book_id)
        statement = delete(BookTable).where(BookTable.id == book_id)
        result = self._write(statement, "delete")
        if result.rowcount == 0:
            raise NotFoundError(book_id)
