"""Book API router with CRUD operations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel, ConfigDict, Field

from src.app.api.http.deps import get_book_service
from src.app.core.services import BookManagementService
from src.app.entities.core._base import INT32_MAX
from src.app.entities.service.book import Book

router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[int, Path(ge=1, le=INT32_MAX, description="Book ID")]


class BookPayload(BaseModel):
    """Request body for creating or replacing a book.

    An ``id`` sent by the client is ignored; the store or the path decides it.
    Fields are not coerced: a string or boolean year is a malformed body.
    """

    model_config = ConfigDict(strict=True)

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    year: int = Field(le=INT32_MAX, description="Publication year")

    def to_entity(self, book_id: int | None = None) -> Book:
        return Book(id=book_id, title=self.title, author=self.author, year=self.year)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookPayload,
    book_service: BookManagementService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    book = payload.to_entity().ensure_valid()
    return book_service.add_book(book)


@router.get("", response_model=list[Book])
def list_books(
    book_service: BookManagementService = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return book_service.get_books()


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: BookId,
    book_service: BookManagementService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    return book_service.get_book(book_id)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: BookId,
    payload: BookPayload,
    book_service: BookManagementService = Depends(get_book_service),
) -> Book:
    """Replace title, author and year of a book."""
    book = payload.to_entity(book_id).ensure_valid()
    return book_service.update_book(book)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: BookId,
    book_service: BookManagementService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    book_service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
