"""Unit tests for the Book entity and its validation rule."""

import pytest

from src.app.core.errors import ValidationError
from src.app.entities.service.book import Book, BookTable


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_creation(self):
        """A new book has no id until the store assigns one."""
        book = Book(title="Dune", author="Frank Herbert", year=1965)

        assert book.id is None
        assert book.title == "Dune"
        assert book.author == "Frank Herbert"
        assert book.year == 1965

    def test_valid_book_passes_validation(self):
        book = Book(title="Dune", author="Frank Herbert", year=1965)

        assert book.validation_errors() == []
        assert book.ensure_valid() is book

    @pytest.mark.parametrize(
        ("title", "author", "year", "message"),
        [
            ("", "Frank Herbert", 1965, "title is required"),
            ("   ", "Frank Herbert", 1965, "title is required"),
            ("Dune", "", 1965, "author is required"),
            ("Dune", "Frank Herbert", 0, "year must be a positive integer"),
            ("Dune", "Frank Herbert", -12, "year must be a positive integer"),
            ("Dune", "Frank Herbert", 2**31, "year must not exceed 2147483647"),
        ],
    )
    def test_invalid_field_is_rejected(self, title, author, year, message):
        book = Book(title=title, author=author, year=year)

        with pytest.raises(ValidationError) as exc_info:
            book.ensure_valid()

        assert exc_info.value.errors == [message]

    def test_every_failing_field_is_reported(self):
        book = Book(title="", author="", year=0)

        with pytest.raises(ValidationError) as exc_info:
            book.ensure_valid()

        assert len(exc_info.value.errors) == 3
        assert "title is required" in str(exc_info.value)

    def test_book_equality(self):
        """Books compare by id and business attributes."""
        book1 = Book(id=1, title="Dune", author="Frank Herbert", year=1965)
        book2 = Book(id=1, title="Dune", author="Frank Herbert", year=1965)
        book3 = Book(id=2, title="Dune", author="Frank Herbert", year=1965)

        assert book1 == book2
        assert book1 != book3
        assert hash(book1) == hash(book2)
        assert book1 != "Dune"

    def test_json_shape(self):
        book = Book(id=7, title="Dune", author="Frank Herbert", year=1965)

        assert book.model_dump() == {
            "id": 7,
            "title": "Dune",
            "author": "Frank Herbert",
            "year": 1965,
        }


class TestBookTable:
    """Test the Book table model."""

    def test_table_name(self):
        assert BookTable.__tablename__ == "books"

    def test_entity_from_table_row(self):
        row = BookTable(id=3, title="Emma", author="Jane Austen", year=1815)

        book = Book.model_validate(row, from_attributes=True)

        assert isinstance(book, Book)
        assert not isinstance(book, BookTable)
        assert book == Book(id=3, title="Emma", author="Jane Austen", year=1815)


class TestBookYearBounds:
    def test_largest_storable_year_is_valid(self):
        book = Book(title="Far Future", author="Anon", year=2**31 - 1)

        assert book.validation_errors() == []
