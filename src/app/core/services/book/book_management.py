from loguru import logger

from src.app.entities.service.book import Book, BookRepository


class BookManagementService:
    """Orchestrates book operations between the transports and the repository.

    Each method logs the call, delegates to the matching repository method and
    logs the outcome. Errors are logged and re-raised unchanged.
    """

    def __init__(self, book_repository: BookRepository):
        self._book_repo = book_repository

    def add_book(self, book: Book) -> Book:
        logger.info("Adding book: {}", book)
        try:
            created = self._book_repo.create(book)
        except Exception as e:
            logger.error("Error adding book: {}", e)
            raise
        logger.info("Book added successfully: {}", created)
        return created

    def get_books(self) -> list[Book]:
        logger.info("Retrieving books")
        try:
            books = self._book_repo.find_all()
        except Exception as e:
            logger.error("Error retrieving books: {}", e)
            raise
        logger.info("Books retrieved successfully", count=len(books))
        return books

    def get_book(self, book_id: int) -> Book:
        logger.info("Retrieving book by ID: {}", book_id)
        try:
            book = self._book_repo.find_by_id(book_id)
        except Exception as e:
            logger.error("Error retrieving book by ID: {}", e)
            raise
        logger.info("Book retrieved successfully: {}", book)
        return book

    def update_book(self, book: Book) -> Book:
        logger.info("Updating book: {}", book)
        try:
            updated = self._book_repo.update(book)
        except Exception as e:
            logger.error("Error updating book: {}", e)
            raise
        logger.info("Book updated successfully: {}", updated)
        return updated

    def delete_book(self, book_id: int) -> None:
        logger.info("Deleting book by ID: {}", book_id)
        try:
            self._book_repo.delete(book_id)
        except Exception as e:
            logger.error("Error deleting book: {}", e)
            raise
        logger.info("Book deleted successfully, ID: {}", book_id)
