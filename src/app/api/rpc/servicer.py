"""Thin gRPC adapter mapping BookService RPCs onto the book usecase."""

from collections.abc import Iterator
from contextlib import contextmanager

import grpc
from loguru import logger

from src.app.api.rpc.stubs import book_pb2, book_pb2_grpc, empty_pb2
from src.app.core.errors import NotFoundError, StorageError, ValidationError
from src.app.core.services import BookManagementService, DbSessionService
from src.app.entities.service.book import Book, BookRepository


def book_from_message(message) -> Book:
    return Book(
        id=message.id or None,
        title=message.title,
        author=message.author,
        year=message.year,
    )


def book_to_message(book: Book):
    return book_pb2.Book(
        id=book.id or 0, title=book.title, author=book.author, year=book.year
    )


@contextmanager
def translate_errors(context: grpc.ServicerContext) -> Iterator[None]:
    """Abort the RPC with the status code matching a domain error."""
    try:
        yield
    except ValidationError as e:
        context.abort(grpc.StatusCode.INVALID_ARGUMENT, str(e))
    except NotFoundError as e:
        context.abort(grpc.StatusCode.NOT_FOUND, str(e))
    except StorageError as e:
        logger.bind(error_type=type(e.__cause__).__name__).error(
            "rpc.storage_error: {}", e
        )
        context.abort(grpc.StatusCode.INTERNAL, str(e))


class BookServicer(book_pb2_grpc.BookServiceServicer):
    """Implements ``book.BookService`` with one database session per call."""

    def __init__(self, database_service: DbSessionService):
        self._database_service = database_service

    @contextmanager
    def _book_service(self) -> Iterator[BookManagementService]:
        with self._database_service.session_scope() as session:
            yield BookManagementService(BookRepository(session))

    def CreateBook(self, request, context):
        with translate_errors(context), self._book_service() as service:
            book = book_from_message(request).model_copy(update={"id": None})
            return book_to_message(service.add_book(book.ensure_valid()))

    def GetBooks(self, request, context):
        with translate_errors(context), self._book_service() as service:
            books = service.get_books()
            return book_pb2.BookList(books=[book_to_message(book) for book in books])

    def GetBook(self, request, context):
        with translate_errors(context), self._book_service() as service:
            return book_to_message(service.get_book(request.id))

    def UpdateBook(self, request, context):
        with translate_errors(context), self._book_service() as service:
            book = book_from_message(request).ensure_valid()
            return book_to_message(service.update_book(book))

    def DeleteBook(self, request, context):
        with translate_errors(context), self._book_service() as service:
            service.delete_book(request.id)
            return empty_pb2.Empty()
