"""Book catalogue CLI commands."""

import typer
from rich.prompt import Confirm
from rich.table import Table

from src.app.core.errors import BookServiceError, NotFoundError, ValidationError
from src.app.entities.service.book import Book

from .utils import book_service, console

books_app = typer.Typer(help="📚 Manage books directly in the configured database")


def _books_table(books: list[Book], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Author", style="magenta")
    table.add_column("Year", style="yellow", justify="right")
    for book in books:
        table.add_row(str(book.id), book.title, book.author, str(book.year))
    return table


@books_app.command("list")
def list_books() -> None:
    """List all books."""
    try:
        with book_service() as service:
            books = service.get_books()
    except BookServiceError as e:
        console.print(f"[red]❌ Failed to list books: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not books:
        console.print("[yellow]No books found[/yellow]")
        return

    console.print(_books_table(books, "Books"))
    console.print(f"\n[green]Found {len(books)} books[/green]")


@books_app.command("add")
def add_book(
    title: str = typer.Option(..., "--title", "-t", help="Book title"),
    author: str = typer.Option(..., "--author", "-a", help="Book author"),
    year: int = typer.Option(..., "--year", "-y", help="Publication year"),
) -> None:
    """Add a new book."""
    try:
        book = Book(title=title, author=author, year=year).ensure_valid()
        with book_service() as service:
            created = service.add_book(book)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid book: {e}[/red]")
        raise typer.Exit(code=2) from e
    except BookServiceError as e:
        console.print(f"[red]❌ Failed to add book: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Added book {created.id}: '{created.title}'[/green]")


@books_app.command("show")
def show_book(book_id: int = typer.Argument(..., help="Book ID")) -> None:
    """Show a single book."""
    try:
        with book_service() as service:
            book = service.get_book(book_id)
    except NotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    except BookServiceError as e:
        console.print(f"[red]❌ Failed to load book: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(_books_table([book], f"Book {book.id}"))


@books_app.command("remove")
def remove_book(
    book_id: int = typer.Argument(..., help="Book ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a book."""
    if not force and not Confirm.ask(f"Are you sure you want to delete book {book_id}?"):
        console.print("[yellow]Deletion cancelled[/yellow]")
        return

    try:
        with book_service() as service:
            service.delete_book(book_id)
    except NotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    except BookServiceError as e:
        console.print(f"[red]❌ Failed to delete book: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Deleted book {book_id}[/green]")
