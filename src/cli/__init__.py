"""Main CLI application module."""

import typer

from .book_commands import books_app
from .server_commands import db_app, serve_app

app = typer.Typer(
    help="📚 Book Service CLI - run servers and manage the catalogue",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(books_app, name="books")
app.add_typer(serve_app, name="serve")
app.add_typer(db_app, name="db")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
