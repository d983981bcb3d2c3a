from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from book import Book, format_stars


def print_book_table(console: Console, books: List[Book]) -> None:
    """Render the book list.

    An empty list is a valid result and prints a short empty-state line
    instead of a table.
    """
    console.print("[bold yellow]All books:[/]")
    if not books:
        console.print("[dim]No books recorded yet.[/]")
        return

    table = Table(show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Author", style="white")
    table.add_column("Stars", style="yellow", justify="right")
    for book in books:
        table.add_row(str(book.id), escape(book.name), escape(book.author), format_stars(book.stars))
    console.print(table)


def print_success(console: Console, message: str) -> None:
    console.print(f"[bold yellow]{escape(message)}[/]")


def print_not_found(console: Console, message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/]")


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/] {escape(message)}")
