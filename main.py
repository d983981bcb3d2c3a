import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from book_log import BookLog
from config import settings
from menu import BookLogMenu
from utils.prompts import PromptEngine

APP_NAME = settings.app_name

app = typer.Typer(help="Personal book log: record, list, edit and delete the books you have read.", add_completion=False)


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr so they never mix with the menu output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


@app.command()
def run() -> None:
    """Open the book log and start the interactive menu."""
    configure_logging(settings.log_level)
    console = Console()
    console.rule(f"[bold cyan]{APP_NAME}[/]")

    book_log = BookLog(settings.db_file)
    menu = BookLogMenu(book_log, PromptEngine(console), console)
    try:
        menu.run()
    finally:
        # Exit already closed it; this covers Ctrl-C at the main menu
        book_log.close()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
