import logging
from enum import Enum
from typing import Callable, Dict, Optional

from rich.console import Console

from book import Book
from book_log import BookLog, StoreError
from utils.cancellation import CANCEL_TOKEN, CancellationChannel, OperationCancelled
from utils.prompts import PromptEngine
from utils.ui_helpers import print_book_table, print_error, print_not_found, print_success
from utils.validators import BookValidator

logger = logging.getLogger(__name__)


class MenuChoice(Enum):
    """Main menu entries, in the order they are shown."""

    VIEW = "View all books"
    UPDATE = "Update book"
    ADD = "Add a new book"
    DELETE = "Delete book"
    EXIT = "Exit"


# Handlers that read from the prompt and therefore listen for cancellation
PROMPTING_CHOICES = frozenset({MenuChoice.ADD, MenuChoice.UPDATE, MenuChoice.DELETE})

MENU_QUESTION = "What would you like to do?"
FAREWELL = "Thank you for using our software!"


class BookLogMenu:
    """Interactive loop: show the menu, run one handler, come back."""

    def __init__(
        self,
        book_log: BookLog,
        prompts: PromptEngine,
        console: Optional[Console] = None,
        channel: Optional[CancellationChannel] = None,
    ) -> None:
        self.book_log = book_log
        self.prompts = prompts
        self.console = console or prompts.console
        self.channel = channel or CancellationChannel()
        self.handlers: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.VIEW: self.view_books,
            MenuChoice.UPDATE: self.update_book,
            MenuChoice.ADD: self.add_book,
            MenuChoice.DELETE: self.delete_book,
        }

    def run(self) -> None:
        """Loop until the user picks Exit, then close the book log."""
        while True:
            label = self.prompts.prompt_choice(MENU_QUESTION, [choice.value for choice in MenuChoice])
            choice = MenuChoice(label)
            if choice is MenuChoice.EXIT:
                self.exit()
                return
            self.dispatch(choice)
            self.console.print()

    def dispatch(self, choice: MenuChoice) -> None:
        handler = self.handlers[choice]
        logger.info("Running %s", choice.name.lower())
        try:
            if choice in PROMPTING_CHOICES:
                self.console.print(f"[dim](type '{CANCEL_TOKEN}' or press Ctrl-C to cancel)[/]")
                with self.channel.listen():
                    handler()
            else:
                handler()
        except OperationCancelled:
            logger.info("%s cancelled by user", choice.name.lower())
            self.console.print("[blue]Cancelled.[/]")

    def exit(self) -> None:
        self.console.print(f"[bold on bright_magenta]{FAREWELL}[/]")
        self.book_log.close()

    # ------------------------- Handlers ------------------------- #
    def add_book(self) -> None:
        self.console.print("[bold blue]Welcome to your private bookapp![/]")
        name = self._ask("What book you read?", BookValidator.validate_text)
        author = self._ask("Name of the author?", BookValidator.validate_text)
        stars = self._ask("Rate the book (1-5)", BookValidator.validate_rating)

        try:
            book_id = self.book_log.add_book(name, author, BookValidator.parse_rating(stars))
        except StoreError as e:
            print_error(self.console, str(e))
            return
        print_success(self.console, f"Your book details have been saved with ID {book_id}")

    def view_books(self) -> None:
        try:
            books = self.book_log.list_books()
        except StoreError as e:
            print_error(self.console, str(e))
            return
        print_book_table(self.console, books)

    def update_book(self) -> None:
        book = self._ask_for_book("Enter the ID of the book you want to update:")
        if book is None:
            return

        name = self._ask("Update the name of the book:", BookValidator.validate_text, default=book.name)
        author = self._ask("Update the name of author:", BookValidator.validate_text, default=book.author)
        stars = self._ask("Enter the updated number of stars:", BookValidator.validate_rating)

        try:
            rows = self.book_log.update_book(book.id, name, author, BookValidator.parse_rating(stars))
        except StoreError as e:
            print_error(self.console, str(e))
            return
        print_success(self.console, f"Book with ID {book.id} has been updated. Row affected: {rows}")

    def delete_book(self) -> None:
        book = self._ask_for_book("Enter the ID of the book you want to delete:")
        if book is None:
            return

        try:
            rows = self.book_log.remove_book(book.id)
        except StoreError as e:
            print_error(self.console, str(e))
            return
        print_success(self.console, f"Book with ID {book.id} has been deleted. Row affected: {rows}")

    # ------------------------- Helpers ------------------------- #
    def _ask(self, label: str, validator, default: Optional[str] = None) -> str:
        with self.channel.interruptible():
            return self.prompts.prompt_text(label, validator, default=default, check=self.channel.check)

    def _ask_for_book(self, label: str) -> Optional[Book]:
        """Prompt for an id and look it up. Reports and returns None when it can't be used."""
        book_id = int(self._ask(label, BookValidator.validate_id).strip())
        try:
            book = self.book_log.find_book(book_id)
        except StoreError as e:
            print_error(self.console, str(e))
            return None
        if book is None:
            print_not_found(self.console, f"No book found with ID {book_id}")
        return book
