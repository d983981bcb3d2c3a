from typing import Callable, List, Optional, TextIO, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

Validator = Callable[[str], Union[bool, str]]


class PromptEngine:
    """Asks questions on the terminal and only returns answers that validate."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> None:
        self.console = console or Console()
        # Tests pass a StringIO here instead of typing on stdin
        self.stream = stream

    def prompt_text(
        self,
        label: str,
        validator: Optional[Validator] = None,
        default: Optional[str] = None,
        check: Optional[Callable[[str], str]] = None,
    ) -> str:
        """Ask until ``validator`` accepts the answer. Empty input picks ``default``.

        ``check`` sees exactly what was typed, before the default is filled in,
        and may raise to abort the question.
        """
        while True:
            # rich would hand back the default for empty input before ``check`` runs
            question = label if default is None else f"{label} [prompt.default]({escape(default)})"
            answer = Prompt.ask(question, console=self.console, stream=self.stream)
            answer = answer if answer is not None else ""
            if check is not None:
                check(answer)
            if default is not None and not answer.strip():
                answer = default
            result = validator(answer) if validator else True
            if result is True:
                return answer
            self.console.print(f"[red]>> {result}[/]")

    def prompt_choice(self, label: str, options: List[str]) -> str:
        """Show ``options`` as a numbered list and return the chosen label."""
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for number, option in enumerate(options, 1):
            table.add_row(f"[reverse]{number}[/]", option)
        self.console.print(table)

        numbers = [str(n) for n in range(1, len(options) + 1)]
        by_label = {option.lower(): option for option in options}
        while True:
            answer = Prompt.ask(label, console=self.console, stream=self.stream, default="1").strip()
            if answer in numbers:
                return options[int(answer) - 1]
            if answer.lower() in by_label:
                return by_label[answer.lower()]
            self.console.print("[yellow]Please pick one of the listed options.[/]")
