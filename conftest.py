import io

import pytest
from rich.console import Console

from book_log import BookLog


class ScriptedPrompts:
    """Replays canned answers in place of the terminal prompt.

    The check hook, defaults and validators are applied in the same order
    PromptEngine applies them, so rejected answers are skipped and the next
    one is used. Put ``KeyboardInterrupt`` in the script to simulate Ctrl-C.
    """

    def __init__(self, answers, console):
        self.answers = list(answers)
        self.console = console
        self.asked = []

    def prompt_text(self, label, validator=None, default=None, check=None):
        while True:
            answer = self._next(label)
            if check is not None:
                check(answer)
            if default is not None and not answer.strip():
                answer = default
            if validator is None or validator(answer) is True:
                return answer

    def prompt_choice(self, label, options):
        answer = self._next(label)
        assert answer in options, f"{answer!r} is not a menu option"
        return answer

    def _next(self, label):
        self.asked.append(label)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {label!r}")
        answer = self.answers.pop(0)
        if answer is KeyboardInterrupt:
            raise KeyboardInterrupt
        return answer


@pytest.fixture
def log(tmp_path):
    # Fresh database file per test
    book_log = BookLog(db_file=str(tmp_path / "books.db"))
    yield book_log
    book_log.close()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)


@pytest.fixture
def output(console):
    """Everything printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def scripted(console):
    return lambda *answers: ScriptedPrompts(answers, console)
