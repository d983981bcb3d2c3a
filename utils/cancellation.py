"""
Cancellation channel for multi-step prompts.

A handler that asks several questions in a row runs inside
``channel.listen()``. While that block runs, the user can abort a question
either by typing the cancel token (``check``) or by pressing Ctrl-C inside
``interruptible()``. Both surface as ``OperationCancelled``, which the menu
treats as a normal return.
"""

from contextlib import contextmanager
from typing import Iterator

# Typed at any prompt to abandon the current operation.
CANCEL_TOKEN = "q"


class OperationCancelled(Exception):
    """The user aborted the running operation."""


def is_cancel_token(value: str) -> bool:
    return value is not None and value.strip().lower() == CANCEL_TOKEN


class CancellationChannel:
    """Single listener that is attached for exactly one handler at a time."""

    def __init__(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @contextmanager
    def listen(self) -> Iterator["CancellationChannel"]:
        if self._active:
            raise RuntimeError("Cancellation listener is already attached.")
        self._active = True
        try:
            yield self
        finally:
            self._active = False

    @contextmanager
    def interruptible(self) -> Iterator[None]:
        """Treat Ctrl-C inside this block as a cancel while listening.

        Wrap user input only. Store calls stay outside so a write that
        already happened is never reported as cancelled.
        """
        try:
            yield
        except KeyboardInterrupt:
            if not self._active:
                raise
            raise OperationCancelled() from None

    def check(self, raw: str) -> str:
        """Raise if ``raw`` is the cancel token while listening; else return it."""
        if self._active and is_cancel_token(raw):
            raise OperationCancelled()
        return raw
