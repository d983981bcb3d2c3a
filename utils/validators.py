import re
from typing import Optional, Union

from utils.cancellation import is_cancel_token

# 1 to 5 in half steps: 1, 1.5, ..., 4.5, 5 (a trailing ".0" is allowed)
RATING_PATTERN = re.compile(r"(?:[1-4](?:\.[05])?|5(?:\.0)?)")
ID_PATTERN = re.compile(r"[0-9]+")

TEXT_MESSAGE = "Please enter a name."
RATING_MESSAGE = "Please enter a valid number"
ID_MESSAGE = "Please enter a valid ID number"

ValidationResult = Union[bool, str]


class BookValidator:
    """Field rules for book input.

    Every ``validate_*`` method returns ``True`` or the message to show before
    asking again. The cancel token always passes so the caller can see it.
    """

    @staticmethod
    def validate_text(value: Optional[str]) -> ValidationResult:
        if value is not None and value.strip():
            return True
        return TEXT_MESSAGE

    @staticmethod
    def validate_rating(value: Optional[str]) -> ValidationResult:
        if value is None:
            return RATING_MESSAGE
        if is_cancel_token(value) or RATING_PATTERN.fullmatch(value.strip()):
            return True
        return RATING_MESSAGE

    @staticmethod
    def validate_id(value: Optional[str]) -> ValidationResult:
        if value is None:
            return ID_MESSAGE
        if is_cancel_token(value) or ID_PATTERN.fullmatch(value.strip()):
            return True
        return ID_MESSAGE

    @staticmethod
    def parse_rating(value: str) -> float:
        """Convert an accepted rating such as '4.5' to a float."""
        return float(value.strip())
