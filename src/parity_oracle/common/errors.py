"""Error type raised by the parity oracle."""
from __future__ import annotations
from enum import Enum

class ErrorKind(str, Enum):
    """Category tag for failures; also used to label diagnostic log lines."""
    VALIDATION = "validation"
    TRANSPORT = "transport"
    DOMAIN = "domain"
    UNEXPECTED = "unexpected"

class OracleError(Exception):
    """
    Expected ("operational") failure of a parity lookup.

    Args:
        kind: Which stage failed.
        message: Human-readable description.
        is_operational: False marks a defect rather than a handleable condition.
    """

    def __init__(self, kind: ErrorKind, message: str, is_operational: bool = True) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.is_operational = is_operational

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"OracleError(kind={self.kind.value!r}, message={self.message!r})"

INVALID_INPUT_MESSAGE = "Input must be a numeric value."
AMBIGUOUS_ANSWER_MESSAGE = "Unable to determine if number is odd or even."
