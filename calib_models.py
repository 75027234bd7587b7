from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

NUMBER_TABLE = MappingProxyType(
    {
        "1": 1,
        "2": 2,
        "3": 3,
        "4": 4,
        "5": 5,
        "6": 6,
        "7": 7,
        "8": 8,
        "9": 9,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
    }
)


@dataclass(frozen=True)
class DigitToken:
    """A candidate digit match: its value, where it starts, and the text that matched."""

    value: int
    position: int | None
    text: str = ""

    @property
    def exists(self) -> bool:
        return self.position is not None


@dataclass
class LineResult:
    """The calibration value of one line and the tokens it was built from."""

    line: str
    value: int
    first: DigitToken
    last: DigitToken


class CalibrationError(Exception):
    """Base class for failures while computing a calibration total."""


class NoDigitFound(CalibrationError):
    """Raised when a line holds no digit under the active extraction strategy."""

    def __init__(self, line: str, strategy: str) -> None:
        super().__init__(f"no digit found by {strategy} in line {line!r}")
        self.line = line
        self.strategy = strategy


class MissingInputResource(CalibrationError):
    """Raised when the input document cannot be found or read."""

    def __init__(self, path: str, reason: str = "file not found") -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
