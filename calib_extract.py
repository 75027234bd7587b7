from __future__ import annotations

from calib_models import NUMBER_TABLE, DigitToken, NoDigitFound


def is_ascii_digit(ch: str) -> bool:
    """Ordinal check against '0'..'9'; other Unicode digits do not count."""
    return "0" <= ch <= "9"


class DigitExtractor:
    """Finds the first and last digit of a single calibration line.

    Subclasses implement ``first_token`` and ``last_token``; both raise
    ``NoDigitFound`` when nothing in the line qualifies.
    """

    name = "base"

    def __init__(self, line: str) -> None:
        self.line = line

    def first_token(self) -> DigitToken:
        raise NotImplementedError

    def last_token(self) -> DigitToken:
        raise NotImplementedError

    def first_number(self) -> int:
        return self.first_token().value

    def last_number(self) -> int:
        return self.last_token().value


class LiteralDigits(DigitExtractor):
    """Only single ASCII digit characters count."""

    name = "literal"

    def first_token(self) -> DigitToken:
        for i, ch in enumerate(self.line):
            if is_ascii_digit(ch):
                return DigitToken(ord(ch) - ord("0"), i, ch)
        raise NoDigitFound(self.line, self.name)

    def last_token(self) -> DigitToken:
        for i in range(len(self.line) - 1, -1, -1):
            ch = self.line[i]
            if is_ascii_digit(ch):
                return DigitToken(ord(ch) - ord("0"), i, ch)
        raise NoDigitFound(self.line, self.name)


class WordOrDigit(DigitExtractor):
    """Digits "1".."9" and the words "one".."nine".

    Each pattern is searched on its own over the whole line, so overlapping
    words such as "oneight" yield both "one" and "eight".
    """

    name = "words"

    def _candidates(self, reverse: bool) -> list[DigitToken]:
        find = self.line.rfind if reverse else self.line.find
        tokens: list[DigitToken] = []
        for text, value in NUMBER_TABLE.items():
            pos = find(text)
            tokens.append(DigitToken(value, pos if pos != -1 else None, text))
        return tokens

    def first_token(self) -> DigitToken:
        found = [t for t in self._candidates(reverse=False) if t.exists]
        if not found:
            raise NoDigitFound(self.line, self.name)
        # min() and max() keep the first of equal keys, i.e. the earliest table entry
        return min(found, key=lambda t: t.position)

    def last_token(self) -> DigitToken:
        found = [t for t in self._candidates(reverse=True) if t.exists]
        if not found:
            raise NoDigitFound(self.line, self.name)
        return max(found, key=lambda t: t.position)


EXTRACTORS: dict[str, type[DigitExtractor]] = {
    LiteralDigits.name: LiteralDigits,
    WordOrDigit.name: WordOrDigit,
}


def get_extractor(name: str) -> type[DigitExtractor]:
    try:
        return EXTRACTORS[name]
    except KeyError:
        raise ValueError(
            f"unknown strategy {name!r} (expected one of: {', '.join(sorted(EXTRACTORS))})"
        ) from None
