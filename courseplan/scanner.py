"""
Small recursive-descent helpers shared by the term and course grammars.

A Scanner walks over one cell of calendar text. Field parsers call the
matching methods below; a failed match raises NoMatch, which alternation
and optional fields catch after rewinding the position.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple, TypeVar

from courseplan.errors import ParseError

T = TypeVar("T")

NBSP = "\u00a0"


def is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def normalize(text: str) -> str:
    """
    Trim a cell and turn non-breaking spaces (&nbsp;) into ordinary spaces.
    """
    return text.replace(NBSP, " ").strip()


class NoMatch(Exception):
    """Raised by a field parser that does not match at the current position."""

    def __init__(self, position: int, expected: str) -> None:
        super().__init__(f"expected {expected} at position {position}")
        self.position = position
        self.expected = expected


class Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        # Furthest failure seen so far, used for error messages
        self.furthest: Optional[NoMatch] = None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def rest(self) -> str:
        return self.text[self.pos:]

    def fail(self, expected: str) -> NoMatch:
        err = NoMatch(self.pos, expected)
        if self.furthest is None or err.position >= self.furthest.position:
            self.furthest = err
        return err

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def tag(self, literal: str) -> str:
        """Match an exact literal. Whitespace is never allowed inside it."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return literal
        raise self.fail(repr(literal))

    def char(self, ch: str) -> Optional[str]:
        """Optionally match a single character, returning None if absent."""
        if self.text.startswith(ch, self.pos):
            self.pos += 1
            return ch
        return None

    def take_while1(self, pred: Callable[[str], bool], expected: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and pred(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.fail(expected)
        return self.text[start:self.pos]

    def digits(self) -> str:
        return self.take_while1(is_ascii_digit, "digits")

    def nat(self) -> int:
        return int(self.digits())

    def opt(self, parser: Callable[[], T]) -> Optional[T]:
        """
        Try a parser once; on failure rewind and return None.
        """
        start = self.pos
        try:
            return parser()
        except NoMatch:
            self.pos = start
            return None

    def alt(self, choices: Sequence[Tuple[str, T]], expected: str) -> T:
        """
        Ordered choice between literal tags. The first tag that matches wins,
        so longer tags must come before their prefixes.
        """
        for literal, value in choices:
            if self.text.startswith(literal, self.pos):
                self.pos += len(literal)
                return value
        raise self.fail(expected)


def parse_complete(text: str, entry: Callable[[Scanner], T]) -> T:
    """
    Run a grammar on normalized text and require that it consumes everything.
    """
    normalized = normalize(text)
    # Positions are reported against the raw cell, before leading whitespace was trimmed
    offset = len(text) - len(text.replace(NBSP, " ").lstrip())

    scanner = Scanner(normalized)
    try:
        result = entry(scanner)
    except NoMatch as err:
        furthest = scanner.furthest or err
        raise ParseError(text, offset + furthest.position, f"expected {furthest.expected}") from None

    if not scanner.at_end():
        raise ParseError(
            text,
            offset + scanner.pos,
            f"parser did not completely read input, remaining: {scanner.rest()!r}",
        )
    return result
