"""
Exception types.

Calendar text is hand-curated, so every one of these is treated as fatal
for the calendar being processed. They are ordinary exceptions so that
tests (and the CLI) can catch them.
"""

from __future__ import annotations


class CoursePlanError(Exception):
    """Base class for all errors raised by courseplan."""


class ParseError(CoursePlanError, ValueError):
    """
    A term or course cell does not match the calendar grammar,
    or matches but leaves unconsumed text behind.
    """

    def __init__(self, text: str, position: int, reason: str) -> None:
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"bug: parse of {text!r} failed at position {position}: {reason}")


class PlanError(CoursePlanError):
    """The row stream or a plan does not have the expected structure."""


class ConfigError(CoursePlanError):
    """The calendar configuration file is missing or invalid."""


class ScrapeError(CoursePlanError):
    """The curriculum table could not be located in a calendar page."""
