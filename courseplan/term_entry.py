"""
Parsing of term header cells in the Academic Curriculum table.

Term entries follow this grammar:

    term        := term_code season
    term_code   := "1A" | "1B" | "2A" | "2B" | "3A" | "3B" | "4A" | "4B"
    season      := "Fall" | "Winter" | "Spring"

Whitespace is allowed around and between the two tokens, but never inside
a term code. Term headers are a closed, hand-curated vocabulary, so any
mismatch raises ParseError.
"""

from __future__ import annotations

from courseplan.model import Season, TermCode, TermEntry
from courseplan.scanner import Scanner, parse_complete

TERM_CODES = [(code.value, code) for code in TermCode]
SEASONS = [(season.value, season) for season in Season]


def _term_entry(s: Scanner) -> TermEntry:
    s.skip_ws()
    code = s.alt(TERM_CODES, "a term code (1A..4B)")
    s.skip_ws()
    season = s.alt(SEASONS, "a season (Fall, Winter, Spring)")
    s.skip_ws()
    return TermEntry(code=code, season=season)


def parse_term_entry(text: str) -> TermEntry:
    """
    Parse a term header such as "1A Fall" into a TermEntry.
    """
    return parse_complete(text, _term_entry)
