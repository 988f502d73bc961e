"""
Parsing of a single course cell in the Academic Curriculum table.

Course entries follow roughly this grammar:

    course_entry   := course_listing | elective_slots
    course_listing := dept_code course_number credit_only? title? footnote? notes?
    dept_code      := uppercase+
    course_number  := digit+
    credit_only    := "CR/NCR"
    title          := (letter | digit | whitespace | "-" | ":")+
    footnote       := "***" | "**" | "*" | "+"
    notes          := "(see note" "s"? nat ("," nat)* (","? "and" nat)? ")"
    elective_slots := number_word? etype? "Elective" "s"? notes?
    number_word    := "One" | "Two" | ... | "Ten"
    etype          := "Communication"

Whitespace (including &nbsp;) is optional between fields but may not split
a literal such as "Electives" or "(see notes".

Important rules:
- course_listing is tried first; elective_slots only if it fails outright
- footnotes are matched longest first ("***" before "**" before "*")
- the whole cell must be consumed, otherwise ParseError is raised
"""

from __future__ import annotations

from typing import List

from courseplan.model import Course, CourseEntry, Electives, Footnote
from courseplan.scanner import NoMatch, Scanner, is_ascii_digit, parse_complete


# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------

# Order matters: a shorter marker is a prefix of the longer ones
FOOTNOTES = [
    ("***", Footnote.LAB_NOT_SCHEDULED),
    ("**", Footnote.ONE_HOUR_SEMINAR_PER_WEEK),
    ("*", Footnote.ALTERNATE_WEEKS),
    ("+", Footnote.TUT_OR_LAB_UNKNOWN),
]

NUMBER_WORDS = [
    ("One", 1),
    ("Two", 2),
    ("Three", 3),
    ("Four", 4),
    ("Five", 5),
    ("Six", 6),
    ("Seven", 7),
    ("Eight", 8),
    ("Nine", 9),
    ("Ten", 10),
]

ELECTIVE_TYPES = [("Communication", "Communication")]

CREDIT_ONLY = "CR/NCR"


def _is_title_char(ch: str) -> bool:
    return ch.isalpha() or is_ascii_digit(ch) or ch.isspace() or ch in "-:"


# ---------------------------------------------------------------------------
# Notes block
# ---------------------------------------------------------------------------


def _notes(s: Scanner) -> List[int]:
    """
    Parses "(see note 5)", "(see notes 1 and 2)", "(see notes 1, 2, and 3)".
    """
    s.tag("(see note")
    s.char("s")

    s.skip_ws()
    result = [s.nat()]

    def more() -> int:
        s.skip_ws()
        s.tag(",")
        s.skip_ws()
        return s.nat()

    while True:
        value = s.opt(more)
        if value is None:
            break
        result.append(value)

    def last() -> int:
        s.skip_ws()
        s.char(",")
        s.skip_ws()
        s.tag("and")
        s.skip_ws()
        return s.nat()

    end = s.opt(last)
    if end is not None:
        result.append(end)

    s.skip_ws()
    s.tag(")")
    return result


# ---------------------------------------------------------------------------
# Course listing
# ---------------------------------------------------------------------------


def _course_listing(s: Scanner) -> Course:
    s.skip_ws()
    department_code = s.take_while1(str.isupper, "a department code")
    s.skip_ws()
    course_number = s.digits()

    s.skip_ws()
    credit_only = s.opt(lambda: s.tag(CREDIT_ONLY)) is not None

    s.skip_ws()
    title = s.opt(lambda: s.take_while1(_is_title_char, "a title"))
    if title is not None:
        title = title.strip() or None

    s.skip_ws()
    footnote = s.opt(lambda: s.alt(FOOTNOTES, "a footnote"))

    s.skip_ws()
    notes = s.opt(lambda: _notes(s))
    s.skip_ws()

    return Course(
        department_code=department_code,
        course_number=course_number,
        title=title,
        credit_only=credit_only,
        footnote=footnote,
        notes=tuple(notes or ()),
    )


# ---------------------------------------------------------------------------
# Elective slots
# ---------------------------------------------------------------------------


def _elective_slots(s: Scanner) -> Electives:
    s.skip_ws()
    slots = s.opt(lambda: s.alt(NUMBER_WORDS, "a number word"))

    s.skip_ws()
    etype = s.opt(lambda: s.alt(ELECTIVE_TYPES, "an elective type"))

    s.skip_ws()
    s.tag("Elective")
    s.char("s")

    s.skip_ws()
    notes = s.opt(lambda: _notes(s))
    s.skip_ws()

    return Electives(
        # Just the word "Elective" means one elective
        slots=slots if slots is not None else 1,
        etype=etype,
        notes=tuple(notes or ()),
    )


def _course_entry(s: Scanner) -> CourseEntry:
    start = s.pos
    try:
        return _course_listing(s)
    except NoMatch:
        s.pos = start
    return _elective_slots(s)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_course_entry(text: str) -> CourseEntry:
    """
    Parse one course cell into a Course or an Electives entry.

    Raises ParseError if the text matches neither shape or if anything is
    left over after the match.
    """
    return parse_complete(text, _course_entry)
