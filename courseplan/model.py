"""
Central data model definitions used across the project.

This module defines the canonical structure of parsed calendar entries and
course plan templates so that:
- the grammars, the plan builder and the co-op logic share the same types
- the closed vocabularies (term codes, seasons, footnotes) are enums
- the JSON output shape is defined in exactly one place
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Term headers
# ---------------------------------------------------------------------------


class TermCode(Enum):
    """
    One of the 8 undergraduate term slots (level 1-4, sub-term A/B).
    """

    T1A = "1A"
    T1B = "1B"
    T2A = "2A"
    T2B = "2B"
    T3A = "3A"
    T3B = "3B"
    T4A = "4A"
    T4B = "4B"

    def __str__(self) -> str:
        return self.value


class Season(Enum):
    FALL = "Fall"
    WINTER = "Winter"
    SPRING = "Spring"

    @property
    def short(self) -> str:
        return self.value[0]


@dataclass(frozen=True)
class TermEntry:
    """
    Represents a term header cell, e.g. "1A Fall".
    """

    code: TermCode
    season: Season

    def is_calendar_year_start(self) -> bool:
        # Winter is the first term of a calendar year
        return self.season is Season.WINTER

    def format_with_year(self, year: int) -> str:
        # Two-digit year, wraps after 2099
        return f"{self.code} {self.season.short}{year % 100:02d}"


# ---------------------------------------------------------------------------
# Course cells
# ---------------------------------------------------------------------------


class Footnote(Enum):
    """
    Annotation glyphs printed after a course title in the calendar.
    """

    # * = Alternate weeks
    ALTERNATE_WEEKS = "*"
    # ** = One hour seminar per week
    ONE_HOUR_SEMINAR_PER_WEEK = "**"
    # *** = Laboratory is not scheduled, students find time in open hours
    LAB_NOT_SCHEDULED = "***"
    # + = Contact hours for the tutorial or laboratory are unknown
    TUT_OR_LAB_UNKNOWN = "+"


@dataclass(frozen=True)
class Course:
    """
    A concrete course listing, e.g. "CS 137 Programming Principles".
    """

    department_code: str
    course_number: str
    title: Optional[str] = None
    credit_only: bool = False
    footnote: Optional[Footnote] = None
    notes: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Electives:
    """
    One or more elective slots, e.g. "Two Electives (see notes 1 and 2)".
    """

    slots: int = 1
    etype: Optional[str] = None
    notes: Tuple[int, ...] = ()


CourseEntry = Union[Course, Electives]


# ---------------------------------------------------------------------------
# Co-op streams
# ---------------------------------------------------------------------------


class WorkStudyStream(Enum):
    """
    Co-op work/study sequence, named by the config value ("4" or "8").
    """

    FOUR = "4"
    EIGHT = "8"

    @property
    def label(self) -> str:
        return f"stream-{self.value}"

    def __str__(self) -> str:
        return self.label


# ---------------------------------------------------------------------------
# Course plan templates (output side)
# ---------------------------------------------------------------------------


@dataclass
class TermCourse:
    name: str


@dataclass
class Term:
    name: str
    courses: List[TermCourse] = field(default_factory=list)

    def course_names(self) -> List[str]:
        return [c.name for c in self.courses]


@dataclass
class Plan:
    """
    An ordered list of terms, as written to the template JSON files.
    """

    terms: List[Term] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "terms": [
                {"name": t.name, "courses": [{"name": c.name} for c in t.courses]}
                for t in self.terms
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Plan":
        return cls(
            terms=[
                Term(
                    name=str(t["name"]),
                    courses=[TermCourse(name=str(c["name"])) for c in t.get("courses", [])],
                )
                for t in data.get("terms", [])
            ]
        )
