"""
Turning parsed course cells into course names for a term.

A Course becomes "DEPT NUMBER" (title, footnote and notes are descriptive
only). Elective slots become one placeholder name per slot; several slots of
the same kind are numbered so that they stay distinct within a term.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from courseplan.course_entry import parse_course_entry
from courseplan.model import Course, CourseEntry, Electives

logger = logging.getLogger(__name__)


def elective_names(slots: int, etype: Optional[str] = None) -> List[str]:
    """
    Names for N elective slots:

        elective_names(1)                  -> ["Elective"]
        elective_names(1, "Communication") -> ["Communication Elective"]
        elective_names(2)                  -> ["Elective 1", "Elective 2"]
    """
    if slots < 1:
        raise ValueError(f"Elective slot count must be positive, got {slots}")

    # Only include the type of the elective if it was provided
    prefix = f"{etype} " if etype is not None else ""

    # Do not number a lone elective
    if slots == 1:
        return [f"{prefix}Elective"]
    return [f"{prefix}Elective {i}" for i in range(1, slots + 1)]


def course_names(entry: CourseEntry) -> List[str]:
    if isinstance(entry, Course):
        return [f"{entry.department_code} {entry.course_number}"]
    if isinstance(entry, Electives):
        return elective_names(entry.slots, entry.etype)
    raise TypeError(f"Unknown course entry: {entry!r}")


def extract_courses(text: str) -> List[str]:
    """
    Parse one course cell and return the course names it contributes.
    """
    entry = parse_course_entry(text)
    names = course_names(entry)
    logger.debug("%r -> %s", text, names)
    return names
