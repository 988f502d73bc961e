"""
Building a course plan template from the rows of the curriculum table.

Rows come in two shapes (cell text only, markup already stripped):
- term header row:   [term, course, _, _, _]
- continuation row:  [course, _, _, _] or [course]

A new term starts at every header row; continuation rows add courses to the
most recent term. Row order matters, so rows are processed strictly in
sequence.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from courseplan.errors import PlanError
from courseplan.expand import extract_courses
from courseplan.model import Plan, Term, TermCourse
from courseplan.term_entry import parse_term_entry

logger = logging.getLogger(__name__)

TERM_ROW_CELLS = 5
CONTINUATION_ROW_CELLS = (1, 4)


def _term_courses(text: str) -> list[TermCourse]:
    return [TermCourse(name=name) for name in extract_courses(text)]


def build_plan(rows: Iterable[Sequence[str]], first_term_year: int) -> Plan:
    """
    Build a Plan from table rows.

    first_term_year is the calendar year of the first term listed. The year
    is advanced every time a Winter term starts.
    """
    plan = Plan()
    current_term: Optional[Term] = None
    year = first_term_year

    for index, cells in enumerate(rows):
        if len(cells) == TERM_ROW_CELLS:
            # Push the previous term before opening a new one
            if current_term is not None:
                plan.terms.append(current_term)

            term_entry = parse_term_entry(cells[0])
            if term_entry.is_calendar_year_start():
                year += 1

            current_term = Term(
                name=term_entry.format_with_year(year),
                courses=_term_courses(cells[1]),
            )
            logger.debug("Row %d: opened term %s", index, current_term.name)

        elif len(cells) in CONTINUATION_ROW_CELLS:
            if current_term is None:
                raise PlanError(f"Row {index} adds courses before any term header: {list(cells)!r}")
            current_term.courses.extend(_term_courses(cells[0]))

        else:
            raise PlanError(f"Row {index} has {len(cells)} cells, expected 1, 4 or 5: {list(cells)!r}")

    # Push the last term into the plan
    if current_term is not None:
        plan.terms.append(current_term)

    return plan
