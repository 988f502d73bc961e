"""
Co-op term insertion.

Co-op programs alternate study terms with work terms. Given the 8 academic
terms of a plan, build the 14-term sequence for a work/study stream:

    stream 4:  A1 C1 A2 C2 A3 C3 A4 C4 A5 C5 A6 C6 A7 A8
    stream 8:  A1 A2 C1 A3 C2 A4 C3 A5 C4 A6 C5 A7 C6 A8

See https://uwaterloo.ca/engineering/future-undergraduate-students/co-op-experience/co-op-studywork-sequences
"""

from __future__ import annotations

import copy
from typing import Dict, List, Sequence, Tuple

from courseplan.errors import PlanError
from courseplan.model import Plan, Term, TermCourse, WorkStudyStream

ACADEMIC_TERMS = 8

# ("A", i) = academic term i, ("C", n) = co-op term n (both 1-based)
STREAM_PATTERNS: Dict[WorkStudyStream, List[Tuple[str, int]]] = {
    WorkStudyStream.FOUR: [
        ("A", 1), ("C", 1),
        ("A", 2), ("C", 2),
        ("A", 3), ("C", 3),
        ("A", 4), ("C", 4),
        ("A", 5), ("C", 5),
        ("A", 6), ("C", 6),
        ("A", 7),
        ("A", 8),
    ],
    WorkStudyStream.EIGHT: [
        ("A", 1),
        ("A", 2), ("C", 1),
        ("A", 3), ("C", 2),
        ("A", 4), ("C", 3),
        ("A", 5), ("C", 4),
        ("A", 6), ("C", 5),
        ("A", 7), ("C", 6),
        ("A", 8),
    ],
}


def coop_term(num: int, pd_courses: Sequence[str]) -> Term:
    """
    Co-op term number `num`, with the matching PD course if one is configured.
    """
    courses = [TermCourse(name=f"COOP {num}")]
    if num - 1 < len(pd_courses):
        courses.append(TermCourse(name=pd_courses[num - 1]))
    # TODO: name co-op terms with their season and year ("Co-op 1 W19")
    return Term(name=f"Co-op {num}", courses=courses)


def insert_coop_terms(plan: Plan, stream: WorkStudyStream, pd_courses: Sequence[str] = ()) -> Plan:
    """
    Return a new 14-term plan with co-op terms inserted for `stream`.
    The input plan is left untouched.
    """
    terms = plan.terms
    if len(terms) != ACADEMIC_TERMS:
        raise PlanError(f"Co-op insertion needs exactly {ACADEMIC_TERMS} academic terms, got {len(terms)}")

    out: List[Term] = []
    for kind, num in STREAM_PATTERNS[stream]:
        if kind == "A":
            out.append(copy.deepcopy(terms[num - 1]))
        else:
            out.append(coop_term(num, pd_courses))

    return Plan(terms=out)
