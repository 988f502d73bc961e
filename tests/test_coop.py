"""
Unit tests for co-op term insertion.

Patterns (A = academic term, C = co-op term):
- stream 4: A1 C1 A2 C2 A3 C3 A4 C4 A5 C5 A6 C6 A7 A8
- stream 8: A1 A2 C1 A3 C2 A4 C3 A5 C4 A6 C5 A7 C6 A8
"""

import unittest

from courseplan.coop import coop_term, insert_coop_terms
from courseplan.errors import PlanError
from courseplan.model import Plan, Term, TermCourse, WorkStudyStream


def base_plan(n: int = 8) -> Plan:
    return Plan(terms=[Term(name=f"T{i}", courses=[TermCourse(name=f"C{i}")]) for i in range(1, n + 1)])


class TestInsertCoopTerms(unittest.TestCase):
    def test_stream_four(self) -> None:
        plan = insert_coop_terms(base_plan(), WorkStudyStream.FOUR)
        self.assertEqual(
            [t.name for t in plan.terms],
            [
                "T1", "Co-op 1", "T2", "Co-op 2", "T3", "Co-op 3", "T4",
                "Co-op 4", "T5", "Co-op 5", "T6", "Co-op 6", "T7", "T8",
            ],
        )

    def test_stream_eight(self) -> None:
        plan = insert_coop_terms(base_plan(), WorkStudyStream.EIGHT)
        self.assertEqual(
            [t.name for t in plan.terms],
            [
                "T1", "T2", "Co-op 1", "T3", "Co-op 2", "T4", "Co-op 3",
                "T5", "Co-op 4", "T6", "Co-op 5", "T7", "Co-op 6", "T8",
            ],
        )

    def test_coop_courses_in_order(self) -> None:
        for stream in WorkStudyStream:
            with self.subTest(stream=stream):
                plan = insert_coop_terms(base_plan(), stream)
                self.assertEqual(len(plan.terms), 14)
                coop = [name for t in plan.terms for name in t.course_names() if name.startswith("COOP")]
                self.assertEqual(coop, [f"COOP {n}" for n in range(1, 7)])

    def test_pd_courses_fill_first_coop_terms(self) -> None:
        plan = insert_coop_terms(base_plan(), WorkStudyStream.FOUR, ["PD 1", "PD 2"])
        coop_terms = [t for t in plan.terms if t.name.startswith("Co-op")]
        self.assertEqual(coop_terms[0].course_names(), ["COOP 1", "PD 1"])
        self.assertEqual(coop_terms[1].course_names(), ["COOP 2", "PD 2"])
        for t in coop_terms[2:]:
            self.assertEqual(len(t.courses), 1)

    def test_academic_terms_are_copied(self) -> None:
        base = base_plan()
        plan = insert_coop_terms(base, WorkStudyStream.EIGHT)
        plan.terms[0].courses.append(TermCourse(name="EXTRA"))
        self.assertEqual(base.terms[0].course_names(), ["C1"])
        self.assertEqual(len(base.terms), 8)

    def test_requires_eight_terms(self) -> None:
        for n in (7, 9):
            with self.subTest(n=n):
                with self.assertRaises(PlanError):
                    insert_coop_terms(base_plan(n), WorkStudyStream.FOUR)


class TestCoopTerm(unittest.TestCase):
    def test_without_pd(self) -> None:
        term = coop_term(3, [])
        self.assertEqual(term.name, "Co-op 3")
        self.assertEqual(term.course_names(), ["COOP 3"])

    def test_with_pd(self) -> None:
        term = coop_term(2, ["PD 1", "PD 2", "PD 3"])
        self.assertEqual(term.course_names(), ["COOP 2", "PD 2"])


if __name__ == "__main__":
    unittest.main()
