"""
Unit tests for turning course cells into course names.

Naming rules:
- a course is "DEPT NUMBER"
- a lone elective is unnumbered ("Elective", "Communication Elective")
- several electives are numbered from 1 ("Elective 1", "Elective 2", ...)
"""

import unittest

from courseplan.expand import course_names, elective_names, extract_courses
from courseplan.model import Course, Electives, Footnote


class TestElectiveNames(unittest.TestCase):
    def test_single_untyped(self) -> None:
        self.assertEqual(elective_names(1), ["Elective"])

    def test_single_typed(self) -> None:
        self.assertEqual(elective_names(1, "Communication"), ["Communication Elective"])

    def test_several_untyped(self) -> None:
        self.assertEqual(elective_names(2), ["Elective 1", "Elective 2"])

    def test_several_typed(self) -> None:
        self.assertEqual(
            elective_names(3, "Communication"),
            ["Communication Elective 1", "Communication Elective 2", "Communication Elective 3"],
        )

    def test_zero_slots_rejected(self) -> None:
        with self.assertRaises(ValueError):
            elective_names(0)


class TestCourseNames(unittest.TestCase):
    def test_course_drops_descriptive_fields(self) -> None:
        entry = Course(
            department_code="CS",
            course_number="247",
            title="Software Engineering Principles",
            footnote=Footnote.LAB_NOT_SCHEDULED,
            notes=(1, 2),
        )
        self.assertEqual(course_names(entry), ["CS 247"])

    def test_electives_entry(self) -> None:
        self.assertEqual(course_names(Electives(slots=2, notes=(1,))), ["Elective 1", "Elective 2"])


class TestExtractCourses(unittest.TestCase):
    def test_cells(self) -> None:
        cases = {
            "CS 137\u00a0Programming Principles": ["CS 137"],
            "TPM 000 CR/NCR": ["TPM 000"],
            "Communication Elective (see note 6)": ["Communication Elective"],
            "Elective": ["Elective"],
            "Five Electives (see notes 1 and 2)": [
                "Elective 1",
                "Elective 2",
                "Elective 3",
                "Elective 4",
                "Elective 5",
            ],
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(extract_courses(text), expected)


if __name__ == "__main__":
    unittest.main()
