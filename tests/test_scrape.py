"""
Unit tests for locating the curriculum table in a calendar page.

No network access: fetch_calendar is tested with a mocked requests.get.
"""

import unittest
from unittest import mock

from courseplan.errors import ScrapeError
from courseplan.scrape import extract_rows, fetch_calendar

PAGE = """
<html><body>
<div class="MainContent">
  <h2>Software Engineering</h2>
  <p>Intro text.</p>
  <h3>Academic Curriculum</h3>
  <table><tr><td>Legend</td></tr></table>
  <p>Notes about the table.</p>
  <table>
    <tbody>
      <tr><th>Term</th><th>Course</th></tr>
      <tr><td>1A&nbsp;Fall</td><td>CS 137&nbsp;Programming Principles</td><td>3</td><td>0</td><td>2</td></tr>
      <tr><td>Communication Elective (see note 6)</td><td></td><td></td><td></td></tr>
      <tr><td>1B Winter</td><td>CS 138 Introduction to Data Abstraction</td><td>3</td><td>0</td><td>2</td></tr>
      <tr><td>Elective</td></tr>
    </tbody>
  </table>
  <table><tr><td>Unrelated</td></tr></table>
</div>
</body></html>
"""


class TestExtractRows(unittest.TestCase):
    def test_second_table_after_heading(self) -> None:
        rows = extract_rows(PAGE)
        self.assertEqual(len(rows), 4)
        self.assertEqual(len(rows[0]), 5)
        self.assertEqual(rows[0][0], "1A\u00a0Fall")
        self.assertEqual(rows[1][0], "Communication Elective (see note 6)")
        self.assertEqual(rows[3], ["Elective"])

    def test_table_without_tbody(self) -> None:
        page = PAGE.replace("<tbody>", "").replace("</tbody>", "")
        self.assertEqual(len(extract_rows(page)), 4)

    def test_missing_main_content(self) -> None:
        with self.assertRaises(ScrapeError):
            extract_rows("<html><body><h3>Academic Curriculum</h3></body></html>")

    def test_missing_heading(self) -> None:
        with self.assertRaises(ScrapeError):
            extract_rows(PAGE.replace("Academic Curriculum", "Admission"))

    def test_missing_second_table(self) -> None:
        page = '<div class="MainContent"><h3>Academic Curriculum</h3><table></table></div>'
        with self.assertRaises(ScrapeError):
            extract_rows(page)


class TestFetchCalendar(unittest.TestCase):
    def test_returns_page_text(self) -> None:
        with mock.patch("courseplan.scrape.requests.get") as get:
            get.return_value.text = PAGE
            html = fetch_calendar("https://example.org/calendar", timeout=5)

        get.assert_called_once_with("https://example.org/calendar", timeout=5)
        get.return_value.raise_for_status.assert_called_once_with()
        self.assertEqual(html, PAGE)


if __name__ == "__main__":
    unittest.main()
