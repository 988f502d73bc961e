"""
Fetching a calendar page and extracting the Academic Curriculum table.

The calendar page lays out .MainContent as one long flat list of elements
(no sections), so the table is found by walking the children linearly:
the "Academic Curriculum" heading, then the second table after it.
"""

from __future__ import annotations

import logging
from typing import List

import requests
from bs4 import BeautifulSoup, Tag

from courseplan.errors import ScrapeError

logger = logging.getLogger(__name__)

CURRICULUM_HEADING = "Academic Curriculum"

# The first table after the heading is the legend, the second the curriculum
CURRICULUM_TABLE_INDEX = 2


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


def fetch_calendar(url: str, timeout: float = 30) -> str:
    """
    Download one undergraduate calendar page and return its HTML.
    """
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


# ---------------------------------------------------------------------------
# Table extraction
# ---------------------------------------------------------------------------


def _main_content(soup: BeautifulSoup) -> Tag:
    found = soup.select(".MainContent")
    if len(found) != 1:
        raise ScrapeError(f"Expected exactly one .MainContent element, found {len(found)}")
    return found[0]


def _curriculum_table(main_content: Tag) -> Tag:
    children = [c for c in main_content.children if isinstance(c, Tag)]

    # Advance until we find the Academic Curriculum heading
    for i, child in enumerate(children):
        if child.name == "h3" and child.get_text(strip=True) == CURRICULUM_HEADING:
            rest = children[i + 1:]
            break
    else:
        raise ScrapeError(f"No '{CURRICULUM_HEADING}' heading found")

    tables = [c for c in rest if c.name == "table"]
    if len(tables) < CURRICULUM_TABLE_INDEX:
        raise ScrapeError(
            f"Expected at least {CURRICULUM_TABLE_INDEX} tables after '{CURRICULUM_HEADING}', found {len(tables)}"
        )
    return tables[CURRICULUM_TABLE_INDEX - 1]


def extract_rows(html: str) -> List[List[str]]:
    """
    Return the cell text of every row in the curriculum table.

    Each row is a list of the text of its <td> cells, in order. Rows without
    <td> cells (header rows) are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = _curriculum_table(_main_content(soup))

    # html.parser does not invent a <tbody> if the page has none
    body = table.find("tbody") or table

    rows: List[List[str]] = []
    for tr in body.find_all("tr", recursive=False):
        cells = [td.get_text() for td in tr.find_all("td", recursive=False)]
        if not cells:
            continue
        rows.append(cells)

    logger.debug("Extracted %d rows from curriculum table", len(rows))
    return rows
