"""
CLI (Command Line Interface).

    courseplan run [--config calendars.json] [--out-dir DIR]
    courseplan course "<course cell text>"
    courseplan term "<term cell text>" --year 2018

Note:
- `run` scrapes every calendar in the config and writes one JSON template
  per program (or one per co-op stream)
- `course` and `term` parse a single cell, handy when a new calendar
  breaks the grammar
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional

import requests

from courseplan.config import Calendar, load_config
from courseplan.coop import insert_coop_terms
from courseplan.course_entry import parse_course_entry
from courseplan.errors import CoursePlanError
from courseplan.expand import course_names
from courseplan.log import setup_logging
from courseplan.plan import build_plan
from courseplan.scrape import extract_rows, fetch_calendar
from courseplan.storage import default_output_dir, output_filename, save_plan
from courseplan.term_entry import parse_term_entry

logger = logging.getLogger(__name__)


def process_calendar(
    calendar: Calendar,
    out_dir: Path,
    fetch: Callable[[str], str] = fetch_calendar,
) -> List[Path]:
    """
    Scrape one calendar and write its plan template(s).

    Every template is built before anything is written, and files already
    written are removed if a later write fails, so a calendar that fails part
    way leaves no output behind.
    """
    logger.info("Fetching '%s'", calendar.url)
    html = fetch(calendar.url)

    logger.info("Extracting information...")
    rows = extract_rows(html)
    plan = build_plan(rows, calendar.first_term_year)

    # Non co-op programs get one template, co-op programs one per stream
    outputs = []
    if not calendar.streams:
        outputs.append((output_filename(calendar), plan))
    for stream in calendar.streams:
        outputs.append((output_filename(calendar, stream), insert_coop_terms(plan, stream, calendar.pd)))

    written: List[Path] = []
    try:
        for filename, template in outputs:
            path = out_dir / filename
            logger.info("Writing output to %s...", path)
            written.append(save_plan(template, path))
    except OSError:
        for path in written:
            logger.warning("Removing partial output %s", path)
            path.unlink(missing_ok=True)
        raise
    return written


def _cmd_run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    out_dir = args.out_dir if args.out_dir is not None else default_output_dir()

    failed = 0
    for calendar in config.calendars:
        try:
            process_calendar(calendar, out_dir)
        except (CoursePlanError, requests.RequestException, OSError) as e:
            logger.error("Calendar '%s' aborted: %s", calendar.program, e)
            failed += 1

    if failed:
        logger.error("%d of %d calendars failed", failed, len(config.calendars))
        return 1

    logger.info("Done.")
    return 0


def _cmd_course(args: argparse.Namespace) -> int:
    entry = parse_course_entry(args.text)
    print(entry)
    for name in course_names(entry):
        print(f"  {name}")
    return 0


def _cmd_term(args: argparse.Namespace) -> int:
    entry = parse_term_entry(args.text)
    print(entry.format_with_year(args.year))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseplan", description="Course plan template scraper")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="Scrape all configured calendars")
    p_run.add_argument("--config", "-c", type=Path, default=None, help="Calendar config JSON file")
    p_run.add_argument("--out-dir", "-o", type=Path, default=None, help="Directory for template JSON files")

    p_course = sub.add_parser("course", help="Parse one course cell")
    p_course.add_argument("text", type=str, help='Cell text (e.g. "CS 137 Programming Principles")')

    p_term = sub.add_parser("term", help="Parse one term header cell")
    p_term.add_argument("text", type=str, help='Cell text (e.g. "1A Fall")')
    p_term.add_argument("--year", "-y", type=int, required=True, help="Calendar year of the term")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    handlers = {
        "run": _cmd_run,
        "course": _cmd_course,
        "term": _cmd_term,
    }
    handler = handlers.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args))
    except CoursePlanError as e:
        logger.error("%s", e)
        raise SystemExit(1)
