"""
Persistent storage for generated course plan templates.

One JSON file is written per template:

    {program}_{year}-{year+1}.json               (non co-op programs)
    {program}_{year}-{year+1}_stream-4.json      (one per co-op stream)

File format:

    {"terms": [{"name": "1A F18", "courses": [{"name": "CS 137"}, ...]}, ...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from courseplan.config import Calendar
from courseplan.model import Plan, WorkStudyStream


def default_output_dir() -> Path:
    """
    Return the default output directory inside the package.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "templates"


def output_filename(calendar: Calendar, stream: Optional[WorkStudyStream] = None) -> str:
    year = calendar.first_term_year
    base = f"{calendar.program}_{year}-{year + 1}"
    if stream is None:
        return f"{base}.json"
    return f"{base}_{stream.label}.json"


def save_plan(plan: Plan, path: str | Path) -> Path:
    """
    Write a plan template as pretty JSON. Creates parent directories if needed.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(plan.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    return out


def load_plan(path: str | Path) -> Plan:
    """
    Load a plan template written by save_plan().
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Plan.from_dict(data)
