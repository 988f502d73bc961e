"""
Scraper configuration.

The list of calendars to scrape is stored as JSON:

    {
      "calendars": [
        {
          "program": "software-engineering",
          "url": "https://ugradcalendar.uwaterloo.ca/page/ENG-Software-Engineering",
          "first_term_year": 2018,
          "streams": ["4", "8"],
          "pd": ["PD 1", "PD 2", "PD 3"]
        }
      ]
    }

- program: slug used to build the output filename
- first_term_year: calendar year of the first term listed in the table
- streams: co-op work/study streams, one template is written per stream
  (leave empty for non co-op programs)
- pd: PD courses inserted into co-op terms, in order
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from courseplan.errors import ConfigError
from courseplan.model import WorkStudyStream


def _default_config_path() -> Path:
    """
    Return the default path of calendars.json inside the package.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "calendars.json"


# ---------------------------------------------------------------------------
# Configuration models
# ---------------------------------------------------------------------------


class Calendar(BaseModel):
    """Configuration for one undergraduate calendar page."""

    program: str = Field(min_length=1)
    url: str
    first_term_year: StrictInt
    streams: List[WorkStudyStream] = Field(default_factory=list)
    pd: List[str] = Field(default_factory=list)

    @field_validator("program", "url", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("streams", mode="before")
    @classmethod
    def streams_as_text(cls, v: Any) -> Any:
        # Allow "streams": [4, 8] as well as ["4", "8"]
        if isinstance(v, list):
            return [s if isinstance(s, WorkStudyStream) else str(s) for s in v]
        return v

    @field_validator("pd")
    @classmethod
    def strip_pd(cls, v: List[str]) -> List[str]:
        return [x.strip() for x in v]


class ScraperConfig(BaseModel):
    calendars: List[Calendar] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _calendar_name(raw: Any, index: int) -> str:
    if isinstance(raw, dict) and isinstance(raw.get("program"), str) and raw["program"].strip():
        return f"calendar '{raw['program'].strip()}'"
    return f"calendars[{index}]"


def parse_config(data: Any) -> ScraperConfig:
    if not isinstance(data, dict) or not isinstance(data.get("calendars"), list):
        raise ConfigError("Config must be an object with a 'calendars' list")

    calendars: List[Calendar] = []
    for index, raw in enumerate(data["calendars"]):
        try:
            calendars.append(Calendar.model_validate(raw))
        except ValidationError as e:
            raise ConfigError(f"{_calendar_name(raw, index)}: {e}") from e
    return ScraperConfig(calendars=calendars)


def load_config(path: str | Path | None = None) -> ScraperConfig:
    """
    Load and validate the scraper configuration.
    Raises ConfigError if the file is missing or invalid.
    """
    config_path = Path(path) if path is not None else _default_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}") from None
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config {config_path}: {e}") from e
    return parse_config(data)
