from __future__ import annotations

import pathlib
import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Tuple

import yaml

from .config import DATE_FORMATS_TO_TRY


def natural_key(s: str):
    return [int(t) if t.isdigit() else t for t in re.split(r'(\d+)', s.lower())]


def read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def _parse_date_string(s: str) -> Optional[datetime]:
    s = s.strip().strip('"').strip("'")
    if not s:
        return None
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        pass
    for fmt in DATE_FORMATS_TO_TRY:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return None


def coerce_datetime(v) -> Optional[datetime]:
    """
    Turn a frontmatter date value into a naive datetime.

    YAML hands back ``date``, ``datetime`` or plain strings depending on how
    the value was written. Dates become midnight, aware values are moved to
    UTC, so every result compares with every other one.
    Returns None when the value is not date-like.
    """
    if isinstance(v, datetime):
        dt = v
    elif isinstance(v, date):
        dt = datetime.combine(v, time.min)
    elif isinstance(v, str):
        dt = _parse_date_string(v)
        if dt is None:
            return None
    else:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    s = text.lstrip()
    if not s.startswith("---\n") and not s.startswith("---\r\n"):
        return None, text

    text = s
    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            fm = yaml.safe_load(fm_text) or {}
            return fm, body
    return None, text
