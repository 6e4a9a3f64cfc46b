import logging
import re
from datetime import date, datetime
from typing import Optional, Union

from .. import config

# "YYYY:MM:DD" as written by EXIF; only the first occurrence is rewritten
_EXIF_DATE_RE = re.compile(r"(\d{4}):(\d{2}):(\d{2})")
_LEADING_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})")


def normalize_capture_date(raw: Optional[str]) -> str:
    """
    Converts an EXIF date such as "2025:04:16 10:20:30" into "2025/04/16".

    Returns the sentinel for empty input or anything that does not parse
    into a real calendar date. Never raises.
    """
    if not raw:
        return config.SENTINEL

    try:
        normalized = _EXIF_DATE_RE.sub(r"\1-\2-\3", str(raw), count=1).strip()
        parsed = _parse_calendar_date(normalized)
        if parsed is None:
            return config.SENTINEL

        logging.debug(f"Normalized date string: {normalized}")
        logging.debug(f"Parsed date: year={parsed.year} month={parsed.month} day={parsed.day}")

        return f"{parsed.year:04d}/{parsed.month:02d}/{parsed.day:02d}"
    except Exception as e:
        logging.error(f"Error formatting date {raw!r}: {e}")
        return config.SENTINEL


def _parse_calendar_date(text: str) -> Optional[Union[date, datetime]]:
    """
    Tries progressively looser readings of an ISO-style date string.
    Timezone offsets are kept as written, never converted.
    """
    # 1. Full ISO (date only, date + time, fractions, offsets)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    # 2. Plain "YYYY-MM-DD HH:MM:SS" with sub-seconds trimmed
    try:
        return datetime.strptime(text.split(".")[0], "%Y-%m-%d %H:%M:%S")
    except ValueError:
        pass

    # 3. Leading calendar date followed by data we don't understand
    match = _LEADING_DATE_RE.match(text)
    if match:
        try:
            return date.fromisoformat(match.group(1))
        except ValueError:
            pass

    return None
