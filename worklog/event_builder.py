"""Work log event construction.

Turns the typed time range and summary into a Calendar API event body.
Times are always written in Japan Standard Time, which has no DST.
"""

from dataclasses import dataclass
from typing import Any

from worklog.errors import InvalidTimeRangeError

DESCRIPTION = "Working Log"
TIMEZONE = "Asia/Tokyo"
UTC_OFFSET = "+09:00"


@dataclass(frozen=True)
class WorkLog:
    """A single work log entry for one day."""

    summary: str
    description: str
    date: str
    start_time: str
    end_time: str


def split_time_range(time_range: str) -> tuple[str, str]:
    """Split "HH:mm-HH:mm" into its start and end parts.

    Only the number of parts is checked. Each side is passed through as typed,
    so a malformed time is left for the Calendar API to reject.

    Raises:
        InvalidTimeRangeError: If the range does not contain exactly one "-".
    """
    parts = time_range.strip().split("-")
    if len(parts) != 2:
        raise InvalidTimeRangeError(
            f"Time range must look like HH:mm-HH:mm, got: {time_range!r}"
        )
    return parts[0], parts[1]


def build_work_log(summary: str, time_range: str, date: str) -> WorkLog:
    """Build a WorkLog for the given date (YYYY-MM-DD)."""
    start_time, end_time = split_time_range(time_range)
    return WorkLog(
        summary=summary,
        description=DESCRIPTION,
        date=date,
        start_time=start_time,
        end_time=end_time,
    )


def _event_datetime(date: str, time: str) -> dict[str, str]:
    return {
        "dateTime": f"{date}T{time}:00{UTC_OFFSET}",
        "timeZone": TIMEZONE,
    }


def to_event_body(work_log: WorkLog) -> dict[str, Any]:
    """Convert a WorkLog into the body expected by events().insert()."""
    return {
        "summary": work_log.summary,
        "description": work_log.description,
        "start": _event_datetime(work_log.date, work_log.start_time),
        "end": _event_datetime(work_log.date, work_log.end_time),
    }


def build_event(summary: str, time_range: str, date: str) -> dict[str, Any]:
    """Build the Calendar API event body straight from user input."""
    return to_event_body(build_work_log(summary, time_range, date))
