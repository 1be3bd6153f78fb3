"""Work Log Recorder - Entry Point.

Authenticates with Google Calendar (prompting for an authorization code on
first use), reads a time range and summary from the console, and adds a
"Working Log" event to your calendar for today.

Usage:
    python main.py                     # Log work for today
    python main.py --date 2024-03-01   # Log work for another day
"""

import argparse
import logging
import sys
from datetime import date, datetime

from config.settings import load_settings
from worklog.agent import WorkLogRunner
from worklog.errors import WorklogError

logger = logging.getLogger("main")

SUCCESS_MARKER = "\x1b[32mSUCCESS\x1b[0m"


def parse_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value}")


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and record one work log.

    Returns:
        Process exit status (0 on success, 1 on any failure).
    """
    parser = argparse.ArgumentParser(description="Add a work log event to Google Calendar.")
    parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        help="Day to log in YYYY-MM-DD format (default: today).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = load_settings()
    runner = WorkLogRunner(settings, today=args.date)

    try:
        event = runner.run()
    except WorklogError as e:
        logger.debug("Work log failed", exc_info=True)
        print(f"ERROR: {e}")
        return 1

    logger.info("Event link: %s", event.get("htmlLink", ""))
    print(SUCCESS_MARKER)
    return 0


if __name__ == "__main__":
    sys.exit(main())
