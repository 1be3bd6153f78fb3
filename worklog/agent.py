"""Work Log Runner - Core logic.

Authenticates, asks the user for today's time range and a summary, and
records the result as one event in the configured calendar.
"""

import logging
from datetime import date
from typing import Any, Callable

from google.oauth2.credentials import Credentials

from config.settings import Settings
from worklog.auth import Authenticator
from worklog.errors import WorklogError
from worklog.event_builder import build_event
from worklog.google_client import CalendarClient

logger = logging.getLogger(__name__)

TIME_RANGE_PROMPT = "Enter a Start time and End Time (HH:mm-HH:mm): "
SUMMARY_PROMPT = "Enter a Summary: "


class WorkLogRunner:
    """Runs one work log session from authentication to event insertion."""

    def __init__(
        self,
        settings: Settings,
        authenticator: Authenticator | None = None,
        client_factory: Callable[[Credentials, str], CalendarClient] | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        today: date | None = None,
    ) -> None:
        """Initialize the WorkLogRunner.

        Args:
            settings: Application settings.
            authenticator: Source of credentials; built from settings when omitted.
            client_factory: Builds a CalendarClient from credentials and a calendar ID.
            input_func: Reads one line of console input given a prompt.
            output: Writes one line of user-facing text.
            today: Date to log against; defaults to the current local date.
        """
        self.settings = settings
        self.input_func = input_func
        self.authenticator = authenticator or Authenticator(
            settings, input_func=input_func, output=output
        )
        self.client_factory = client_factory or CalendarClient
        self.today = today

    def run(self) -> dict[str, Any]:
        """Record one work log.

        Returns:
            The event resource created by the Calendar API.

        Raises:
            WorklogError: On any failure; nothing is retried.
        """
        creds = self.authenticator.obtain_credentials()
        client = self.client_factory(creds, self.settings.calendar_id)

        time_range = self._read(TIME_RANGE_PROMPT)
        summary = self._read(SUMMARY_PROMPT)

        log_date = (self.today or date.today()).strftime("%Y-%m-%d")
        body = build_event(summary, time_range, log_date)
        logger.debug("Event body: %s", body)

        return client.insert_event(body)

    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt).strip()
        except EOFError as e:
            raise WorklogError(f"No input for prompt: {prompt.strip()}") from e
