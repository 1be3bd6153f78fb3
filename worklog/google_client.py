"""Google Calendar API wrapper.

Handles API client initialization and event insertion.
This module isolates all Calendar-specific code so the runner logic stays clean.
"""

import logging
from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from worklog.errors import EventInsertError

logger = logging.getLogger(__name__)


class CalendarClient:
    """Thin wrapper over the Calendar v3 events resource."""

    def __init__(
        self,
        creds: Credentials,
        calendar_id: str = "primary",
        service: Any = None,
    ) -> None:
        """Initialize the CalendarClient.

        Args:
            creds: Authorized Google OAuth credentials.
            calendar_id: Calendar that receives new events.
            service: Prebuilt Calendar service; built from creds when omitted.
        """
        self.calendar_id = calendar_id
        self.service = service or build("calendar", "v3", credentials=creds, cache_discovery=False)

    def insert_event(self, body: dict[str, Any]) -> dict[str, Any]:
        """Create an event in the configured calendar.

        Args:
            body: Event body as produced by event_builder.build_event().

        Returns:
            The created event resource returned by the API.

        Raises:
            EventInsertError: If the API call fails.
        """
        logger.info(
            "Inserting event '%s' into calendar '%s' (%s to %s)",
            body.get("summary", ""),
            self.calendar_id,
            body.get("start", {}).get("dateTime", ""),
            body.get("end", {}).get("dateTime", ""),
        )
        try:
            event = (
                self.service.events()
                .insert(calendarId=self.calendar_id, body=body)
                .execute()
            )
        except HttpError as e:
            raise EventInsertError(f"Unable to create event: {e}") from e
        except (GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
            # Network failure or a token that can no longer be refreshed
            raise EventInsertError(f"Unable to create event: {e}") from e

        logger.info("Created event %s", event.get("id", "(unknown id)"))
        return event
