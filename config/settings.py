"""Global Settings - Loads configuration from environment variables.

Centralizes all configuration so the work log modules don't read env vars directly.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application-wide settings loaded from environment variables."""

    # Google Calendar
    google_credentials_path: str = "credentials.json"
    google_token_path: str = "token.json"
    calendar_id: str = "primary"

    # OAuth; empty redirect means the first redirect_uris entry of credentials.json
    oauth_redirect_uri: str = ""
    scopes: list[str] = field(
        default_factory=lambda: ["https://www.googleapis.com/auth/calendar.events"]
    )


def load_settings() -> Settings:
    """Load settings from environment variables with sensible defaults.

    Environment variables:
        GOOGLE_CALENDAR_CREDENTIALS_PATH: Path to Google OAuth credentials.json
        GOOGLE_CALENDAR_TOKEN_PATH: Path to saved OAuth token.json
        WORKLOG_CALENDAR_ID: Calendar that receives the work log (default: "primary")
        OAUTH_REDIRECT_URI: Redirect URI override for the console authorization flow

    Returns:
        A populated Settings instance.
    """
    return Settings(
        google_credentials_path=os.getenv("GOOGLE_CALENDAR_CREDENTIALS_PATH", "credentials.json"),
        google_token_path=os.getenv("GOOGLE_CALENDAR_TOKEN_PATH", "token.json"),
        calendar_id=os.getenv("WORKLOG_CALENDAR_ID", "primary").strip() or "primary",
        oauth_redirect_uri=os.getenv("OAUTH_REDIRECT_URI", "").strip(),
    )
