"""Google Calendar OAuth Setup.

Run this once to authenticate with Google Calendar and save a token.
Opens your browser for the OAuth consent flow, then saves token.json
for future use by main.py, which then never asks for an authorization code.

Usage:
    python setup_calendar.py
"""

import sys

from config.settings import load_settings
from worklog.auth import Authenticator
from worklog.errors import WorklogError


def main() -> int:
    """Run the OAuth flow and save the token."""
    settings = load_settings()

    print("Starting Google Calendar authentication...")
    print(f"Using credentials from: {settings.google_credentials_path}")
    print()

    try:
        Authenticator(settings).authorize_in_browser()
    except WorklogError as e:
        print(f"ERROR: {e}")
        return 1

    print()
    print(f"Token saved to: {settings.google_token_path}")
    print("You can now run: python main.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
