"""Shared fixtures for work log tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from google.oauth2.credentials import Credentials

from config.settings import Settings

SCOPES = ["https://www.googleapis.com/auth/calendar.events"]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        google_credentials_path=str(tmp_path / "credentials.json"),
        google_token_path=str(tmp_path / "token.json"),
    )


@pytest.fixture
def creds() -> Credentials:
    return Credentials(
        token="access-123",
        refresh_token="refresh-456",
        token_uri="https://oauth2.googleapis.com/token",
        client_id="client-id.apps.googleusercontent.com",
        client_secret="client-secret",
        scopes=SCOPES,
        # Naive UTC, as google-auth stores it; a token without expiry loads as expired
        expiry=datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=1),
    )


@pytest.fixture
def token_file(settings, creds):
    """Pre-populated, unexpired token cache."""
    path = settings.google_token_path
    with open(path, "w") as f:
        f.write(creds.to_json())
    return path


@pytest.fixture
def client_secrets_file(settings):
    """A minimal installed-app client secrets file."""
    secrets = {
        "installed": {
            "client_id": "client-id.apps.googleusercontent.com",
            "client_secret": "client-secret",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"],
        }
    }
    path = settings.google_credentials_path
    with open(path, "w") as f:
        json.dump(secrets, f)
    return path
