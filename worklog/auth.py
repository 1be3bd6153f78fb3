"""Google OAuth authorization.

Produces Credentials for the Calendar API, reusing the cached token when one
exists and otherwise walking the user through the console authorization-code
flow. The resulting Credentials refresh themselves when the API client uses
them, so callers never deal with bearer headers directly.
"""

import logging
import webbrowser
from typing import Callable

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from config.settings import Settings
from worklog.errors import AuthorizationError, ConfigError
from worklog.token_store import TokenStore

logger = logging.getLogger(__name__)

# Fixed state parameter; the console flow never sees the redirect so it is not checked
STATE_TOKEN = "state-token"


class Authenticator:
    """Loads the cached token or runs the interactive OAuth exchange."""

    def __init__(
        self,
        settings: Settings,
        store: TokenStore | None = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        """Initialize the Authenticator.

        Args:
            settings: Application settings (paths, scopes, redirect URI).
            store: Token cache; defaults to one at settings.google_token_path.
            input_func: Reads one line of console input given a prompt.
            output: Writes one line of user-facing text.
        """
        self.settings = settings
        self.store = store or TokenStore(settings.google_token_path, settings.scopes, output=output)
        self.input_func = input_func
        self.output = output

    def obtain_credentials(self) -> Credentials:
        """Return usable credentials, prompting the user only if nothing is cached.

        Raises:
            ConfigError: If credentials.json is missing or invalid.
            AuthorizationError: If the code exchange or a token refresh fails.
            TokenCacheError: If a new token cannot be saved.
        """
        creds = self.store.load()
        if creds is not None:
            if creds.expired and creds.refresh_token:
                self._refresh(creds)
            return creds

        creds = self._authorize_in_console()
        self.store.save(creds)
        return creds

    def authorize_in_browser(self) -> Credentials:
        """Run the local-server flow in the user's browser and cache the token."""
        flow = self._build_flow()
        try:
            creds = flow.run_local_server(port=0, access_type="offline")
        except (OAuth2Error, requests.RequestException, ValueError) as e:
            raise AuthorizationError(f"Unable to retrieve token from web: {e}") from e
        except (OSError, webbrowser.Error) as e:
            # Port bind failure or no usable browser
            raise AuthorizationError(f"Unable to run the browser authorization flow: {e}") from e
        self.store.save(creds)
        return creds

    def _refresh(self, creds: Credentials) -> None:
        logger.info("Refreshing expired token...")
        try:
            creds.refresh(Request())
        except GoogleAuthError as e:
            raise AuthorizationError(
                f"Unable to refresh token: {e}. Delete {self.store.token_path} to re-authenticate."
            ) from e
        self.store.save(creds)
        logger.info("Token refreshed and saved.")

    def _authorize_in_console(self) -> Credentials:
        flow = self._build_flow()
        flow.redirect_uri = self._console_redirect_uri(flow)
        auth_url, _ = flow.authorization_url(state=STATE_TOKEN, access_type="offline")

        self.output(
            "Go to the following link in your browser then type the authorization code: "
        )
        self.output(auth_url)

        try:
            code = self.input_func("").strip()
        except EOFError as e:
            raise AuthorizationError("Unable to read authorization code: no input") from e
        if not code:
            raise AuthorizationError("Unable to read authorization code: empty input")

        logger.info("Exchanging authorization code for a token")
        try:
            flow.fetch_token(code=code)
        except (OAuth2Error, requests.RequestException, ValueError) as e:
            raise AuthorizationError(f"Unable to retrieve token from web: {e}") from e

        return flow.credentials

    def _console_redirect_uri(self, flow: InstalledAppFlow) -> str:
        """Configured redirect URI, else the first one registered for the client."""
        if self.settings.oauth_redirect_uri:
            return self.settings.oauth_redirect_uri
        redirect_uris = flow.client_config.get("redirect_uris") or []
        if not redirect_uris:
            raise ConfigError(
                f"No redirect_uris in {self.settings.google_credentials_path}; "
                "set OAUTH_REDIRECT_URI"
            )
        return redirect_uris[0]

    def _build_flow(self) -> InstalledAppFlow:
        path = self.settings.google_credentials_path
        try:
            return InstalledAppFlow.from_client_secrets_file(path, self.settings.scopes)
        except OSError as e:
            raise ConfigError(f"Unable to read client secret file {path}: {e}") from e
        except ValueError as e:
            raise ConfigError(f"Unable to parse client secret file to config: {e}") from e
