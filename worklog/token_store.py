"""OAuth token cache.

Reads and writes the user's access/refresh token as authorized-user JSON so
the authorization flow only runs once per profile.
"""

import json
import logging
import os
from pathlib import Path
from typing import Callable

from google.oauth2.credentials import Credentials

from worklog.errors import TokenCacheError

logger = logging.getLogger(__name__)


class TokenStore:
    """Single token file at a fixed path."""

    def __init__(
        self,
        token_path: str,
        scopes: list[str] | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.token_path = Path(token_path)
        self.scopes = scopes
        self.output = output

    def load(self) -> Credentials | None:
        """Load the cached token.

        Returns:
            The cached Credentials, or None if the file is absent or malformed.
        """
        if not self.token_path.exists():
            logger.info("No cached token at %s", self.token_path)
            return None

        try:
            info = json.loads(self.token_path.read_text(encoding="utf-8"))
            if not isinstance(info, dict):
                raise ValueError(f"expected a JSON object, got {type(info).__name__}")
            creds = Credentials.from_authorized_user_info(info, self.scopes)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            # Bad JSON, a non-object document, missing or mistyped fields
            logger.warning("Ignoring unreadable token file %s: %s", self.token_path, e)
            return None

        logger.debug("Loaded cached token from %s", self.token_path)
        return creds

    def save(self, creds: Credentials) -> None:
        """Write the token, replacing any previous cache.

        Raises:
            TokenCacheError: If the file cannot be written.
        """
        self.output(f"Saving credential file to: {self.token_path}")
        try:
            if self.token_path.parent != Path("."):
                self.token_path.parent.mkdir(parents=True, exist_ok=True)
            self.token_path.write_text(creds.to_json(), encoding="utf-8")
            os.chmod(self.token_path, 0o600)
        except OSError as e:
            raise TokenCacheError(f"Unable to cache oauth token: {e}") from e
        logger.info("Token saved to %s", self.token_path)
