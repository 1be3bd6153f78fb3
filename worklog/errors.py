"""Work log error types.

Every failure the CLI can hit is raised as a WorklogError subclass and
bubbles up to main.py, which is the only place that decides the exit status.
"""


class WorklogError(Exception):
    """Base class for user-facing work log failures."""


class ConfigError(WorklogError):
    """The OAuth client secrets file is missing or unparsable."""


class AuthorizationError(WorklogError):
    """The authorization code could not be read or exchanged, or a refresh failed."""


class TokenCacheError(WorklogError):
    """The token cache file could not be written."""


class InvalidTimeRangeError(WorklogError):
    """The time range is not of the form START-END."""


class EventInsertError(WorklogError):
    """The Calendar API rejected the event or could not be reached."""
