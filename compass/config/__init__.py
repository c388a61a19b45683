"""Configuration models and constants for the Compass client.

This package re-exports all commonly used names for convenient importing.
"""

from compass.config.common import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    PATH_AUTH,
    PATH_CHECK_PARENT_DETAILS,
    PATH_DOWNLOAD_FILE,
    PATH_GET_EVENTS_FOR_PARENT,
    PATH_GET_MESSAGES,
    PATH_GET_PERSONAL_DETAILS,
    PATH_NEWSFEED,
    PATH_PST_CYCLES,
    SESSION_COOKIE_NAME,
    Phase,
    SessionState,
)

from compass.config.credentials import (
    CompassConfig,
    Credentials,
)

__all__ = [
    # Constants
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "PATH_AUTH",
    "PATH_CHECK_PARENT_DETAILS",
    "PATH_DOWNLOAD_FILE",
    "PATH_GET_EVENTS_FOR_PARENT",
    "PATH_GET_MESSAGES",
    "PATH_GET_PERSONAL_DETAILS",
    "PATH_NEWSFEED",
    "PATH_PST_CYCLES",
    "SESSION_COOKIE_NAME",
    # Enums
    "Phase",
    "SessionState",
    # Models
    "CompassConfig",
    "Credentials",
]
