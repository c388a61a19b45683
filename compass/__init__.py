"""Compass - session client for the Compass school portal.

Logs in with a username and password, then reuses the portal's session
cookie for authenticated reads:

    handle = Authenticator().authenticate(credentials)
    details = SessionClient(handle).fetch_personal_details()
"""

__version__ = "0.1.0"

from compass.config import (
    SESSION_COOKIE_NAME,
    CompassConfig,
    Credentials,
)

from compass.auth import Authenticator, SessionHandle

from compass.sessions import SessionClient

from compass.errors import (
    AuthenticationError,
    CompassError,
    RequestError,
    SessionCookieMissingError,
)

from compass.responses import GenericMobileResponse, parse_body, unwrap

__all__ = [
    # Version
    "__version__",
    # Config
    "SESSION_COOKIE_NAME",
    "CompassConfig",
    "Credentials",
    # Auth
    "Authenticator",
    "SessionHandle",
    "SessionClient",
    # Errors
    "CompassError",
    "AuthenticationError",
    "SessionCookieMissingError",
    "RequestError",
    # Responses
    "GenericMobileResponse",
    "parse_body",
    "unwrap",
]
