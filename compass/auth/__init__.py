"""Authentication and session handles for the Compass portal."""

from compass.auth.authenticator import Authenticator, SessionHandle

__all__ = [
    "Authenticator",
    "SessionHandle",
]
