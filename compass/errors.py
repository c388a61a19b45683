"""Exception types for the Compass client."""

from typing import Optional

from compass.config.common import Phase


class CompassError(Exception):
    """Base exception for all Compass errors."""

    phase: Phase = Phase.FETCH

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(CompassError):
    """Login request failed at the transport or HTTP level."""

    phase = Phase.AUTHENTICATE


class SessionCookieMissingError(AuthenticationError):
    """Login succeeded but the portal issued no session cookie."""


class RequestError(CompassError):
    """Authenticated request failed at the transport or HTTP level."""

    phase = Phase.FETCH
