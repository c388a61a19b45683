"""Login handshake against the Compass portal."""

from dataclasses import dataclass, field
from typing import Optional

import httpx

from compass.config import (
    PATH_AUTH,
    SESSION_COOKIE_NAME,
    CompassConfig,
    Credentials,
    SessionState,
)
from compass.errors import AuthenticationError, SessionCookieMissingError
from compass.utils import logger, redact


@dataclass(frozen=True)
class SessionHandle:
    """Session cookie obtained from a successful login.

    Attributes:
        hostname: School portal hostname the session belongs to
        cookie_name: Name of the session cookie
        cookie_value: Opaque session identifier issued by the portal
    """

    hostname: str
    cookie_name: str
    cookie_value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.hostname:
            raise ValueError("SessionHandle requires a hostname")
        if not self.cookie_name or not self.cookie_value:
            raise ValueError("SessionHandle requires a non-empty cookie name and value")

    @property
    def cookie(self) -> str:
        """Cookie header value replayed on authenticated requests."""
        return f"{self.cookie_name}={self.cookie_value}"

    @property
    def base_url(self) -> str:
        return f"https://{self.hostname}"


class Authenticator:
    """Exchanges credentials for a SessionHandle.

    Holds no session state: every call opens and closes its own HTTP
    client, so the only thing that outlives a login is the returned handle.
    """

    def __init__(
        self,
        config: Optional[CompassConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or CompassConfig()
        self.transport = transport

    def authenticate(self, credentials: Credentials) -> SessionHandle:
        """Log in and return the session handle.

        Raises:
            AuthenticationError: Transport failure or non-2xx response
            SessionCookieMissingError: Login returned no session cookie
        """
        base_url = f"https://{credentials.hostname}"
        payload = {
            "username": credentials.username,
            "password": credentials.password,
            "sessionstate": SessionState.READONLY.value,
        }
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }

        logger.debug(f"POST {base_url}{PATH_AUTH} as {credentials.username}")

        try:
            with httpx.Client(
                base_url=base_url,
                timeout=self.config.timeout,
                transport=self.transport,
            ) as client:
                response = client.post(PATH_AUTH, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise AuthenticationError(f"Login request to {credentials.hostname} failed: {e}") from e

        if not response.is_success:
            raise AuthenticationError(
                f"Login failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        cookie_value = self._extract_session_cookie(response)
        if not cookie_value:
            raise SessionCookieMissingError(
                f"Login response from {credentials.hostname} did not set {SESSION_COOKIE_NAME}",
                status_code=response.status_code,
            )

        logger.info(f"Authenticated to {credentials.hostname} ({SESSION_COOKIE_NAME}={redact(cookie_value)})")

        return SessionHandle(
            hostname=credentials.hostname,
            cookie_name=SESSION_COOKIE_NAME,
            cookie_value=cookie_value,
        )

    def _extract_session_cookie(self, response: httpx.Response) -> Optional[str]:
        """Find the session cookie in the raw Set-Cookie headers.

        Domain, path and expiry attributes are ignored: the value is replayed
        by hand in a Cookie header, so no cookie-jar acceptance policy applies.
        """
        for header in response.headers.get_list("set-cookie"):
            pair = header.split(";", 1)[0]
            name, sep, value = pair.partition("=")
            if sep and name.strip() == SESSION_COOKIE_NAME and value.strip():
                return value.strip()
        return None
