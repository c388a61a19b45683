"""Authenticated reads against the Compass portal.

A SessionClient replays the cookie from a SessionHandle on every request.
It never logs in again and never caches results: each method issues
exactly one request and hands back the body as the portal sent it.
"""

from typing import Any, Dict, Optional

import httpx

from compass.auth import SessionHandle
from compass.config import (
    PATH_CHECK_PARENT_DETAILS,
    PATH_DOWNLOAD_FILE,
    PATH_GET_EVENTS_FOR_PARENT,
    PATH_GET_MESSAGES,
    PATH_GET_PERSONAL_DETAILS,
    PATH_NEWSFEED,
    PATH_PST_CYCLES,
    CompassConfig,
)
from compass.errors import RequestError
from compass.utils import logger


class SessionClient:
    """Performs authenticated reads with a previously obtained session."""

    def __init__(
        self,
        handle: SessionHandle,
        config: Optional[CompassConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Wrap a session handle. No I/O happens here.

        Args:
            handle: Session returned by Authenticator.authenticate
            config: HTTP settings, defaults to CompassConfig()
            transport: Optional httpx transport (tests inject a mock here)
        """
        self.handle = handle
        self.config = config or CompassConfig()
        self.transport = transport

    def fetch_personal_details(self) -> str:
        """Return the raw personal details document for the logged-in user."""
        return self._post(PATH_GET_PERSONAL_DETAILS).text

    def get_news_feed(self) -> str:
        return self._post(PATH_NEWSFEED).text

    def get_messages(self) -> str:
        return self._post(PATH_GET_MESSAGES).text

    def get_pst_cycles(self) -> str:
        """Parent/teacher interview booking cycles."""
        return self._post(PATH_PST_CYCLES).text

    def check_parent_details(self) -> str:
        return self._post(PATH_CHECK_PARENT_DETAILS).text

    def get_events_for_parent(self, user_id: str, limit: int = 20, page: int = 1) -> str:
        """Return a single page of events visible to a parent.

        Args:
            user_id: Compass user id the events belong to
            limit: Page size
            page: 1-based page number
        """
        params = {"userId": user_id, "limit": limit, "page": page}
        return self._post(PATH_GET_EVENTS_FOR_PARENT, json=params).text

    def download_file(self, file_id: str) -> bytes:
        """Download a single file by id and return its bytes."""
        return self._request(
            "GET",
            PATH_DOWNLOAD_FILE,
            params={"FileDownloadType": "1", "file": file_id},
        ).content

    def _headers(self) -> Dict[str, str]:
        return {
            "Cookie": self.handle.cookie,
            "User-Agent": self.config.user_agent,
        }

    def _post(self, path: str, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        if json is not None:
            return self._request("POST", path, json=json)
        return self._request("POST", path, content=b"")

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request with the session cookie attached.

        A new client is opened per request so cookies set by a response are
        never carried into the next request.

        Raises:
            RequestError: Transport failure or non-2xx response
        """
        logger.debug(f"{method} {self.handle.base_url}{path}")

        try:
            with httpx.Client(
                base_url=self.handle.base_url,
                timeout=self.config.timeout,
                transport=self.transport,
            ) as client:
                response = client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            raise RequestError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise RequestError(
                f"{method} {path} failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return response
