"""
Shared pytest fixtures for Compass client tests.

PortalStub stands in for a Compass school portal behind an
httpx.MockTransport: it records every request and answers from canned
responses keyed by URL path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import pytest

from compass.auth import SessionHandle
from compass.config import PATH_AUTH, Credentials

HOSTNAME = "school.compass.edu"
AUTH_PATH = PATH_AUTH
PERSONAL_DETAILS_PATH = "/services/mobile.svc/GetPersonalDetails"


@dataclass
class CannedResponse:
    """A response (or transport error) to replay for a path."""

    status_code: int = 200
    headers: List[tuple] = field(default_factory=list)
    json: Any = None
    content: Optional[bytes] = None
    error: Optional[type] = None

    def build(self, request: httpx.Request) -> httpx.Response:
        if self.error is not None:
            raise self.error("simulated transport failure", request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, headers=self.headers, content=self.content)
        if self.json is not None:
            return httpx.Response(self.status_code, headers=self.headers, json=self.json)
        return httpx.Response(self.status_code, headers=self.headers)


class PortalStub:
    """Fake Compass portal that records requests."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, List[CannedResponse]] = {}

    def on(self, path: str, *responses: CannedResponse) -> "PortalStub":
        """Queue responses for a path; the last one repeats."""
        self._routes[path] = list(responses)
        return self

    def login_ok(self, session_id: str = "abc123") -> "PortalStub":
        return self.on(
            AUTH_PATH,
            CannedResponse(
                headers=[("Set-Cookie", f"ASP.NET_SessionId={session_id}; path=/; HttpOnly")],
                json={"d": {"success": True}},
            ),
        )

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._routes.get(request.url.path)
        if not queue:
            return httpx.Response(404)
        canned = queue.pop(0) if len(queue) > 1 else queue[0]
        return canned.build(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def portal():
    """A fresh fake portal with no routes."""
    return PortalStub()


@pytest.fixture
def credentials():
    return Credentials(hostname=HOSTNAME, username="alice", password="secret")


@pytest.fixture
def handle():
    return SessionHandle(hostname=HOSTNAME, cookie_name="ASP.NET_SessionId", cookie_value="abc123")
