"""Common constants and enumerations used across the Compass client."""

from enum import Enum

# Session cookie issued by the portal's ASP.NET backend.
SESSION_COOKIE_NAME = "ASP.NET_SessionId"

DEFAULT_USER_AGENT = "iOS/12_1_2 type/iPhone CompassEducation/4.5.3"
DEFAULT_TIMEOUT = 30.0

PATH_AUTH = "/services/admin.svc/AuthenticateUserCredentials"
PATH_GET_PERSONAL_DETAILS = "/services/mobile.svc/GetPersonalDetails?sessionstate=readonly"
PATH_NEWSFEED = "/services/mobile.svc/GetNewsFeed?sessionstate=readonly"
PATH_GET_MESSAGES = "/services/mobile.svc/GetMessages?sessionstate=readonly"
PATH_PST_CYCLES = "/services/mobile.svc/GetPstCycles?sessionstate=readonly"
PATH_CHECK_PARENT_DETAILS = "/services/mobile.svc/CheckParentDetails?sessionstate=readonly"
PATH_GET_EVENTS_FOR_PARENT = "/Services/Events.svc/GetForParent"
PATH_DOWNLOAD_FILE = "/services/FileDownload/FileRequestHandler"


class SessionState(str, Enum):
    """Session state requested from the portal at login."""

    READONLY = "readonly"


class Phase(str, Enum):
    """Workflow phase an error belongs to."""

    AUTHENTICATE = "authenticate"
    FETCH = "fetch"
