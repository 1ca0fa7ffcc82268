"""fox: a small client for the Twilio programmatic fax API."""

from .adapters.fax_requests import FaxApiConfig
from .adapters.twilio_fax_client import FaxClient
from .domain.errors import (
    APIError,
    FaxDecodeError,
    FaxPreconditionError,
    FoxError,
    MissingFromNumberError,
    MissingMediaUrlError,
    MissingSidError,
    MissingToNumberError,
    NotAuthenticatedError,
)
from .domain.models import (
    DEFAULT_SEND_OPTIONS,
    ErrorPayload,
    FaxListMeta,
    FaxListPage,
    FaxMediaLinks,
    FaxQuality,
    FaxResource,
    FaxStatus,
    ListOptions,
    SendOptions,
)

__all__ = [
    "APIError",
    "DEFAULT_SEND_OPTIONS",
    "ErrorPayload",
    "FaxApiConfig",
    "FaxClient",
    "FaxDecodeError",
    "FaxListMeta",
    "FaxListPage",
    "FaxMediaLinks",
    "FaxPreconditionError",
    "FaxQuality",
    "FaxResource",
    "FaxStatus",
    "FoxError",
    "ListOptions",
    "MissingFromNumberError",
    "MissingMediaUrlError",
    "MissingSidError",
    "MissingToNumberError",
    "NotAuthenticatedError",
    "SendOptions",
]
