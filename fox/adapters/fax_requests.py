"""Request construction for the Twilio Fax API.

Nothing in this module touches the network; it turns validated arguments
into a :class:`FaxRequest` that the transport executes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..domain.models import FormData, ListOptions, SendOptions

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_POOL_SIZE = 10
# the fax API is slower than a typical JSON endpoint
DEFAULT_SLOW_CALL_MS = 2000

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; param=value"

Pairs = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class FaxApiConfig:
    scheme: str = "https"  # the API is always accessed over HTTPS; override for tests only
    host: str = "fax.twilio.com"
    version: str = "v1"  # pinned
    resource: str = "Faxes"
    timeout_s: float = DEFAULT_TIMEOUT_S
    pool_connections: int = DEFAULT_POOL_SIZE
    pool_maxsize: int = DEFAULT_POOL_SIZE
    slow_call_ms: int = DEFAULT_SLOW_CALL_MS

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}/"


@dataclass(frozen=True)
class FaxRequest:
    method: str
    url: str
    data: Optional[Pairs] = None
    params: Optional[Pairs] = None
    headers: Dict[str, str] = field(default_factory=dict)


def build_url(config: FaxApiConfig, sid: str = "") -> str:
    segments = [config.version, config.resource, sid]
    path = "/".join(s.strip("/") for s in segments if s and s.strip("/"))
    return f"{config.scheme}://{config.host}/{path}"


def _form_request(url: str, data: FormData) -> FaxRequest:
    return FaxRequest(
        method="POST",
        url=url,
        data=tuple(data),
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )


def build_send_request(
    config: FaxApiConfig,
    to: str,
    from_: str,
    media_url: str,
    options: SendOptions,
) -> FaxRequest:
    data: FormData = [
        ("To", to),
        ("From", from_),
        ("MediaUrl", media_url),
    ]
    options.encode(data)
    return _form_request(build_url(config), data)


def build_get_request(config: FaxApiConfig, sid: str) -> FaxRequest:
    return FaxRequest(method="GET", url=build_url(config, sid))


def build_list_request(config: FaxApiConfig, options: Optional[ListOptions] = None) -> FaxRequest:
    params = options.to_params() if options is not None else []
    return FaxRequest(
        method="GET",
        url=build_url(config),
        params=tuple(params) or None,
    )


def build_cancel_request(config: FaxApiConfig, sid: str) -> FaxRequest:
    return _form_request(build_url(config, sid), [("Status", "canceled")])
