"""Typed values exchanged with the Twilio Fax API (v1).

Options encode themselves onto an ordered list of ``(key, value)`` pairs,
which ``requests`` accepts both as a form body and as query params. Wire keys
are fixed and do not always match the local field names.

Response bodies decode into frozen pydantic models; any validation failure
surfaces as :class:`FaxDecodeError`.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError, field_validator

from .errors import APIError, FaxDecodeError

FormData = List[Tuple[str, str]]


class FaxQuality(Enum):
    """Fax resolution tier requested for transmission."""

    # 204x98, supported by all devices
    STANDARD = "standard"
    # 204x196, wide device support
    FINE = "fine"
    # 204x392, may not be supported by many devices
    SUPERFINE = "superfine"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class FaxStatus(Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    SENDING = "sending"
    DELIVERED = "delivered"
    RECEIVING = "receiving"
    RECEIVED = "received"
    NO_ANSWER = "no-answer"
    BUSY = "busy"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | None) -> Optional["FaxStatus"]:
        try:
            return cls(value)
        except ValueError:
            return None


# ------------------------------------------------------------------ #
# Options
# ------------------------------------------------------------------ #

def format_rfc3339(dt: datetime) -> str:
    """Second-precision RFC 3339; UTC is rendered as ``Z``, naive means UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    s = dt.replace(microsecond=0).isoformat()
    if s.endswith("+00:00"):
        s = s[: -len("+00:00")] + "Z"
    return s


_AWARE_DATETIME = TypeAdapter(AwareDatetime)


def parse_rfc3339(value: str) -> datetime:
    """Parse a timestamp that carries an offset; raises ``ValueError`` otherwise."""
    return _AWARE_DATETIME.validate_python(value.strip())


@dataclass(frozen=True)
class SendOptions:
    quality: FaxQuality = FaxQuality.FINE
    sip_auth_username: str = ""
    sip_auth_password: str = ""
    status_callback: str = ""
    store_media: bool = True
    ttl_minutes: int = 0

    def encode(self, data: FormData) -> None:
        data.append(("Quality", self.quality.label))

        if self.sip_auth_password:
            data.append(("SipAuthPassword", self.sip_auth_password))
        if self.sip_auth_username:
            data.append(("SipAuthUsername", self.sip_auth_username))
        if self.status_callback:
            data.append(("StatusCallback", self.status_callback))

        data.append(("StoreMedia", "true" if self.store_media else "false"))

        if self.ttl_minutes > 0:
            data.append(("Ttl", str(int(self.ttl_minutes))))

    def to_params(self) -> FormData:
        data: FormData = []
        self.encode(data)
        return data


# Mirrors the defaults documented by Twilio.
DEFAULT_SEND_OPTIONS = SendOptions()


@dataclass(frozen=True)
class ListOptions:
    date_created_after: Optional[datetime] = None
    date_created_on_or_before: Optional[datetime] = None
    from_: str = ""
    to: str = ""

    def encode(self, data: FormData) -> None:
        if self.date_created_after is not None:
            data.append(("DateCreatedAfter", format_rfc3339(self.date_created_after)))
        if self.date_created_on_or_before is not None:
            data.append(("DateCreatedOnOrBefore", format_rfc3339(self.date_created_on_or_before)))
        if self.from_:
            data.append(("From", self.from_))
        if self.to:
            data.append(("To", self.to))

    def to_params(self) -> FormData:
        data: FormData = []
        self.encode(data)
        return data


# ------------------------------------------------------------------ #
# Responses
# ------------------------------------------------------------------ #

@contextmanager
def _decoding(*, status: int | None = None, body: bytes | str | None = None) -> Iterator[None]:
    """Map pydantic validation failures onto :class:`FaxDecodeError`."""
    try:
        yield
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ())) or "body"
        reason = f"{loc}: {first.get('msg', 'invalid')} ({e.error_count()} error(s))"
        raise FaxDecodeError(reason, status=status, body=body) from e


class _WireModel(BaseModel):
    """Frozen model decoded from a Twilio JSON body; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_dict(cls, payload: Any, *, status: int | None = None):
        with _decoding(status=status):
            return cls.model_validate(payload)

    @classmethod
    def from_json(cls, body: bytes | str, *, status: int | None = None):
        with _decoding(status=status, body=body):
            return cls.model_validate_json(body)


class FaxMediaLinks(_WireModel):
    media: StrictStr = ""

    @field_validator("media", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v


class FaxResource(_WireModel):
    """Snapshot of one fax transmission as reported by Twilio.

    ``status`` keeps the raw provider string; ``fax_status`` maps it onto
    :class:`FaxStatus` (``None`` for values outside the documented set).
    ``duration``, ``num_pages``, ``price``, ``price_unit`` and ``media_url``
    stay ``None`` until the fax completes.
    """

    sid: StrictStr = ""
    account_sid: StrictStr = ""
    api_version: StrictStr = ""
    status: StrictStr = ""
    url: StrictStr = ""
    direction: StrictStr = ""
    to: StrictStr = ""
    from_: StrictStr = Field("", alias="from")
    quality: StrictStr = ""
    date_created: Optional[AwareDatetime] = None
    date_updated: Optional[AwareDatetime] = None
    links: FaxMediaLinks = Field(default_factory=FaxMediaLinks)
    price_unit: Optional[StrictStr] = None
    price: Optional[str] = None
    duration: Optional[StrictInt] = None
    num_pages: Optional[StrictInt] = None
    media_url: Optional[StrictStr] = None

    @field_validator(
        "sid", "account_sid", "api_version", "status", "url", "direction", "to", "from_", "quality",
        mode="before",
    )
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("date_created", "date_updated", mode="before")
    @classmethod
    def _blank_date(cls, v: Any) -> Any:
        return None if v == "" else v

    @field_validator("links", mode="before")
    @classmethod
    def _null_links(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def _numeric_price(cls, v: Any) -> Any:
        # Twilio documents price as a string but some payloads carry a number
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def fax_status(self) -> Optional[FaxStatus]:
        return FaxStatus.parse(self.status)

    def to_dict(self) -> Dict[str, Any]:
        d = self.model_dump(by_alias=True)
        for key in ("date_created", "date_updated"):
            d[key] = format_rfc3339(d[key]) if d[key] else None
        return d


class FaxListMeta(_WireModel):
    first_page_url: StrictStr = ""
    key: StrictStr = ""
    next_page_url: Optional[StrictStr] = None
    page: StrictInt = 0
    page_size: StrictInt = 0
    previous_page_url: Optional[StrictStr] = None
    url: StrictStr = ""

    @field_validator("first_page_url", "key", "url", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("page", "page_size", mode="before")
    @classmethod
    def _null_int(cls, v: Any) -> Any:
        return 0 if v is None else v


class FaxListPage(_WireModel):
    faxes: Tuple[FaxResource, ...] = ()
    meta: FaxListMeta = Field(default_factory=FaxListMeta)

    @field_validator("faxes", mode="before")
    @classmethod
    def _faxes_list(cls, v: Any) -> Any:
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("faxes must be a list")
        return v

    @field_validator("meta", mode="before")
    @classmethod
    def _null_meta(cls, v: Any) -> Any:
        return {} if v is None else v

    def __len__(self) -> int:
        return len(self.faxes)


class ErrorPayload(_WireModel):
    """Twilio's error body: ``code``, ``message``, ``more_info``, ``status``."""

    code: StrictInt = 0
    message: StrictStr = ""
    more_info: StrictStr = ""
    status: Optional[StrictInt] = None

    @field_validator("message", "more_info", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("code", mode="before")
    @classmethod
    def _null_code(cls, v: Any) -> Any:
        return 0 if v is None else v

    def to_error(self, http_status: int) -> APIError:
        """``status`` falls back to the HTTP status when the body omits it."""
        return APIError(
            code=self.code,
            message=self.message,
            more_info=self.more_info,
            status=self.status if self.status is not None else http_status,
        )
