"""Client for the Twilio programmatic fax API ("Faxes" endpoint, v1).

Usage::

    c = FaxClient("YOUR_TWILIO_ACCOUNT_SID", "YOUR_TWILIO_AUTH_TOKEN")
    fax = c.send("+15558675310", "+15017122661", "https://example.com/doc.pdf")

Pass ``send_options=SendOptions(store_media=False)`` to the constructor to
change the client-wide defaults, or to any operation to override them for
a single call. Only :meth:`FaxClient.send` puts them on the wire; the other
operations log the effective quality. E.164 parsing/validation and status
callbacks are left to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import requests

from ..common.logging import logger
from ..common.logging_utils import mask_phone
from ..domain.errors import (
    MissingFromNumberError,
    MissingMediaUrlError,
    MissingSidError,
    MissingToNumberError,
    NotAuthenticatedError,
)
from ..domain.models import (
    DEFAULT_SEND_OPTIONS,
    FaxListPage,
    FaxResource,
    ListOptions,
    SendOptions,
)
from .fax_requests import (
    FaxApiConfig,
    build_cancel_request,
    build_get_request,
    build_list_request,
    build_send_request,
)
from .transport import AuthenticatedTransport

if TYPE_CHECKING:
    from ..common.config import Settings


class FaxClient:
    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        send_options: SendOptions | None = None,
        *,
        config: FaxApiConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._account_sid = account_sid or ""
        self._auth_token = auth_token or ""
        self._send_options = send_options if send_options is not None else DEFAULT_SEND_OPTIONS
        self.config = config or FaxApiConfig()
        self.transport = AuthenticatedTransport(
            account_sid=self._account_sid,
            auth_token=self._auth_token,
            config=self.config,
            session=session,
        )

    @classmethod
    def from_settings(
        cls,
        settings: "Settings | None" = None,
        *,
        send_options: SendOptions | None = None,
        session: requests.Session | None = None,
    ) -> "FaxClient":
        if settings is None:
            from ..common.config import Settings

            settings = Settings.from_env()
        return cls(
            settings.account_sid,
            settings.auth_token,
            send_options,
            config=settings.api_config(),
            session=session,
        )

    @property
    def account_sid(self) -> str:
        return self._account_sid

    @property
    def send_options(self) -> SendOptions:
        return self._send_options

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _ensure_authenticated(self) -> None:
        if not self._account_sid or not self._auth_token:
            raise NotAuthenticatedError()

    def effective_send_options(self, override: SendOptions | None = None) -> SendOptions:
        """The per-call override if given, otherwise the client default."""
        return override if override is not None else self._send_options

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def get(self, sid: str, send_options: SendOptions | None = None) -> FaxResource:
        """Retrieve a single fax by its SID.

        ``send_options`` is accepted for symmetry with :meth:`send`; a GET
        carries no send body, so it only shows up in the debug log.
        """
        self._ensure_authenticated()
        if not sid:
            raise MissingSidError()
        opts = self.effective_send_options(send_options)

        body = self.transport.execute(build_get_request(self.config, sid))
        fax = FaxResource.from_json(body)
        logger.debug({"msg": "Fax fetched", "sid": fax.sid, "status": fax.status, "quality": opts.quality.label})
        return fax

    def send(
        self,
        to: str,
        from_: str,
        media_url: str,
        send_options: SendOptions | None = None,
    ) -> FaxResource:
        """Initiate a fax.

        ``to``/``from_`` are expected in E.164 format (or a SIP URI for
        ``to``); ``media_url`` must be publicly reachable. ``send_options``
        applies to this call only.
        """
        self._ensure_authenticated()
        if not to:
            raise MissingToNumberError()
        if not from_:
            raise MissingFromNumberError()
        if not media_url:
            raise MissingMediaUrlError()

        opts = self.effective_send_options(send_options)
        request = build_send_request(self.config, to, from_, media_url, opts)

        body = self.transport.execute(request)
        fax = FaxResource.from_json(body)

        logger.info(
            {
                "msg": "Fax queued",
                "sid": fax.sid,
                "status": fax.status,
                "to": mask_phone(to),
                "from": mask_phone(from_),
                "quality": opts.quality.label,
            }
        )
        return fax

    def list(
        self,
        list_options: ListOptions | None = None,
        send_options: SendOptions | None = None,
    ) -> FaxListPage:
        """Return one page of faxes; pagination URLs are in ``page.meta``."""
        self._ensure_authenticated()
        opts = self.effective_send_options(send_options)

        body = self.transport.execute(build_list_request(self.config, list_options))
        page = FaxListPage.from_json(body)
        logger.debug({"msg": "Faxes listed", "count": len(page), "quality": opts.quality.label})
        return page

    def cancel(self, sid: str, send_options: SendOptions | None = None) -> FaxResource:
        """Cancel a queued or in-progress fax; returns the updated snapshot."""
        self._ensure_authenticated()
        if not sid:
            raise MissingSidError()
        opts = self.effective_send_options(send_options)

        body = self.transport.execute(build_cancel_request(self.config, sid))
        fax = FaxResource.from_json(body)
        logger.info({"msg": "Fax canceled", "sid": fax.sid, "status": fax.status, "quality": opts.quality.label})
        return fax
