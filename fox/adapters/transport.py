from __future__ import annotations

import requests

from ..common.http_client import get_session
from ..common.logging import logger
from ..common.logging_utils import mask_sid
from ..common.timing import timed_call
from ..domain.models import ErrorPayload
from .fax_requests import FaxApiConfig, FaxRequest

# Twilio returns 201 for resources created via POST and 200 for reads;
# every other status carries the error payload.
SUCCESS_STATUSES = (200, 201)


class AuthenticatedTransport:
    """Executes a :class:`FaxRequest` under HTTP Basic auth.

    One call, one round trip: no retries. Network failures surface as the
    original ``requests`` exception.
    """

    def __init__(
        self,
        *,
        account_sid: str,
        auth_token: str,
        config: FaxApiConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._account_sid = account_sid
        self._auth_token = auth_token
        self.config = config or FaxApiConfig()
        self._session = session

    @property
    def timeout_s(self) -> float:
        return self.config.timeout_s

    @property
    def session(self) -> requests.Session:
        return self._session if self._session is not None else get_session(self.config)

    def execute(self, request: FaxRequest) -> bytes:
        """Return the raw success body or raise :class:`APIError`.

        Raises:
            APIError: on any status other than 200/201.
            FaxDecodeError: if the error body is not the error shape.
            requests.RequestException: on connect/timeout/TLS failures.
        """
        log_ctx = {
            "method": request.method,
            "url": request.url,
            "account": mask_sid(self._account_sid),
        }

        try:
            with timed_call(
                request,
                logger=logger,
                slow_ms=self.config.slow_call_ms,
                extra={"account": log_ctx["account"]},
            ) as call:
                resp = self.session.request(
                    request.method,
                    request.url,
                    data=list(request.data) if request.data is not None else None,
                    params=list(request.params) if request.params is not None else None,
                    headers=dict(request.headers),
                    auth=(self._account_sid, self._auth_token),
                    timeout=self.config.timeout_s,
                )
                call["http_status"] = resp.status_code
        except requests.RequestException as e:
            logger.error({**log_ctx, "msg": "Fax API request failed", "error": str(e)})
            raise

        body = resp.content or b""

        if resp.status_code in SUCCESS_STATUSES:
            return body

        err = ErrorPayload.from_json(body, status=resp.status_code).to_error(resp.status_code)
        logger.warning(
            {
                **log_ctx,
                "msg": "Fax API error",
                "http_status": resp.status_code,
                "twilio_code": err.code,
                "error": err.message,
            }
        )
        raise err
