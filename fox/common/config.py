"""fox.common.config

Settings are read from the process environment (optionally seeded from a
``.env`` file). Nothing here performs network calls, and the library never
mutates a ``Settings`` instance after it is built: the API location is handed
to each client as an explicit ``FaxApiConfig`` instead of living in
package-level variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

from ..adapters.fax_requests import (
    DEFAULT_POOL_SIZE,
    DEFAULT_SLOW_CALL_MS,
    DEFAULT_TIMEOUT_S,
    FaxApiConfig,
)

# Load variables from .env (if the file exists).
load_dotenv(find_dotenv())


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """
    Configuration read from environment variables.

    ``ACCOUNT_SID``/``AUTH_TOKEN`` are the Twilio credentials; ``FROM``/``TO``
    are default numbers used by the CLI and the live test harness.
    """

    account_sid: str = ""
    auth_token: str = ""
    from_number: str = ""
    to_number: str = ""

    api_scheme: str = "https"
    api_host: str = "fax.twilio.com"
    http_timeout_s: float = DEFAULT_TIMEOUT_S
    http_pool_conn: int = DEFAULT_POOL_SIZE
    http_pool_max: int = DEFAULT_POOL_SIZE
    slow_call_ms: int = DEFAULT_SLOW_CALL_MS

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            account_sid=os.getenv("ACCOUNT_SID", "").strip(),
            auth_token=os.getenv("AUTH_TOKEN", "").strip(),
            from_number=os.getenv("FROM", "").strip(),
            to_number=os.getenv("TO", "").strip(),
            api_scheme=os.getenv("FOX_API_SCHEME", "https").strip() or "https",
            api_host=os.getenv("FOX_API_HOST", "fax.twilio.com").strip() or "fax.twilio.com",
            http_timeout_s=_env_float("FOX_HTTP_TIMEOUT_S", DEFAULT_TIMEOUT_S),
            http_pool_conn=_env_int("HTTP_POOL_CONN", DEFAULT_POOL_SIZE),
            http_pool_max=_env_int("HTTP_POOL_MAX", DEFAULT_POOL_SIZE),
            slow_call_ms=_env_int("TIMING_SLOW_THRESHOLD_MS", DEFAULT_SLOW_CALL_MS),
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.account_sid and self.auth_token)

    def api_config(self) -> FaxApiConfig:
        return FaxApiConfig(
            scheme=self.api_scheme,
            host=self.api_host,
            timeout_s=self.http_timeout_s,
            pool_connections=self.http_pool_conn,
            pool_maxsize=self.http_pool_max,
            slow_call_ms=self.slow_call_ms,
        )
