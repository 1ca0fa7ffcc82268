# fox/common/http_client.py
from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from ..adapters.fax_requests import FaxApiConfig

USER_AGENT = "fox-fax/0.1.0"

# one pooled session per API location and pool shape
_SESSIONS: dict[tuple[str, int, int], requests.Session] = {}


def get_session(config: FaxApiConfig | None = None) -> requests.Session:
    config = config or FaxApiConfig()
    key = (config.base_url, config.pool_connections, config.pool_maxsize)

    s = _SESSIONS.get(key)
    if s is not None:
        return s

    s = requests.Session()
    s.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})

    # no retries: every fax operation is exactly one round trip
    adapter = HTTPAdapter(
        pool_connections=config.pool_connections,
        pool_maxsize=config.pool_maxsize,
        max_retries=0,
    )
    s.mount(config.base_url, adapter)

    _SESSIONS[key] = s
    return s
