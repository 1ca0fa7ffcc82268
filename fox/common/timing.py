from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator
from urllib.parse import urlsplit

from ..adapters.fax_requests import FaxRequest


@contextmanager
def timed_call(
    request: FaxRequest,
    *,
    logger,
    slow_ms: int,
    extra: Dict[str, Any] | None = None,
) -> Iterator[Dict[str, Any]]:
    """Time one fax API round trip.

    Yields a dict the caller fills in (``http_status``); it is logged once the
    block exits, at WARNING when the call took ``slow_ms`` or longer and at
    DEBUG otherwise.
    """
    call: Dict[str, Any] = {
        "timing": "fax_api_call",
        "method": request.method,
        "path": urlsplit(request.url).path,
    }
    if extra:
        call.update(extra)

    start = time.perf_counter()
    try:
        yield call
    finally:
        call["duration_ms"] = int((time.perf_counter() - start) * 1000)
        call.setdefault("http_status", None)

        if call["duration_ms"] >= slow_ms:
            logger.warning({"msg": "Slow fax API call", **call})
        else:
            logger.debug({"msg": "Fax API call", **call})
