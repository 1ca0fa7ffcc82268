"""Package logger.

Call sites log dicts (``logger.info({"msg": ..., "sid": ...})``); the wrapper
renders them as one JSON object per line so they stay greppable.

This mirrors the stdlib fallback of an ``aws_lambda_powertools.Logger`` setup
(dict in, JSON line out). Powertools itself is not used: the client does not
run inside AWS Lambda, so only the stdlib path is kept.
"""

from __future__ import annotations

import json
import logging
from typing import Any


def _render(msg: Any) -> Any:
    if isinstance(msg, dict):
        return json.dumps(msg, ensure_ascii=False, default=str)
    return msg


class JsonLogger:
    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(_render(msg), *args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.info(_render(msg), *args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(_render(msg), *args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.error(_render(msg), *args, **kwargs)

    def exception(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.exception(_render(msg), *args, **kwargs)


logger = JsonLogger("fox")
