from __future__ import annotations


class FoxError(Exception):
    """Base class for every error raised by the fox client itself."""


# ------------------------------------------------------------------ #
# Preconditions (raised before any request is built)
# ------------------------------------------------------------------ #

class FaxPreconditionError(FoxError, ValueError):
    default_message = "fox: invalid arguments"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotAuthenticatedError(FaxPreconditionError):
    default_message = "fox: account SID and/or auth token not specified"


class MissingSidError(FaxPreconditionError):
    default_message = "fox: fax SID not specified"


class MissingToNumberError(FaxPreconditionError):
    default_message = "fox: to number not specified"


class MissingFromNumberError(FaxPreconditionError):
    default_message = "fox: from number not specified"


class MissingMediaUrlError(FaxPreconditionError):
    default_message = "fox: media URL not specified"


# ------------------------------------------------------------------ #
# Provider / decode errors
# ------------------------------------------------------------------ #

class APIError(FoxError):
    """Error payload returned by Twilio for any status other than 200/201.

    ``status`` is the HTTP status code the error was returned under.
    """

    def __init__(self, code: int, message: str, more_info: str, status: int) -> None:
        self.code = code
        self.message = message
        self.more_info = more_info
        self.status = status
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"fox: error {self.status} (Twilio error {self.code}): {self.message}"

    def __repr__(self) -> str:
        return (
            f"APIError(code={self.code!r}, message={self.message!r}, "
            f"more_info={self.more_info!r}, status={self.status!r})"
        )


class FaxDecodeError(FoxError, ValueError):
    """A response body (success or error shape) could not be decoded."""

    def __init__(self, reason: str, *, status: int | None = None, body: bytes | str | None = None) -> None:
        self.reason = reason
        self.status = status
        self.body_excerpt = _excerpt(body)
        detail = f"fox: could not decode response: {reason}"
        if status is not None:
            detail += f" (HTTP {status})"
        super().__init__(detail)


def _excerpt(body: bytes | str | None, max_len: int = 200) -> str | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return body if len(body) <= max_len else body[:max_len] + "..."
