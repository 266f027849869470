"""
Base exception classes for fetch operations.

Each exception includes a `retryable` flag indicating whether the request
can be safely retried with the same parameters.
"""


class ApiFetcherError(Exception):
    """Base exception for all fetch errors."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        *,
        retryable: bool = False,
        status_code: int | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.retryable = retryable
        self.status_code = status_code
        self.url = url

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.insert(0, f"[{self.url}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class NetworkError(ApiFetcherError):
    """Raised on non-2xx responses and connection failures. Retryable."""

    def __init__(self, message: str = "Network error", cause: BaseException | None = None, **kwargs):
        super().__init__(message, cause, retryable=True, **kwargs)


class TimeoutError(ApiFetcherError):
    """Raised when a single attempt exceeds its timeout. Retryable."""

    def __init__(self, message: str = "Request timed out", cause: BaseException | None = None, **kwargs):
        super().__init__(message, cause, retryable=True, **kwargs)


class ParseError(ApiFetcherError):
    """Raised when a 2xx body cannot be decoded. Not retryable."""

    def __init__(self, message: str = "Parse error", cause: BaseException | None = None, **kwargs):
        super().__init__(message, cause, retryable=False, **kwargs)
