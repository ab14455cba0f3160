"""Error types raised by the record acquisition and caching layers."""

from __future__ import annotations

from typing import Optional


class ManufError(Exception):
    """Base class for all manuf errors.

    Attributes:
        url: Source URL the error relates to, when there is one
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class NetworkError(ManufError):
    """A source URL could not be reached (DNS, refused connection, timeout)."""


class RemoteError(ManufError):
    """A source answered with a non-200 status."""

    def __init__(
        self,
        status_code: int,
        reason: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        message = f"got non-200 HTTP response {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason


class ParseError(ManufError):
    """Tabular data was malformed or the stream could not be read."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message, url=url)
        self.line = line


class StorageError(ManufError):
    """Local filesystem failure reading or writing the cache file."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class DeadlineExceeded(ManufError):
    """The deadline for a fetch elapsed before it completed."""


__all__ = [
    "DeadlineExceeded",
    "ManufError",
    "NetworkError",
    "ParseError",
    "RemoteError",
    "StorageError",
]
