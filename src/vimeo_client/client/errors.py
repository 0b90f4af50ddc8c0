"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from vimeo_client.client.vimeo import Response

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class VimeoError(Exception):
    """Base exception for vimeo-client."""

    exit_code: int = 1


class RequestBuildError(VimeoError):
    """A request path could not be parsed or resolved."""


class SerializationError(VimeoError):
    """A request body cannot be represented as JSON."""


class DecodeError(VimeoError):
    """A successful response body does not match the requested shape."""


class TransportError(VimeoError):
    """The HTTP round trip itself failed (DNS, connect, TLS, timeout)."""

    exit_code = 2


class ConfigurationError(VimeoError):
    """No usable profile, token or base URL."""

    exit_code = 6


class UploadError(VimeoError):
    """The upload helper could not complete a file transfer."""

    exit_code = 7


class APIError(VimeoError):
    """The API answered with a non-success status code.

    ``message`` is exactly the server-provided ``error`` field, or an empty
    string when the body carried none.
    """

    exit_code = 8

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        message: str = "",
        response: Response | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.message = message
        self.response = response
        super().__init__(f"{method} {url}: {status_code} {message}")


class AuthenticationError(APIError):
    """Authentication failed (401/403)."""

    exit_code = 3


class NotFoundError(APIError):
    """Resource not found (404)."""

    exit_code = 4


@dataclass(frozen=True)
class Rate:
    """Rate limit state reported by the X-RateLimit-* headers."""

    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None


class RateLimitError(APIError):
    """429 with no requests remaining in the current window."""

    exit_code = 9

    def __init__(self, *args: Any, rate: Rate | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.rate = rate or Rate()

    def __str__(self) -> str:
        return f"{super().__str__()} Reset in {self.rate.reset}."


def error_handler(func: F) -> F:
    """Decorator that catches VimeoError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except VimeoError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
