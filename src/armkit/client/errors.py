"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ArmKitError(Exception):
    """Base exception for armkit."""

    exit_code: int = 1


class TransportError(ArmKitError):
    """The request never produced an HTTP response."""

    exit_code = 2


class UrlConstructionError(ArmKitError):
    """A request URL could not be built from its path template."""

    exit_code = 3


class HttpResponseError(ArmKitError):
    """The service answered with a status the operation does not expect."""

    exit_code = 4

    def __init__(
        self,
        status_code: int,
        detail: str = "",
        *,
        error_code: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.detail = detail
        message = f"Service returned {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class AuthenticationError(HttpResponseError):
    """Authentication or authorization failed (401/403)."""

    exit_code = 5


class ResourceNotFoundError(HttpResponseError):
    """Resource not found (404)."""

    exit_code = 6


class ResourceConflictError(HttpResponseError):
    """Resource conflict (409)."""

    exit_code = 7


class DecodeError(ArmKitError):
    """The response body is not valid JSON or does not match the schema."""

    exit_code = 8


class ConfigurationError(ArmKitError):
    """Missing or invalid CLI configuration."""

    exit_code = 9


_STATUS_ERRORS: dict[int, type[HttpResponseError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceConflictError,
}


def error_for_status(status_code: int, detail: str = "") -> HttpResponseError:
    """Build the ``HttpResponseError`` subclass matching *status_code*."""
    cls = _STATUS_ERRORS.get(status_code, HttpResponseError)
    return cls(status_code, detail)


def error_handler(func: F) -> F:
    """Decorator that catches ArmKitError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ArmKitError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
