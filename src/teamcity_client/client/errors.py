"""Typed exceptions raised by the TeamCity client."""

from __future__ import annotations


class TeamCityError(Exception):
    """Base exception for teamcity-client."""


class TeamCityConnectionError(TeamCityError):
    """The HTTP transport failed before a response was received."""


class DecodeError(TeamCityError):
    """A response body could not be decoded into the expected shape."""


class ConfigurationError(TeamCityError):
    """No usable server configuration could be resolved."""


class ValidationError(TeamCityError):
    """Client-side validation failed before any request was made."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Validation error")


class RestError(TeamCityError):
    """Non-success status returned by the server."""

    def __init__(
        self,
        status_code: int,
        method: str,
        resource: str,
        body: str = "",
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.resource = resource
        self.body = body
        super().__init__(
            f"Error '{status_code}' when performing '{method}' operation"
            f" - {resource}: {body}"
        )


class AuthenticationError(RestError):
    """Authentication failed (401/403)."""


class NotFoundError(RestError):
    """Resource not found (404)."""


class ConflictError(RestError):
    """Resource conflict (409)."""


_STATUS_ERRORS: dict[int, type[RestError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
}


def rest_error(status_code: int, method: str, resource: str, body: str) -> RestError:
    """Build the most specific RestError for *status_code*."""
    cls = _STATUS_ERRORS.get(status_code, RestError)
    return cls(status_code, method, resource, body)
