"""Exception hierarchy for the WorkOS client.

All exceptions inherit from :class:`WorkOsError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`workos.exit_codes`.
Library callers catch the specific subclasses; the command-line entry point in
:func:`workos.app.main` catches ``WorkOsError`` and exits with the matching
code.

Subclass hierarchy::

    WorkOsError             (exit 1)
    +-- ConfigError         (exit 2)
    +-- ApiError            (exit 4)
    |   +-- UnauthorizedError (exit 3)
    +-- ConnectionError_    (exit 6)
    +-- DeserializationError (exit 7)
    +-- KeySetLockError     (exit 8)

None of these are retried by the library.
"""

from __future__ import annotations

from typing import Optional

from workos.exit_codes import (
    EXIT_API_ERROR,
    EXIT_CONCURRENCY_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_DESERIALIZATION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_UNAUTHORIZED,
)


class WorkOsError(Exception):
    """Base exception for all WorkOS client errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`workos.exit_codes`.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(WorkOsError):
    """Raised when a required configuration value is absent or invalid.

    Always raised before any network call or lock acquisition.
    """

    exit_code = EXIT_CONFIG_ERROR


class KeySetLockError(WorkOsError):
    """Raised when the shared key-set lock is poisoned.

    A lock becomes poisoned when the caller holding it was terminated by a
    ``BaseException`` that is not an ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``) while fetching the key set.  Task cancellation in the
    async client does not poison the lock.
    """

    exit_code = EXIT_CONCURRENCY_ERROR


class ApiError(WorkOsError):
    """Raised when the API answers with an HTTP status of 400 or above.

    Server-side precondition violations (for example ``range_start`` sent
    together with ``after``) surface here as well.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code of the response.
        code: Machine-readable error code from the response body, if any.
        request_id: Value of the ``X-Request-ID`` response header, if any.
    """

    exit_code = EXIT_API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.request_id = request_id


class UnauthorizedError(ApiError):
    """Raised when the API rejects the API key (HTTP 401)."""

    exit_code = EXIT_UNAUTHORIZED


class ConnectionError_(WorkOsError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class DeserializationError(WorkOsError):
    """Raised when a response body is not JSON or does not match the expected model."""

    exit_code = EXIT_DESERIALIZATION_ERROR
