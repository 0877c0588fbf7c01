"""Numeric process exit codes used by the ``workos`` command-line tool.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~workos.exceptions.WorkOsError` subclass.  Shell
scripts can inspect the exit code to tell a rejected API key apart from a
network outage without parsing stderr.

Example::

    $ workos events list
    $ echo $?
    3   # EXIT_UNAUTHORIZED -- the API key was rejected
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_CONFIG_ERROR = 2
"""A required configuration value (API key, client ID) is missing or invalid."""

EXIT_UNAUTHORIZED = 3
"""The API rejected the credentials (HTTP 401)."""

EXIT_API_ERROR = 4
"""The API returned an error status other than 401."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_DESERIALIZATION_ERROR = 7
"""The response body was not valid JSON or did not match the expected shape."""

EXIT_CONCURRENCY_ERROR = 8
"""A shared lock could not be acquired because a previous holder aborted."""
