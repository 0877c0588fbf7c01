"""Client configuration resolution from arguments and the environment.

:class:`~workos.models.ClientConfig` can always be built directly.  This
module adds the precedence chain used by :meth:`WorkOs.from_env
<workos.client.WorkOs.from_env>` and the command-line tool:

Precedence (high to low):
    1. Explicit arguments (CLI flags)
    2. Environment variables (``WORKOS_API_KEY``, ``WORKOS_CLIENT_ID``,
       ``WORKOS_BASE_URL``, ``WORKOS_TIMEOUT``)
    3. Defaults declared on :class:`~workos.models.ClientConfig`

Secret values may also be given as source descriptors (``env:VAR`` or
``file:/path``), resolved by :func:`resolve_credential`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from workos.exceptions import ConfigError
from workos.models import ClientConfig

ENV_API_KEY = "WORKOS_API_KEY"
ENV_CLIENT_ID = "WORKOS_CLIENT_ID"
ENV_BASE_URL = "WORKOS_BASE_URL"
ENV_TIMEOUT = "WORKOS_TIMEOUT"


def resolve_credential(value: str) -> str:
    """Resolve a secret from a literal value or a source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - anything else -- returned unchanged

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if value.startswith("env:"):
        var_name = value[4:]
        resolved = os.environ.get(var_name)
        if resolved is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {value})"
            )
        return resolved

    if value.startswith("file:"):
        path = Path(value[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {value})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    return value


def load_config(
    api_key: Optional[str] = None,
    client_id: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    verify_ssl: Optional[bool] = None,
) -> ClientConfig:
    """Resolve a :class:`~workos.models.ClientConfig` with the precedence chain.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If no API key is found or a value fails validation.
    """
    api_key = api_key or os.environ.get(ENV_API_KEY)
    if not api_key:
        raise ConfigError(
            f"No API key configured: pass --api-key or set {ENV_API_KEY}"
        )

    values: dict[str, Any] = {"api_key": resolve_credential(api_key)}

    client_id = client_id or os.environ.get(ENV_CLIENT_ID)
    if client_id:
        values["client_id"] = client_id

    base_url = base_url or os.environ.get(ENV_BASE_URL)
    if base_url:
        values["base_url"] = base_url

    if timeout is None and os.environ.get(ENV_TIMEOUT):
        timeout = _parse_timeout(os.environ[ENV_TIMEOUT])
    if timeout is not None:
        values["timeout"] = timeout

    if verify_ssl is not None:
        values["verify_ssl"] = verify_ssl

    try:
        return ClientConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc


def _parse_timeout(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {raw!r}") from exc
