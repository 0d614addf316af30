"""Client configuration resolved from arguments, the environment and .env files.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (``<prefix><NAME>``)
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from api_wrapper.config import ClientConfig

    # API_WRAPPER_BASE_URL, API_WRAPPER_CLIENT_ID and API_WRAPPER_CLIENT_SECRET
    # must be set in the environment or in a .env file
    config = ClientConfig.from_env()

    # Explicit values take precedence
    config = ClientConfig.from_env(language="nl", scopes=["invoices", "contacts"])
    ```

Credentials are never logged; only their source is.
"""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from api_wrapper.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "API_WRAPPER_"
DEFAULT_TIMEOUT = 30.0

_SECRET_FIELDS = frozenset({"CLIENT_SECRET", "REFRESH_TOKEN"})

_dotenv_lock = Lock()
_dotenv_loaded_paths: set[str | None] = set()


def _ensure_dotenv_loaded(dotenv_path: str | None) -> None:
    """Load a .env file into the environment once per path (thread-safe)."""
    if dotenv_path in _dotenv_loaded_paths:
        return

    with _dotenv_lock:
        if dotenv_path in _dotenv_loaded_paths:
            return

        # Existing environment variables win over .env values
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.debug(f"Loaded .env file for client configuration: {dotenv_path or '(auto-discovered)'}")
        _dotenv_loaded_paths.add(dotenv_path)


def _resolve(
    name: str,
    *,
    prefix: str,
    value: str | None = None,
    default: str | None = None,
    required: bool = False,
) -> str | None:
    env_var_name = f"{prefix}{name}"

    if value is not None:
        result, source = value, "explicit parameter"
    elif env_var_name in os.environ:
        result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
    else:
        result, source = default, "default value"

    if result is not None:
        shown = "***" if name in _SECRET_FIELDS else result
        logger.debug(f"Resolved {name} from {source}: {shown}")
    elif required:
        raise CredentialNotFoundError(
            f"Required setting {name} not found (checked env var: {env_var_name})",
            env_var_name=env_var_name,
        )

    return result


@dataclass(repr=False)
class ClientConfig:
    """Settings needed to build a Provider and an ApiClient.

    Attributes:
        base_url: API root every endpoint path is appended to.
        client_id: OAuth2 client identifier.
        client_secret: OAuth2 client secret.
        token_url: Token endpoint; derived from ``base_url`` when omitted.
        refresh_token: Refresh credential; without one the client falls
            back to the client-credentials grant.
        scopes: Scopes requested on every exchange.
        language: Value for the Accept-Language header.
        timeout: HTTP timeout in seconds.
    """

    base_url: str
    client_id: str
    client_secret: str
    token_url: str | None = None
    refresh_token: str | None = None
    scopes: list[str] = field(default_factory=list)
    language: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
        base_url: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        token_url: str | None = None,
        refresh_token: str | None = None,
        scopes: Iterable[str] | None = None,
        language: str | None = None,
        timeout: float | None = None,
    ) -> "ClientConfig":
        """Resolve a configuration from explicit values, environment and .env.

        Args:
            prefix: Environment variable prefix.
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load a .env file at all.
            base_url, client_id, client_secret, token_url, refresh_token,
            scopes, language, timeout: Explicit values, highest priority.

        Raises:
            CredentialNotFoundError: If BASE_URL, CLIENT_ID or CLIENT_SECRET
                cannot be resolved.
            ValueError: If TIMEOUT is not a number.
        """
        if load_dotenv:
            _ensure_dotenv_loaded(dotenv_path)

        if scopes is not None:
            resolved_scopes = list(scopes)
        else:
            scopes_str = _resolve("SCOPES", prefix=prefix, default="")
            resolved_scopes = scopes_str.split() if scopes_str else []

        if timeout is not None:
            resolved_timeout = float(timeout)
        else:
            resolved_timeout = float(_resolve("TIMEOUT", prefix=prefix, default=str(DEFAULT_TIMEOUT)))

        return cls(
            base_url=_resolve("BASE_URL", prefix=prefix, value=base_url, required=True),
            client_id=_resolve("CLIENT_ID", prefix=prefix, value=client_id, required=True),
            client_secret=_resolve("CLIENT_SECRET", prefix=prefix, value=client_secret, required=True),
            token_url=_resolve("TOKEN_URL", prefix=prefix, value=token_url),
            refresh_token=_resolve("REFRESH_TOKEN", prefix=prefix, value=refresh_token),
            scopes=resolved_scopes,
            language=_resolve("LANGUAGE", prefix=prefix, value=language),
            timeout=resolved_timeout,
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, client_id={self.client_id!r}, "
            f"client_secret='***', scopes={self.scopes!r}, language={self.language!r})"
        )
