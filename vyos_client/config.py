"""Client configuration."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from vyos_client.errors import VyOSConfigError

DEFAULT_TIMEOUT = 30.0

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings, fixed for the lifetime of a client."""

    host: str
    api_key: str = ""
    skip_tls_verify: bool = False
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return self.host.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    @classmethod
    def from_env(
        cls,
        host: Optional[str] = None,
        api_key: Optional[str] = None,
        skip_tls_verify: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Create ClientConfig from environment variables (and .env).

        Explicit arguments override the environment.
        """
        load_dotenv()

        host = host or os.getenv("VYOS_HOST", "").strip()
        if not host:
            raise VyOSConfigError("VYOS_HOST not configured.")

        if api_key is None:
            api_key = os.getenv("VYOS_API_KEY", "")
        if skip_tls_verify is None:
            skip_tls_verify = _env_flag("VYOS_SKIP_TLS_VERIFY")
        if timeout is None:
            raw = os.getenv("VYOS_TIMEOUT", str(DEFAULT_TIMEOUT)).strip()
            try:
                timeout = float(raw)
            except ValueError:
                raise VyOSConfigError(f"Invalid VYOS_TIMEOUT={raw!r}")

        return cls(
            host=host,
            api_key=api_key,
            skip_tls_verify=skip_tls_verify,
            timeout=timeout,
        )
