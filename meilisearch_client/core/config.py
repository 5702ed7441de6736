import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOST = "http://127.0.0.1:7700"

# HTTP timeouts (client -> search service)
CONNECT_TIMEOUT_SEC = 1.0
READ_TIMEOUT_SEC = 5.0


@dataclass
class ClientSettings:
    host: str = DEFAULT_HOST
    api_key: Optional[str] = None
    connect_timeout: float = CONNECT_TIMEOUT_SEC
    read_timeout: float = READ_TIMEOUT_SEC


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_settings() -> ClientSettings:
    """Read client settings from MEILI_* environment variables."""
    host = os.getenv("MEILI_HOST", DEFAULT_HOST).strip().rstrip("/") or DEFAULT_HOST
    api_key = os.getenv("MEILI_API_KEY") or None

    return ClientSettings(
        host=host,
        api_key=api_key,
        connect_timeout=_env_float("MEILI_CONNECT_TIMEOUT_SEC", CONNECT_TIMEOUT_SEC),
        read_timeout=_env_float("MEILI_READ_TIMEOUT_SEC", READ_TIMEOUT_SEC),
    )
