"""Application settings loaded from environment variables."""

from __future__ import annotations

from ipaddress import ip_address

from pydantic_settings import BaseSettings


class InsecureBindError(RuntimeError):
    """Raised when the server would listen beyond loopback without opting in."""


class Settings(BaseSettings):
    """Wellcheck assessment server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default: assessment records carry personal health details and
    # there is no auth layer. Opt into `0.0.0.0` explicitly for remote access.
    wellcheck_host: str = "127.0.0.1"
    wellcheck_port: int = 8001
    wellcheck_log_level: str = "info"
    wellcheck_allow_insecure_bind: bool = False

    # Client identifiers
    # The counter starts from the last issued value; the first id is start + 1.
    client_id_start: int = 0
    client_id_width: int = 4

    @property
    def log_level(self) -> str:
        return self.wellcheck_log_level.upper()

    def bind_address(self) -> tuple[str, int]:
        """Host and port to serve on, refusing a public host unless explicitly allowed."""
        host = self.wellcheck_host
        if not self.wellcheck_allow_insecure_bind and not is_loopback_host(host):
            raise InsecureBindError(
                f"Refusing to serve assessment records on {host}: there is no auth layer. "
                "Set WELLCHECK_ALLOW_INSECURE_BIND=true to override (unsafe)."
            )
        return host, self.wellcheck_port


def is_loopback_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
