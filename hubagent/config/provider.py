"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol, Union

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PlatformConfig:
    """Hub platform connection configuration."""
    url: str
    token: str
    timeout: float
    verify_ssl: bool
    ca_cert_path: Optional[str]

    @property
    def verify(self) -> Union[bool, str]:
        """Value for the HTTP client verify option."""
        return self.ca_cert_path if self.ca_cert_path else self.verify_ssl


@dataclass
class WatcherConfig:
    """Command watcher configuration."""
    poll_interval: float


@dataclass
class KubeConfig:
    """Kubernetes access configuration."""
    kubeconfig: Optional[str]


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_platform_config(self) -> PlatformConfig:
        """Get platform configuration."""
        ...

    def get_watcher_config(self) -> WatcherConfig:
        """Get watcher configuration."""
        ...

    def get_kube_config(self) -> KubeConfig:
        """Get Kubernetes configuration."""
        ...

    def get_log_level(self) -> str:
        """Get the log level name."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_platform_config(self) -> PlatformConfig:
        """Get platform configuration from environment variables."""
        url = os.getenv("HUB_PLATFORM_URL")
        token = os.getenv("HUB_TOKEN")

        missing = [name for name, value in (("HUB_PLATFORM_URL", url), ("HUB_TOKEN", token)) if not value]
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them from the hub-agent token secret."
            )

        return PlatformConfig(
            url=url,
            token=token,
            timeout=float(os.getenv("HUB_PLATFORM_TIMEOUT", "10")),
            verify_ssl=os.getenv("HUB_SSL_VERIFY", "true").lower() == "true",
            ca_cert_path=os.getenv("HUB_CA_CERT") or None,
        )

    def get_watcher_config(self) -> WatcherConfig:
        """Get watcher configuration from environment variables."""
        poll_interval = float(os.getenv("COMMANDS_POLL_INTERVAL", "5"))
        if poll_interval <= 0:
            raise ValueError("COMMANDS_POLL_INTERVAL must be a positive number of seconds")

        return WatcherConfig(poll_interval=poll_interval)

    def get_kube_config(self) -> KubeConfig:
        """Get Kubernetes configuration from environment variables."""
        return KubeConfig(kubeconfig=os.getenv("KUBECONFIG") or None)

    def get_log_level(self) -> str:
        """Get the log level from environment variables."""
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

        return level
