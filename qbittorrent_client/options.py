from typing import Optional

from pydantic import BaseModel, ConfigDict

from .config import Config


class ClientOptions(BaseModel):
    """
    Connection settings for a qBittorrent WebUI.

    host is the host name and port without protocol, for example
    ``localhost``, ``example.com:3000`` or ``127.0.0.1:8080``.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    username: str
    password: str
    user_agent: Optional[str] = None
    rate_limit_count: Optional[int] = None  # Requests permitted per rate_limit_duration
    rate_limit_duration: Optional[float] = None  # Seconds before the limit resets
    use_ssl: bool = False  # Used only when host carries no scheme

    @property
    def base_url(self) -> str:
        host = self.host.rstrip("/")
        if "://" in host:
            return host
        protocol = "https" if self.use_ssl else "http"
        return f"{protocol}://{host}"

    @classmethod
    def from_config(cls) -> "ClientOptions":
        """Build options from the environment-backed Config."""
        return cls(
            host=Config.QBITTORRENT_HOST,
            username=Config.QBITTORRENT_USERNAME,
            password=Config.QBITTORRENT_PASSWORD,
            user_agent=Config.QBITTORRENT_USER_AGENT or None,
            rate_limit_count=Config.RATE_LIMIT_COUNT,
            rate_limit_duration=Config.RATE_LIMIT_DURATION,
            use_ssl=Config.QBITTORRENT_USE_SSL,
        )
