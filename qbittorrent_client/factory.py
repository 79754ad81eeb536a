"""
Factory for creating QBittorrentClient instances.

Builds the httpx client once from ClientOptions, wraps it in the rate
limiter and hands its cookie jar to the new client.
"""

from typing import Dict, Optional

import httpx

from .client import QBittorrentClient
from .options import ClientOptions
from .rate_limiter import DEFAULT_RATE_COUNT, DEFAULT_RATE_DURATION, RateLimiter


class QBittorrentClientFactory:
    def __init__(self, options: ClientOptions):
        self.options = options

    def create(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> QBittorrentClient:
        """
        Create a client.

        Args:
            transport: Optional httpx transport, e.g. httpx.MockTransport

        Returns:
            A QBittorrentClient that is not yet logged in
        """
        rate_count = self.options.rate_limit_count
        if rate_count is None:
            rate_count = DEFAULT_RATE_COUNT
        rate_duration = self.options.rate_limit_duration
        if rate_duration is None:
            rate_duration = DEFAULT_RATE_DURATION

        client = httpx.AsyncClient(
            headers=self.get_headers(),
            transport=transport,
        )
        return QBittorrentClient(
            host=self.options.base_url,
            username=self.options.username,
            password=self.options.password,
            cookies=client.cookies,
            client=RateLimiter(client, rate_count, rate_duration),
        )

    def get_headers(self) -> Dict[str, str]:
        # qBittorrent rejects requests whose Referer does not match the host
        headers = {"Referer": self.options.base_url}
        if self.options.user_agent:
            headers["User-Agent"] = self.options.user_agent
        return headers
