"""
Async client for the qBittorrent WebUI API.

Every call goes through QBittorrentClient.request, which waits on the rate
limiter, sends exactly one HTTP request over the shared httpx client and
returns the unread response. The endpoint methods hand that response to
the matching handler in .response.

Usage:
    from qbittorrent_client import ClientOptions, QBittorrentClientFactory

    options = ClientOptions(host="localhost:8080", username="admin", password="secret")
    async with QBittorrentClientFactory(options).create() as client:
        await client.login()
        response = await client.get_torrents(FilterOptions(limit=20))
        torrents = response.get_result("get torrents")
"""

import time
from typing import Dict, List, Optional

import httpx

from .errors import TransportFailureError, UnsupportedMethodError
from .logger import logger
from .models import AddTorrentOptions, FilterOptions, Torrent
from .rate_limiter import RateLimiter
from .response import Response, deserialize_response, handle_status_response
from .status import Status


API_PATH = "/api/v2"
SUPPORTED_METHODS = ("GET", "POST")

# Rate limiter waits longer than this are logged
WAIT_THRESHOLD = 0.2


class QBittorrentClient:
    """
    A client for the qBittorrent WebUI API.

    Created by a QBittorrentClientFactory. cookies is the cookie jar of the
    underlying httpx client: the transport stores the session cookie from
    every Set-Cookie header and sends it on later requests. Nothing else
    writes to it.

    Not safe for unsynchronized concurrent use; serialize calls or create
    one client per task.
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        cookies: httpx.Cookies,
        client: RateLimiter[httpx.AsyncClient],
    ):
        self.host = host
        self.username = username
        self.password = password
        self.cookies = cookies
        self.client = client

    @classmethod
    def from_options(cls, options) -> "QBittorrentClient":
        from .factory import QBittorrentClientFactory

        return QBittorrentClientFactory(options).create()

    async def __aenter__(self) -> "QBittorrentClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.get_ref().aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, object]] = None,
        files: Optional[Dict[str, tuple]] = None,
    ) -> httpx.Response:
        """
        Send one request to the API.

        GET data is sent as the query string, POST data as a form, or as
        multipart form fields alongside files.

        Returns:
            The httpx response with its body not yet read

        Raises:
            UnsupportedMethodError: method is not GET or POST
            TransportFailureError: the request could not be completed
        """
        method = method.upper()
        action = f"send {method} {endpoint} request"
        if method not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(
                action=action,
                message=f"Method {method} is not supported",
            )
        logger.trace(f"Sending request {method} {endpoint}")
        url = f"{self.host}{API_PATH}{endpoint}"
        try:
            if method == "GET":
                request = self.client.get_ref().build_request(method, url, params=data)
            else:
                request = self.client.get_ref().build_request(method, url, data=data, files=files)
        except httpx.InvalidURL as e:
            raise TransportFailureError(action=action, message=str(e)) from e
        client = await self.wait_for_client()
        start = time.perf_counter()
        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportFailureError(action=action, message=str(e) or repr(e)) from e
        finally:
            elapsed = time.perf_counter() - start
            logger.trace(f"Received response after {elapsed:.3f}")
        return response

    async def wait_for_client(self) -> httpx.AsyncClient:
        start = time.perf_counter()
        client = await self.client.acquire()
        duration = time.perf_counter() - start
        if duration > WAIT_THRESHOLD:
            logger.trace(f"Waited {duration:.3f} for rate limiter")
        return client

    # -------------------------------------------------------------------------
    # Auth Methods
    # -------------------------------------------------------------------------

    async def login(self) -> Status:
        """
        Login and store the session cookie.

        See https://github.com/qbittorrent/qBittorrent/wiki/WebUI-API-(qBittorrent-4.1)#login
        """
        method = "POST"
        endpoint = "/auth/login"
        data = {
            "username": self.username,
            "password": self.password,
        }
        response = await self.request(method, endpoint, data)
        status = await handle_status_response(method, endpoint, response)
        logger.debug(f"Login to {self.host} as {self.username}: {status}")
        return status

    # -------------------------------------------------------------------------
    # Torrent Methods
    # -------------------------------------------------------------------------

    async def get_torrents(self, filters: Optional[FilterOptions] = None) -> Response[List[Torrent]]:
        """
        Get all torrents matching the filter.

        See https://github.com/qbittorrent/qBittorrent/wiki/WebUI-API-(qBittorrent-4.1)#get-torrent-list
        """
        method = "GET"
        endpoint = "/torrents/info"
        filters = filters or FilterOptions()
        response = await self.request(method, endpoint, filters.to_params())
        return await deserialize_response(method, endpoint, response, List[Torrent])

    async def add_torrent(self, torrent: AddTorrentOptions) -> Response[bool]:
        """
        Add a torrent from a .torrent file.

        The result is whether the daemon answered with a success status; the
        body is ignored.

        See https://github.com/qbittorrent/qBittorrent/wiki/WebUI-API-(qBittorrent-4.1)#add-new-torrent
        """
        method = "POST"
        endpoint = "/torrents/add"
        files, data = torrent.to_form()
        response = await self.request(method, endpoint, data, files)
        await response.aclose()
        return Response[bool](
            status_code=response.status_code,
            result=response.is_success,
        )
