"""
qbittorrent-client - Async client for the qBittorrent WebUI API.

Sends login, torrent listing and torrent upload requests through a single
rate-limited dispatcher and turns the daemon's replies into typed results
or ClientError exceptions.
"""

import loguru

from .client import QBittorrentClient
from .errors import ClientError
from .factory import QBittorrentClientFactory
from .models import AddTorrentOptions, FilterOptions, FilterState, State, Torrent
from .options import ClientOptions
from .response import Response
from .status import Failure, Status, Success

loguru.logger.disable("qbittorrent_client")

__version__ = "0.1.0"
__all__ = [
    "QBittorrentClient",
    "QBittorrentClientFactory",
    "ClientOptions",
    "ClientError",
    "Response",
    "Status",
    "Success",
    "Failure",
    "FilterOptions",
    "FilterState",
    "State",
    "Torrent",
    "AddTorrentOptions",
]
