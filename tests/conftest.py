import bencodepy
import httpx
import pytest

from qbittorrent_client.factory import QBittorrentClientFactory
from qbittorrent_client.options import ClientOptions


HOST = "qbittorrent.lan:8080"
BASE_URL = f"http://{HOST}"


@pytest.fixture
def options():
    return ClientOptions(
        host=HOST,
        username="admin",
        password="adminadmin",
        user_agent="qbittorrent-client-tests",
        rate_limit_count=100,
        rate_limit_duration=1,
    )


@pytest.fixture
def make_client(options):
    """
    Build a client whose requests are answered by handler.

    Every request seen by the transport is appended to the returned list.
    """
    def factory(handler, options=options):
        requests = []

        def record(request):
            requests.append(request)
            return handler(request)

        client = QBittorrentClientFactory(options).create(transport=httpx.MockTransport(record))
        return client, requests

    return factory


@pytest.fixture
def torrent_record():
    """A /torrents/info entry as returned by qBittorrent 4.6."""
    return {
        "added_on": 1717000000,
        "amount_left": 0,
        "auto_tmm": False,
        "availability": -1,
        "category": "linux",
        "completed": 661651456,
        "completion_on": 1717000600,
        "content_path": "/downloads/debian-12.6.0-amd64-netinst.iso",
        "dl_limit": -1,
        "dlspeed": 0,
        "downloaded": 661651456,
        "downloaded_session": 0,
        "eta": 8640000,
        "f_l_piece_prio": False,
        "force_start": False,
        "hash": "1bd088ee9166a062cf4af09cf99720fa6e1a3133",
        "last_activity": 1717000600,
        "magnet_uri": "magnet:?xt=urn:btih:1bd088ee9166a062cf4af09cf99720fa6e1a3133",
        "max_ratio": -1,
        "max_seeding_time": -1,
        "name": "debian-12.6.0-amd64-netinst.iso",
        "num_complete": 120,
        "num_incomplete": 3,
        "num_leechs": 0,
        "num_seeds": 0,
        "priority": 0,
        "progress": 1,
        "ratio": 0.25,
        "ratio_limit": -2,
        "save_path": "/downloads",
        "seeding_time": 3600,
        "seeding_time_limit": -2,
        "seen_complete": 1717000600,
        "seq_dl": False,
        "size": 661651456,
        "state": "stalledUP",
        "super_seeding": False,
        "tags": "iso,debian",
        "time_active": 4200,
        "total_size": 661651456,
        "tracker": "http://bttracker.debian.org:6969/announce",
        "up_limit": -1,
        "uploaded": 165412864,
        "uploaded_session": 0,
        "upspeed": 0,
    }


@pytest.fixture
def torrent_path(tmp_path):
    """A small single-file .torrent on disk."""
    data = {
        b"announce": b"http://tracker.example/announce",
        b"info": {
            b"name": b"example.iso",
            b"length": 1048576,
            b"piece length": 262144,
            b"pieces": b"\x00" * 80,
        },
    }
    path = tmp_path / "example-1.torrent"
    path.write_bytes(bencodepy.encode(data))
    return path
