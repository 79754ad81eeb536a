import os

import pytest

from qbittorrent_client.errors import TorrentFileError
from qbittorrent_client.models import (
    AddTorrentOptions,
    FilterOptions,
    FilterState,
    State,
    Torrent,
)


class TestFilterOptions:
    def test_empty(self):
        assert FilterOptions().to_params() == {}

    def test_only_limit(self):
        assert FilterOptions(limit=20).to_params() == {"limit": 20}

    def test_state_vocabulary(self):
        params = FilterOptions(filter=FilterState.STALLED_UPLOADING).to_params()
        assert params == {"filter": "stalled_uploading"}

    def test_all_fields(self):
        filters = FilterOptions(
            filter="downloading",
            category="",
            tag="iso",
            sort="added_on",
            reverse=True,
            limit=5,
            offset=-5,
            hashes=["abc", "def"],
        )

        assert filters.to_params() == {
            "filter": "downloading",
            "category": "",
            "tag": "iso",
            "sort": "added_on",
            "reverse": True,
            "limit": 5,
            "offset": -5,
            "hashes": "abc|def",
        }


class TestTorrent:
    def test_parse(self, torrent_record):
        torrent = Torrent.model_validate(torrent_record)

        assert torrent.hash == "1bd088ee9166a062cf4af09cf99720fa6e1a3133"
        assert torrent.state == State.STALLED_UP
        assert torrent.is_private is None
        assert torrent.progress == 1.0

    def test_unknown_state(self, torrent_record):
        torrent_record["state"] = "stoppedUP"
        torrent = Torrent.model_validate(torrent_record)
        assert torrent.state == State.UNKNOWN


class TestAddTorrentOptions:
    def test_form_data_only_set_fields(self):
        torrent = AddTorrentOptions(path="a.torrent", category="linux")
        assert torrent.form_data() == {"category": "linux"}

    def test_wire_field_names(self):
        torrent = AddTorrentOptions(
            path="a.torrent",
            save_path="/downloads",
            category="linux",
            tags=["iso", "debian"],
            skip_checking=True,
            paused=False,
            root_folder=True,
            rename="Debian",
            up_limit=1024,
            dl_limit=2048,
            ratio_limit=1.5,
            seeding_time_limit=60,
            automatic_torrent_management=False,
            sequential_download=True,
            first_last_piece_priority=True,
        )

        assert torrent.form_data() == {
            "savepath": "/downloads",
            "category": "linux",
            "tags": "iso,debian",
            "skip_checking": "true",
            "paused": "false",
            "root_folder": "true",
            "rename": "Debian",
            "upLimit": "1024",
            "dlLimit": "2048",
            "ratioLimit": "1.5",
            "seedingTimeLimit": "60",
            "autoTMM": "false",
            "sequentialDownload": "true",
            "firstLastPiecePrio": "true",
        }

    def test_to_form_reads_file(self, torrent_path):
        torrent = AddTorrentOptions(path=str(torrent_path), paused=True)

        files, data = torrent.to_form()

        filename, content, content_type = files["torrents"]
        assert filename == "example-1.torrent"
        assert content == torrent_path.read_bytes()
        assert content_type == "application/x-bittorrent"
        assert data == {"paused": "true"}

    def test_to_form_missing_file(self, tmp_path):
        path = os.path.join(tmp_path, "missing.torrent")
        torrent = AddTorrentOptions(path=path)

        with pytest.raises(TorrentFileError) as exc_info:
            torrent.to_form()

        assert exc_info.value.action == "add torrent"
        assert path in exc_info.value.message
