"""
Request and response models for the qBittorrent WebUI API.

FilterOptions and AddTorrentOptions describe what is sent; Torrent describes
what /torrents/info returns. Field names sent over the wire follow the
WebUI API and must not change.

See https://github.com/qbittorrent/qBittorrent/wiki/WebUI-API-(qBittorrent-4.1)
"""

import os
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, field_serializer

from .torrent_file import read_torrent_bytes


class FilterState(str, Enum):
    """Torrent states accepted by the list filter."""

    ALL = "all"
    DOWNLOADING = "downloading"
    SEEDING = "seeding"
    COMPLETED = "completed"
    PAUSED = "paused"
    ACTIVE = "active"
    INACTIVE = "inactive"
    RESUMED = "resumed"
    STALLED = "stalled"
    STALLED_UPLOADING = "stalled_uploading"
    STALLED_DOWNLOADING = "stalled_downloading"
    ERRORED = "errored"


class FilterOptions(BaseModel):
    """
    Query for the torrent list. Every field is optional and an unset field
    places no constraint on the result.
    """

    filter: Optional[FilterState] = None
    category: Optional[str] = None  # "" means without category
    tag: Optional[str] = None  # "" means without tag
    sort: Optional[str] = None  # Any field name of the torrent record
    reverse: Optional[bool] = None
    limit: Optional[int] = None
    offset: Optional[int] = None  # Negative counts from the end
    hashes: Optional[List[str]] = None

    @field_serializer("hashes")
    def _join_hashes(self, hashes: Optional[List[str]]) -> Optional[str]:
        if hashes is None:
            return None
        return "|".join(hashes)

    def to_params(self) -> Dict[str, object]:
        """Query parameters for the fields that are set."""
        return self.model_dump(mode="json", exclude_none=True)


class State(str, Enum):
    """Torrent state as reported by the daemon."""

    ERROR = "error"
    MISSING_FILES = "missingFiles"
    UPLOADING = "uploading"
    PAUSED_UP = "pausedUP"
    QUEUED_UP = "queuedUP"
    STALLED_UP = "stalledUP"
    CHECKING_UP = "checkingUP"
    FORCED_UP = "forcedUP"
    ALLOCATING = "allocating"
    DOWNLOADING = "downloading"
    META_DL = "metaDL"
    PAUSED_DL = "pausedDL"
    QUEUED_DL = "queuedDL"
    STALLED_DL = "stalledDL"
    CHECKING_DL = "checkingDL"
    FORCED_DL = "forcedDL"
    CHECKING_RESUME_DATA = "checkingResumeData"
    MOVING = "moving"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        # Newer daemons add states (stoppedUP, stoppedDL, ...)
        return cls.UNKNOWN


class Torrent(BaseModel):
    """A torrent record from /torrents/info."""

    added_on: int
    amount_left: int
    auto_tmm: bool
    availability: float
    category: str
    completed: int
    completion_on: int
    content_path: str
    dl_limit: int  # -1 if unlimited
    dlspeed: int
    downloaded: int
    downloaded_session: int
    eta: int
    f_l_piece_prio: bool
    force_start: bool
    hash: str
    is_private: Optional[bool] = None  # Added in 5.0.0
    last_activity: int
    magnet_uri: str
    max_ratio: float
    max_seeding_time: int
    name: str
    num_complete: int
    num_incomplete: int
    num_leechs: int
    num_seeds: int
    priority: int  # -1 if queuing is disabled or torrent is in seed mode
    progress: float
    ratio: float
    ratio_limit: float
    save_path: str
    seeding_time: int
    seeding_time_limit: int
    seen_complete: int
    seq_dl: bool
    size: int
    state: State
    super_seeding: bool
    tags: str  # Comma separated
    time_active: int
    total_size: int
    tracker: str
    up_limit: int  # -1 if unlimited
    uploaded: int
    uploaded_session: int
    upspeed: int


# Attribute name -> WebUI form field name
FORM_FIELDS = {
    "save_path": "savepath",
    "category": "category",
    "tags": "tags",
    "skip_checking": "skip_checking",
    "paused": "paused",
    "root_folder": "root_folder",
    "rename": "rename",
    "up_limit": "upLimit",
    "dl_limit": "dlLimit",
    "ratio_limit": "ratioLimit",
    "seeding_time_limit": "seedingTimeLimit",
    "automatic_torrent_management": "autoTMM",
    "sequential_download": "sequentialDownload",
    "first_last_piece_priority": "firstLastPiecePrio",
}


class AddTorrentOptions(BaseModel):
    """A .torrent file to upload and the settings to apply to it."""

    path: str
    save_path: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    skip_checking: Optional[bool] = None
    paused: Optional[bool] = None
    root_folder: Optional[bool] = None
    rename: Optional[str] = None
    up_limit: Optional[int] = None  # bytes/second
    dl_limit: Optional[int] = None  # bytes/second
    ratio_limit: Optional[float] = None
    seeding_time_limit: Optional[int] = None  # minutes
    automatic_torrent_management: Optional[bool] = None
    sequential_download: Optional[bool] = None
    first_last_piece_priority: Optional[bool] = None

    def form_data(self) -> Dict[str, str]:
        """Text parts of the multipart form, for the fields that are set."""
        data = {}
        for attribute, field in FORM_FIELDS.items():
            value = getattr(self, attribute)
            if value is None:
                continue
            data[field] = _form_value(value)
        return data

    def to_form(self) -> Tuple[Dict[str, Tuple[str, bytes, str]], Dict[str, str]]:
        """
        Build the multipart form.

        The torrent file is read fully into memory here, so a missing file
        fails before any request is made.

        Returns:
            (files, data) as accepted by httpx
        """
        content = read_torrent_bytes(self.path, action="add torrent")
        filename = os.path.basename(self.path)
        files = {"torrents": (filename, content, "application/x-bittorrent")}
        return files, self.form_data()


def _form_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(value)
    return str(value)
