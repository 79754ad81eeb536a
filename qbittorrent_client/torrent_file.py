"""
Reading .torrent files from disk.

read_torrent_bytes loads a file for upload. TorrentFile additionally parses
the bencoded metadata so callers can show what they are about to add.

Both raise TorrentFileError. InvalidTorrentFileError is raised when the file
exists but is not a valid bencoded torrent.
"""

import hashlib
import os

import bencodepy

from .errors import TorrentFileError


class InvalidTorrentFileError(TorrentFileError):
    """Raised when torrent file is not valid bencode format."""
    pass


def read_torrent_bytes(torrent_path, action="read torrent file"):
    """Read a torrent file fully into memory."""
    try:
        with open(torrent_path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise TorrentFileError(
            action=action,
            message=f"{e.strerror or e}: {torrent_path}",
            domain=None,
        ) from e


class TorrentFile:
    def __init__(self, torrent_path):
        self.path = torrent_path
        self.content = read_torrent_bytes(torrent_path)

        try:
            torrent_data_raw = bencodepy.decode(self.content)
        except bencodepy.BencodeDecodeError as e:
            raise InvalidTorrentFileError(
                action="parse torrent file",
                message=f"Invalid bencode format: {e}",
                domain=None,
            ) from e

        if not isinstance(torrent_data_raw, dict) or not isinstance(torrent_data_raw.get(b'info'), dict):
            raise InvalidTorrentFileError(
                action="parse torrent file",
                message="Torrent file missing required 'info' dictionary",
                domain=None,
            )

        # Raw info is kept for hashing, it needs the original bytes
        self._raw_info = torrent_data_raw[b'info']
        self.info = self._normalize_dict(self._raw_info)
        self.is_multi_file = 'files' in self.info

    def _normalize_dict(self, d):
        """Recursively convert byte keys to strings, preserving byte values needed for hashing."""
        result = {}
        for k, v in d.items():
            key = k.decode('utf-8', errors='ignore') if isinstance(k, bytes) else k
            if isinstance(v, dict):
                value = self._normalize_dict(v)
            elif isinstance(v, list):
                value = [self._normalize_dict(item) if isinstance(item, dict) else self._decode(item) for item in v]
            elif key == 'pieces':
                value = v
            else:
                value = self._decode(v)
            result[key] = value
        return result

    @staticmethod
    def _decode(value):
        if isinstance(value, bytes):
            try:
                return value.decode('utf-8')
            except UnicodeDecodeError:
                return value
        return value

    @property
    def name(self):
        return self.info.get('name', os.path.basename(self.path))

    def files(self):
        if self.is_multi_file:
            return [os.path.join(self.info['name'], *file['path']) for file in self.info['files']]
        else:
            return [self.info['name']]

    def info_hash(self):
        return hashlib.sha1(bencodepy.encode(self._raw_info)).hexdigest()

    def size(self):
        if self.is_multi_file:
            return sum(file['length'] for file in self.info['files'])
        else:
            return self.info['length']
