"""
Exception hierarchy for the qBittorrent client.

Every failure in the request pipeline is raised to the immediate caller as
one of these exceptions. Each carries the action that was being attempted,
a domain tag and, where one was observed, the HTTP status code.

- UnsupportedMethodError: method not implemented by the dispatcher
- TransportFailureError: network or connection failure while sending
- BodyReadError: response received but its body could not be read
- DeserializationError: body read but not in the expected JSON shape
- RemoteError: the response envelope carries an error payload
- MissingStatusCodeError, InvalidStatusCodeError,
  UnsuccessfulStatusCodeError, MissingResultError: result extraction
- TorrentFileError: local .torrent file could not be read
"""

from typing import Optional


DOMAIN = "qBittorrent API"
DESERIALIZATION_DOMAIN = "deserialization"


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        action: str,
        message: str,
        domain: Optional[str] = DOMAIN,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.action = action
        self.message = message
        self.domain = domain
        self.status_code = status_code

    def __str__(self) -> str:
        text = f"Failed to {self.action}: {self.message}"
        if self.status_code is not None:
            text += f" (status code {self.status_code})"
        return text


class UnsupportedMethodError(ClientError):
    """Raised when a request uses an HTTP method the API does not need."""


class TransportFailureError(ClientError):
    """Raised when the request could not be sent or no response arrived."""


class BodyReadError(ClientError):
    """Raised when the response body could not be read."""


class DeserializationError(ClientError):
    """Raised when the response body did not decode to the expected shape."""


class RemoteError(ClientError):
    """Raised when the daemon reported an error in the response envelope."""


class MissingStatusCodeError(ClientError):
    pass


class InvalidStatusCodeError(ClientError):
    pass


class UnsuccessfulStatusCodeError(ClientError):
    pass


class MissingResultError(ClientError):
    pass


class TorrentFileError(ClientError):
    """Raised when a local torrent file is missing or unreadable."""
