"""
Plain-text status markers returned by some qBittorrent endpoints.

Endpoints such as /auth/login answer with a bare "Ok." or "Fails." body
instead of JSON. Anything else is kept verbatim so unexpected replies are
never silently dropped.
"""

from dataclasses import dataclass
from enum import Enum


SUCCESS_TEXT = "Ok."
FAILURE_TEXT = "Fails."


class StatusKind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    OTHER = "other"


@dataclass(frozen=True)
class Status:
    kind: StatusKind
    text: str

    @classmethod
    def parse(cls, text: str) -> "Status":
        """Map a response body to a status by exact literal comparison."""
        if text == SUCCESS_TEXT:
            return Success
        if text == FAILURE_TEXT:
            return Failure
        return cls.other(text)

    @classmethod
    def other(cls, text: str) -> "Status":
        return cls(StatusKind.OTHER, text)

    @property
    def is_success(self) -> bool:
        return self.kind == StatusKind.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.kind == StatusKind.FAILURE

    def __str__(self) -> str:
        if self.kind == StatusKind.OTHER:
            return f"Other({self.text!r})"
        return self.kind.value.capitalize()


Success = Status(StatusKind.SUCCESS, SUCCESS_TEXT)
Failure = Status(StatusKind.FAILURE, FAILURE_TEXT)
