"""
Response handling for the qBittorrent API.

Two ways of interpreting a raw httpx response:

- handle_status_response: plain-text bodies such as "Ok." / "Fails."
  are mapped to a Status.
- deserialize_response: JSON bodies are decoded with pydantic into a
  Response envelope. The status code observed on the wire always
  overwrites whatever the body claims.

Response.get_result then unwraps the envelope into its result, or raises
the matching ClientError.
"""

import json
from typing import Any, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import (
    DESERIALIZATION_DOMAIN,
    DOMAIN,
    BodyReadError,
    DeserializationError,
    InvalidStatusCodeError,
    MissingResultError,
    MissingStatusCodeError,
    RemoteError,
    UnsuccessfulStatusCodeError,
)
from .logger import logger
from .status import Status


T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    status_code: Optional[int] = None
    result: Optional[T] = None
    error: Optional[Any] = None
    id: Optional[int] = None

    def get_result(self, action: str) -> T:
        """
        Get the result.

        Raises if, checked in this order:
        - the error field is set
        - the status code is not set
        - the status code is not valid
        - the status code is not successful
        - the result is not set
        """
        if self.error is not None:
            raise RemoteError(
                action=action,
                message=_error_text(self.error),
                status_code=self.status_code,
            )
        if self.status_code is None:
            raise MissingStatusCodeError(
                action=action,
                message="Status code is not set",
            )
        if not 100 <= self.status_code <= 999:
            raise InvalidStatusCodeError(
                action=action,
                message="Status code is invalid",
                status_code=self.status_code,
            )
        if not httpx.codes.is_success(self.status_code):
            reason = httpx.codes.get_reason_phrase(self.status_code) or str(self.status_code)
            raise UnsuccessfulStatusCodeError(
                action=action,
                message=f"Status code indicated failure: {reason}",
                status_code=self.status_code,
            )
        if self.result is None:
            raise MissingResultError(
                action=action,
                message="Result is not set",
                status_code=self.status_code,
            )
        return self.result

    def to_json_pretty(self) -> str:
        return self.model_dump_json(indent=2)


def _error_text(error: Any) -> str:
    if isinstance(error, str):
        return error
    return json.dumps(error, default=str)


def _describe(error: ValidationError) -> str:
    # Leaves out input values, the raw body is only logged
    details = error.errors(include_url=False, include_input=False)
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'body'}: {detail['msg']}"
        for detail in details
    )


async def read_body(method: str, endpoint: str, response: httpx.Response) -> str:
    """Read the whole response body as text."""
    try:
        await response.aread()
    except httpx.HTTPError as e:
        await response.aclose()
        raise BodyReadError(
            action=f"get response body of {method} {endpoint} request",
            message=str(e),
            status_code=response.status_code,
        ) from e
    return response.text


async def handle_status_response(method: str, endpoint: str, response: httpx.Response) -> Status:
    text = await read_body(method, endpoint, response)
    return Status.parse(text)


async def deserialize_response(
    method: str,
    endpoint: str,
    response: httpx.Response,
    model: Any,
    envelope: bool = False,
) -> Response:
    """
    Decode a JSON response body.

    Args:
        method: HTTP method of the request, for error reporting
        endpoint: Endpoint of the request, for error reporting
        response: The unread httpx response
        model: Type of the result, e.g. ``list[Torrent]``
        envelope: Decode the body as a whole Response envelope instead of
            a bare result

    Returns:
        Response[model] with status_code taken from the wire
    """
    status_code = response.status_code
    text = await read_body(method, endpoint, response)
    target = Response[model] if envelope else model
    try:
        value = TypeAdapter(target).validate_json(text, strict=True)
    except ValidationError as e:
        logger.trace(text)
        raise DeserializationError(
            action=f"deserialize response of {DOMAIN} {method} {endpoint} request",
            message=_describe(e),
            domain=DESERIALIZATION_DOMAIN,
            status_code=status_code,
        ) from e
    if envelope:
        return value.model_copy(update={"status_code": status_code})
    return Response[model](status_code=status_code, result=value)
