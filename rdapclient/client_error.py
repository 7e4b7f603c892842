"""Errors raised by the RDAP client."""

from __future__ import annotations

import enum
from typing import Any


class ClientErrorType(enum.Enum):
    """The kind of failure a ClientError reports."""

    INPUT_ERROR = 1
    BOOTSTRAP_NOT_SUPPORTED = 2
    BOOTSTRAP_NO_MATCH = 3
    WRONG_RESPONSE_TYPE = 4
    NO_WORKING_SERVERS = 5
    OBJECT_DOES_NOT_EXIST = 6
    RDAP_SERVER_ERROR = 7


class ClientError(Exception):
    """An RDAP client failure of a given type."""

    def __init__(self, error_type: ClientErrorType, text: str) -> None:
        super().__init__(text)
        self.type = error_type
        self.text = text

    def __str__(self) -> str:
        return self.text


def is_client_error(error_type: ClientErrorType, err: BaseException | None) -> bool:
    """Return True if *err* is a ClientError of type *error_type*."""
    return isinstance(err, ClientError) and err.type is error_type


def client_error_from_rdap_error(error: Any) -> ClientError:
    """Build a ClientError from an RDAP error response object.

    *error* must have ``error_code``, ``title`` and ``description`` (a list
    of strings) attributes.
    """
    description = " ".join(error.description or ())
    return ClientError(
        ClientErrorType.RDAP_SERVER_ERROR,
        f"Server returned error code {error.error_code}, "
        f"title='{error.title}', description='{description}'",
    )