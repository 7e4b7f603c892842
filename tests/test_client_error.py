from dataclasses import dataclass, field

import pytest

from rdapclient.client_error import (
    ClientError,
    ClientErrorType,
    client_error_from_rdap_error,
    is_client_error,
)


@dataclass
class _RDAPError:
    error_code: int = 0
    title: str = ""
    description: list[str] = field(default_factory=list)


def test_str_is_text():
    err = ClientError(ClientErrorType.INPUT_ERROR, "nil Request")
    assert str(err) == "nil Request"
    assert err.type is ClientErrorType.INPUT_ERROR


def test_raised_and_caught():
    err = ClientError(ClientErrorType.BOOTSTRAP_NO_MATCH, "No RDAP servers found for 'x'")
    with pytest.raises(ClientError, match="No RDAP servers") as excinfo:
        raise err
    assert excinfo.value is err
    assert is_client_error(ClientErrorType.BOOTSTRAP_NO_MATCH, excinfo.value) is True
    assert is_client_error(ClientErrorType.INPUT_ERROR, excinfo.value) is False
    assert str(excinfo.value) == "No RDAP servers found for 'x'"


def test_is_client_error_matches_type():
    err = ClientError(ClientErrorType.OBJECT_DOES_NOT_EXIST, "gone")
    assert is_client_error(ClientErrorType.OBJECT_DOES_NOT_EXIST, err) is True
    assert is_client_error(ClientErrorType.NO_WORKING_SERVERS, err) is False


def test_is_client_error_other_exceptions():
    assert is_client_error(ClientErrorType.INPUT_ERROR, ValueError("x")) is False
    assert is_client_error(ClientErrorType.INPUT_ERROR, None) is False


def test_from_rdap_error():
    err = client_error_from_rdap_error(
        _RDAPError(error_code=418, title="Teapot", description=["short", "and stout"])
    )
    assert err.type is ClientErrorType.RDAP_SERVER_ERROR
    assert str(err) == (
        "Server returned error code 418, title='Teapot', description='short and stout'"
    )
    assert is_client_error(ClientErrorType.RDAP_SERVER_ERROR, err)


def test_from_rdap_error_empty_description():
    err = client_error_from_rdap_error(_RDAPError(error_code=500, title="x"))
    assert str(err).endswith("description=''")


@pytest.mark.parametrize("error_type", list(ClientErrorType))
def test_each_error_type_matches_only_itself(error_type):
    err = ClientError(error_type, "text")
    assert err.type is error_type
    assert is_client_error(error_type, err) is True
    others = [t for t in ClientErrorType if t is not error_type]
    assert not any(is_client_error(other, err) for other in others)