import json

import pytest

from rdapclient.bootstrap.file import BootstrapError, RegistryFile, parse_file

VALID_DNS = json.dumps(
    {
        "description": "RDAP bootstrap file for Domain Name System registrations",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["br"], ["https://rdap.registro.br/"]],
            [["cz"], ["https://rdap.nic.cz/"]],
            [["example"], ["https://rdap.example.org/", "http://rdap.example.org/"]],
        ],
    }
).encode()

BAD_SERVICES = json.dumps(
    {
        "version": "1.0",
        "services": [[["br"], ["https://rdap.registro.br/"], ["extra"]]],
    }
).encode()

BAD_URL = json.dumps(
    {
        "version": "1.0",
        "services": [
            [["br"], ["https://rdap.registro.br/", "http://bad host/"]],
            [["cz"], ["https://rdap.nic.cz/"]],
            [["example", "test"], ["http://[::1", "https://rdap.example.org/"]],
            [["invalid"], ["http://\x01broken/", "http://host:port/"]],
        ],
    }
).encode()


def test_parse_valid():
    registry = parse_file(VALID_DNS)
    assert len(registry.entries) == 3
    assert registry.entries["br"] == ["https://rdap.registro.br/"]
    assert registry.entries["example"] == [
        "https://rdap.example.org/",
        "http://rdap.example.org/",
    ]
    assert registry.version == "1.0"
    assert registry.publication == "2017-01-01T00:00:00Z"
    assert registry.document == VALID_DNS


def test_parse_empty():
    with pytest.raises(BootstrapError):
        parse_file(b"")


def test_parse_syntax_error():
    with pytest.raises(BootstrapError):
        parse_file(b'{"version": "1.0", "services": [')


def test_parse_bad_services():
    with pytest.raises(BootstrapError):
        parse_file(BAD_SERVICES)


def test_parse_bad_url():
    registry = parse_file(BAD_URL)
    assert len(registry.entries) == 3
    assert registry.entries["br"] == ["https://rdap.registro.br/"]
    assert registry.entries["test"] == ["https://rdap.example.org/"]
    assert "invalid" not in registry.entries


def test_parse_accepts_text():
    registry = parse_file(VALID_DNS.decode())
    assert isinstance(registry, RegistryFile)
    assert sorted(registry.entries) == ["br", "cz", "example"]


def test_parse_keys_case_insensitive():
    registry = parse_file(b'{"Version": "2.0", "Services": [[["br"], ["https://rdap.registro.br/"]]]}')
    assert registry.version == "2.0"
    assert registry.entries == {"br": ["https://rdap.registro.br/"]}


def test_parse_rejects_non_object():
    with pytest.raises(BootstrapError):
        parse_file(b"[1, 2, 3]")


def test_parse_rejects_wrong_field_type():
    with pytest.raises(BootstrapError):
        parse_file(b'{"version": 1, "services": []}')


def test_parse_no_services():
    registry = parse_file(b'{"description": "empty"}')
    assert registry.entries == {}
    assert registry.description == "empty"