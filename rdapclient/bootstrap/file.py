"""Parsing of bootstrap Service Registry documents."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit


class BootstrapError(ValueError):
    """A Service Registry document could not be parsed."""


@dataclass
class RegistryFile:
    """A parsed Service Registry file such as dns.json."""

    description: str = ""
    publication: str = ""
    version: str = ""
    entries: dict[str, list[str]] = field(default_factory=dict)
    """Service entries (e.g. "br" or "2c00::/12") mapped to RDAP base URLs."""
    document: bytes = b""
    """The raw JSON document."""


def parse_file(document: bytes | str) -> RegistryFile:
    """Parse a Service Registry JSON document."""
    raw = document.encode("utf-8") if isinstance(document, str) else bytes(document)

    try:
        doc = json.loads(raw)
    except ValueError as exc:
        raise BootstrapError(f"invalid JSON: {exc}") from exc

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise BootstrapError("registry document is not a JSON object")

    result = RegistryFile(
        description=_string(doc, "description"),
        publication=_string(doc, "publication"),
        version=_string(doc, "version"),
        document=raw,
    )

    services = _lookup(doc, "services")
    if services is None:
        services = []
    if not isinstance(services, list):
        raise BootstrapError("services must be an array")

    for service in services:
        parts = [] if service is None else service
        if not isinstance(parts, list):
            raise BootstrapError("Malformed bootstrap (bad services array)")
        parts = [_string_list(part) for part in parts]
        if len(parts) != 2:
            raise BootstrapError("Malformed bootstrap (bad services array)")

        entries, raw_urls = parts
        urls = [url for url in raw_urls if _is_valid_url(url)]
        if urls:
            for entry in entries:
                result.entries[entry] = urls

    return result


def _lookup(doc: dict[str, Any], name: str) -> Any:
    if name in doc:
        return doc[name]
    for key, value in doc.items():
        if key.lower() == name:
            return value
    return None


def _string(doc: dict[str, Any], name: str) -> str:
    value = _lookup(doc, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise BootstrapError(f"{name} must be a string")
    return value


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise BootstrapError("Malformed bootstrap (bad services array)")
    result = []
    for item in value:
        if item is None:
            result.append("")
        elif isinstance(item, str):
            result.append(item)
        else:
            raise BootstrapError("Malformed bootstrap (bad services array)")
    return result


def _is_valid_url(raw: str) -> bool:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        return False
    if raw.startswith(":"):
        return False
    try:
        parts = urlsplit(raw)
        parts.port
    except ValueError:
        return False
    return " " not in parts.netloc