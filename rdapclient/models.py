"""RDAP object model: common structures and the Autnum response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rdapclient.decode_data import DecodeData


def _rdap(name: str, **kwargs: Any) -> Any:
    """A field whose RDAP JSON name differs from the camel-cased attribute."""
    return field(metadata={"rdap": name}, **kwargs)


@dataclass
class Link:
    """A link to another resource on the Internet (RFC 7483 section 4.2)."""

    decode_data: DecodeData | None = None
    value: str = ""
    rel: str = ""
    href: str = ""
    hreflang: list[str] = _rdap("hreflang", default_factory=list)
    title: str = ""
    media: str = ""
    type: str = ""


@dataclass
class Notice:
    """Information about the entire RDAP response (RFC 7483 section 4.3)."""

    decode_data: DecodeData | None = None
    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)


@dataclass
class Remark:
    """Information about the containing RDAP object (RFC 7483 section 4.3)."""

    decode_data: DecodeData | None = None
    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)


@dataclass
class Event:
    """An event that has occurred or may occur (RFC 7483 section 4.5)."""

    decode_data: DecodeData | None = None
    action: str = _rdap("eventAction", default="")
    actor: str = _rdap("eventActor", default="")
    date: str = _rdap("eventDate", default="")
    links: list[Link] = field(default_factory=list)


@dataclass
class PublicID:
    """A public identifier mapped to an object class (RFC 7483 section 4.8)."""

    decode_data: DecodeData | None = None
    type: str = ""
    identifier: str = ""


@dataclass
class Common:
    """Fields which may appear anywhere in an RDAP response."""

    lang: str = ""


@dataclass
class Autnum(Common):
    """An Autonomous System registration; a topmost RDAP response object."""

    decode_data: DecodeData | None = None
    conformance: list[str] = _rdap("rdapConformance", default_factory=list)
    object_class_name: str = ""
    notices: list[Notice] = field(default_factory=list)

    handle: str = ""
    start_autnum: int | None = None
    end_autnum: int | None = None
    ip_version: str = _rdap("ipVersion", default="")
    name: str = ""
    type: str = ""
    status: list[str] = field(default_factory=list)
    country: str = ""
    entities: list[Any] = field(default_factory=list)
    remarks: list[Remark] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    port43: str = ""
    events: list[Event] = field(default_factory=list)