"""Bootstrap registry types, questions and answers."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field


class RegistryType(enum.Enum):
    """A bootstrap Service Registry."""

    DNS = 0
    IPV4 = 1
    IPV6 = 2
    ASN = 3
    SERVICE_PROVIDER = 4

    def __str__(self) -> str:
        return _NAMES[self]

    def filename(self) -> str:
        """Return the registry's JSON document filename."""
        return _FILENAMES[self]


_NAMES = {
    RegistryType.DNS: "dns",
    RegistryType.IPV4: "ipv4",
    RegistryType.IPV6: "ipv6",
    RegistryType.ASN: "asn",
    RegistryType.SERVICE_PROVIDER: "serviceprovider",
}

_FILENAMES = {
    RegistryType.ASN: "asn.json",
    RegistryType.DNS: "dns.json",
    RegistryType.IPV4: "ipv4.json",
    RegistryType.IPV6: "ipv6.json",
    # Provisional name; no official file exists for this registry yet.
    RegistryType.SERVICE_PROVIDER: "serviceprovider-draft-03.json",
}


@dataclass
class Question:
    """A bootstrap query: which registry to consult and what to look up."""

    registry_type: RegistryType = RegistryType.DNS
    query: str = ""
    timeout: float | None = None

    def with_timeout(self, timeout: float | None) -> Question:
        """Return a copy of the question with *timeout* seconds."""
        return dataclasses.replace(self, timeout=timeout)


@dataclass
class Answer:
    """The result of bootstrapping a single query."""

    query: str = ""
    """The query as looked up, after any canonicalisation."""

    entry: str = ""
    """The matching service entry; empty if nothing matched."""

    urls: list[str] = field(default_factory=list)
    """RDAP base URLs for the matching entry."""