"""Bootstrap lookups in the Autonomous System Number Service Registry."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field

from rdapclient.bootstrap.file import BootstrapError, RegistryFile, parse_file
from rdapclient.bootstrap.question import Answer, Question

_MAX_ASN = 2**32 - 1


@dataclass
class _ASNRange:
    """A range of AS numbers and their RDAP base URLs."""

    min_asn: int
    max_asn: int
    urls: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.min_asn == self.max_asn:
            return f"AS{self.min_asn}"
        return f"AS{self.min_asn}-AS{self.max_asn}"


def _parse_uint32(text: str) -> int:
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid AS number {text!r}")
    value = int(text)
    if value > _MAX_ASN:
        raise ValueError(f"AS number {text!r} out of range")
    return value


def parse_asn(asn: str) -> int:
    """Parse an AS number such as "AS1234", "as1234" or "1234"."""
    return _parse_uint32(asn.lower().lstrip("as"))


def parse_asn_range(asn_range: str) -> tuple[int, int]:
    """Parse "1234" or "1234-5678" into an ordered (first, last) pair."""
    parts = asn_range.split("-")
    if len(parts) not in (1, 2):
        raise ValueError("Malformed ASN range")
    first = _parse_uint32(parts[0])
    last = _parse_uint32(parts[1]) if len(parts) == 2 else first
    if first > last:
        first, last = last, first
    return first, last


class ASNRegistry:
    """Maps AS numbers to RDAP base URLs using an ASN registry document."""

    def __init__(self, document: bytes | str) -> None:
        try:
            registry = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing ASN registry: {exc}") from exc

        ranges = []
        for entry, urls in registry.entries.items():
            try:
                first, last = parse_asn_range(entry)
            except ValueError:
                continue
            ranges.append(_ASNRange(first, last, urls))
        ranges.sort(key=lambda r: r.min_asn)

        self._ranges = ranges
        self._file = registry

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the AS number in *question*."""
        asn = parse_asn(question.query)

        index = bisect.bisect_left(self._ranges, asn, key=lambda r: r.max_asn)

        entry = ""
        urls: list[str] = []
        if index < len(self._ranges):
            candidate = self._ranges[index]
            if candidate.min_asn <= asn <= candidate.max_asn:
                entry = str(candidate)
                urls = list(candidate.urls)

        return Answer(query=str(asn), entry=entry, urls=urls)

    def file(self) -> RegistryFile:
        """Return the parsed registry document."""
        return self._file