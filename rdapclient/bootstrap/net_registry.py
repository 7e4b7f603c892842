"""Bootstrap lookups in the IPv4 and IPv6 Service Registries."""

from __future__ import annotations

import bisect
import ipaddress

from rdapclient.bootstrap.file import BootstrapError, RegistryFile, parse_file
from rdapclient.bootstrap.question import Answer, Question

_Network = ipaddress.IPv4Network | ipaddress.IPv6Network


def _parse_cidr(text: str) -> _Network:
    """Parse "address/prefix", masking the address to the network."""
    address, sep, prefix = text.partition("/")
    if not sep or "%" in address or not (prefix.isascii() and prefix.isdigit()):
        raise ValueError(f"invalid CIDR address: {text}")
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        raise ValueError(f"invalid CIDR address: {text}") from None
    length = int(prefix)
    if length > ip.max_prefixlen:
        raise ValueError(f"invalid CIDR address: {text}")
    network_class = ipaddress.IPv4Network if ip.version == 4 else ipaddress.IPv6Network
    return network_class((ip, length), strict=False)


class NetRegistry:
    """Maps IP addresses and networks to RDAP base URLs."""

    def __init__(self, document: bytes | str, ip_version: int) -> None:
        if ip_version not in (4, 6):
            raise ValueError(f"Unknown IP version {ip_version}")

        try:
            registry = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing net registry file: {exc}") from exc

        self._ip_version = ip_version
        self._bits = 32 if ip_version == 4 else 128
        self._file = registry

        grouped: dict[int, list[tuple[_Network, list[str]]]] = {}
        for cidr, urls in registry.entries.items():
            try:
                network = _parse_cidr(cidr)
            except ValueError:
                continue
            if network.version != ip_version:
                continue
            grouped.setdefault(network.prefixlen, []).append((network, urls))

        self._networks: dict[int, list[tuple[_Network, list[str]]]] = {}
        self._lasts: dict[int, list] = {}
        for prefixlen, entries in grouped.items():
            entries.sort(key=lambda item: item[0].network_address)
            self._networks[prefixlen] = entries
            self._lasts[prefixlen] = [net.broadcast_address for net, _ in entries]

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the address or CIDR range in *question*.

        The most specific registry network containing the query wins.
        """
        query = question.query
        if "/" not in query:
            query = f"{query}/{self._bits}"

        lookup_net = _parse_cidr(query)
        if lookup_net.version != self._ip_version:
            raise ValueError("Lookup address has wrong IP protocol")
        lookup_ip = lookup_net.network_address

        best_entry = ""
        best_urls: list[str] = []
        for prefixlen in sorted(self._networks):
            if prefixlen > lookup_net.prefixlen:
                break
            entries = self._networks[prefixlen]
            index = bisect.bisect_left(self._lasts[prefixlen], lookup_ip)
            if index == len(entries):
                continue
            network, urls = entries[index]
            if lookup_ip not in network:
                continue
            best_entry = str(network)
            best_urls = urls

        return Answer(query=query, entry=best_entry, urls=list(best_urls))

    def file(self) -> RegistryFile:
        """Return the parsed registry document."""
        return self._file