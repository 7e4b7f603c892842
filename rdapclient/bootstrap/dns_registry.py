"""Bootstrap lookups in the DNS Service Registry."""

from __future__ import annotations

from rdapclient.bootstrap.file import BootstrapError, RegistryFile, parse_file
from rdapclient.bootstrap.question import Answer, Question


class DNSRegistry:
    """Maps domain names to RDAP base URLs using a DNS registry document."""

    def __init__(self, document: bytes | str) -> None:
        try:
            registry = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing DNS bootstrap: {exc}") from exc
        self._dns = registry.entries
        self._file = registry

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the domain name in *question*.

        The longest matching suffix wins: for an.example.com the entries
        "an.example.com", "example.com", "com" and "" are tried in turn.
        """
        name = question.query.removesuffix(".").lower()

        fqdn = name
        urls = self._dns.get(fqdn)
        while urls is None and fqdn:
            _, _, fqdn = fqdn.partition(".")
            urls = self._dns.get(fqdn)

        return Answer(query=name, entry=fqdn, urls=list(urls or []))

    def file(self) -> RegistryFile:
        """Return the parsed registry document."""
        return self._file