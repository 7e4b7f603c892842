"""Bootstrap client: finds the RDAP servers that can answer a query.

Service Registry files are downloaded from a bootstrap service (by default
the IANA one) and kept in a cache, so that a long-lived client downloads
each file only once per cache period.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from rdapclient.bootstrap.asn_registry import ASNRegistry
from rdapclient.bootstrap.cache.memory_cache import MemoryCache
from rdapclient.bootstrap.cache.registry_cache import FileState, RegistryCache
from rdapclient.bootstrap.dns_registry import DNSRegistry
from rdapclient.bootstrap.net_registry import NetRegistry
from rdapclient.bootstrap.question import Answer, Question, RegistryType
from rdapclient.bootstrap.service_provider_registry import ServiceProviderRegistry

DEFAULT_BASE_URL = "https://data.iana.org/rdap/"
"""Default location of the Service Registry files."""

DEFAULT_CACHE_TIMEOUT = 24 * 60 * 60.0
"""Default number of seconds a cached Service Registry stays fresh."""

Registry = ASNRegistry | DNSRegistry | NetRegistry | ServiceProviderRegistry


def new_registry(registry: RegistryType, document: bytes | str) -> Registry:
    """Parse *document* as the Service Registry of type *registry*."""
    if registry is RegistryType.ASN:
        return ASNRegistry(document)
    if registry is RegistryType.DNS:
        return DNSRegistry(document)
    if registry is RegistryType.IPV4:
        return NetRegistry(document, 4)
    if registry is RegistryType.IPV6:
        return NetRegistry(document, 6)
    if registry is RegistryType.SERVICE_PROVIDER:
        return ServiceProviderRegistry(document)
    raise ValueError(f"Unknown registry type {registry!r}")


def _quiet(text: str) -> None:
    pass


class BootstrapClient:
    """Looks up RDAP base URLs, downloading and caching Service Registries."""

    def __init__(
        self,
        base_url: str | None = None,
        cache: RegistryCache | None = None,
        session: requests.Session | None = None,
        verbose: Callable[[str], None] | None = None,
    ) -> None:
        self.base_url = base_url if base_url is not None else DEFAULT_BASE_URL
        if cache is None:
            cache = MemoryCache()
            cache.set_timeout(DEFAULT_CACHE_TIMEOUT)
        self.cache = cache
        self.session = session if session is not None else requests.Session()
        self.verbose: Callable[[str], None] = verbose if verbose is not None else _quiet
        self._registries: dict[RegistryType, Registry] = {}

    def download(self, registry: RegistryType, timeout: float | None = None) -> None:
        """Download one Service Registry file, refreshing it and the cache.

        Raises requests exceptions on network or HTTP errors, and
        BootstrapError if the downloaded document cannot be parsed.
        """
        data, parsed = self._download(registry, timeout)
        self.cache.save(self.filename_for(registry), data)
        self._registries[registry] = parsed

    def _fetch_url(self, registry: RegistryType) -> str:
        parts = urlsplit(self.base_url)
        path = parts.path
        if path and not path.endswith("/"):
            path += "/"
        base = urlunsplit(parts._replace(path=path))
        return urljoin(base, registry.filename())

    def _download(
        self, registry: RegistryType, timeout: float | None
    ) -> tuple[bytes, Registry]:
        response = self.session.get(self._fetch_url(registry), timeout=timeout)
        with response:
            if response.status_code != 200:
                raise requests.HTTPError(
                    "Server returned non-200 status code: "
                    f"{response.status_code} {response.reason}",
                    response=response,
                )
            data = response.content
        return data, new_registry(registry, data)

    def _freshen_from_cache(self, registry: RegistryType) -> None:
        if self.cache.state(self.filename_for(registry)) is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry)
            except (OSError, ValueError):
                pass

    def _reload_from_cache(self, registry: RegistryType) -> None:
        data = self.cache.load(self.filename_for(registry))
        self._registries[registry] = new_registry(registry, data)

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for *question*.

        The Service Registry is downloaded if it is missing, or reloaded if
        a newer copy is in the cache.
        """
        say = self.verbose
        registry = question.registry_type
        filename = self.filename_for(registry)

        say("  bootstrap: Looking up...")
        say(f"  bootstrap: Question type : {registry}")
        say(f"  bootstrap: Question query: {question.query}")

        state = self.cache.state(filename)
        say(f"  bootstrap: Cache state: {filename}: {state}")

        force_download = False
        if state is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry)
            except (OSError, ValueError) as exc:
                force_download = True
                say(f"  bootstrap: Cache load error ({exc}), downloading...")

        if registry not in self._registries or force_download:
            say(f"  bootstrap: Downloading {registry.filename()}")
            self.download(registry, question.timeout)
        else:
            say("  bootstrap: Using cached Service Registry file")

        answer = self._registries[registry].lookup(question)

        say(f"  bootstrap: Looked up '{answer.query}'")
        if answer.entry:
            say(f"  bootstrap: Matching entry '{answer.entry}'")
        else:
            say("  bootstrap: No match")
        for number, url in enumerate(answer.urls, start=1):
            say(f"  bootstrap: Service URL #{number}: '{url}'")

        return answer

    def _current(self, registry: RegistryType) -> Registry | None:
        self._freshen_from_cache(registry)
        return self._registries.get(registry)

    def asn(self) -> ASNRegistry | None:
        """Return the ASN registry, or None if not yet downloaded. No network access."""
        return self._current(RegistryType.ASN)

    def dns(self) -> DNSRegistry | None:
        """Return the DNS registry, or None if not yet downloaded. No network access."""
        return self._current(RegistryType.DNS)

    def ipv4(self) -> NetRegistry | None:
        """Return the IPv4 registry, or None if not yet downloaded. No network access."""
        return self._current(RegistryType.IPV4)

    def ipv6(self) -> NetRegistry | None:
        """Return the IPv6 registry, or None if not yet downloaded. No network access."""
        return self._current(RegistryType.IPV6)

    def service_provider(self) -> ServiceProviderRegistry | None:
        """Return the Service Provider registry, or None if not yet downloaded."""
        return self._current(RegistryType.SERVICE_PROVIDER)

    def filename_for(self, registry: RegistryType) -> str:
        """Return the cache filename for *registry*.

        For the default bootstrap service this is the plain filename (e.g.
        dns.json). For other services a 6 character hash of the base URL is
        prepended (e.g. 012def_dns.json) so their files are kept apart.
        """
        filename = registry.filename()
        if self.base_url != DEFAULT_BASE_URL:
            digest = hashlib.sha256(self.base_url.encode("utf-8")).hexdigest()
            filename = f"{digest[:6]}_{filename}"
        return filename