"""Bootstrap lookups in the experimental Service Provider registry."""

from __future__ import annotations

from rdapclient.bootstrap.file import BootstrapError, RegistryFile, parse_file
from rdapclient.bootstrap.question import Answer, Question


class ServiceProviderRegistry:
    """Maps entity handle service tags (e.g. "VRSN") to RDAP base URLs."""

    def __init__(self, document: bytes | str) -> None:
        try:
            registry = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(
                f"Error parsing Service Provider bootstrap: {exc}"
            ) from exc
        self._services = registry.entries
        self._file = registry

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the entity handle in *question*.

        For "53774930-VRSN" the URLs for "VRSN" are returned. The older
        "~VRSN" form is also accepted. Missing or unknown service tags give
        an answer with no URLs.
        """
        handle = question.query

        offset = handle.rfind("~")
        if offset == -1:
            offset = handle.rfind("-")

        if offset == -1 or offset == len(handle) - 1:
            return Answer(query=handle)

        service = handle[offset + 1 :]
        urls = self._services.get(service)
        if urls is None:
            return Answer(query=handle)

        return Answer(query=handle, entry=service, urls=list(urls))

    def file(self) -> RegistryFile:
        """Return the parsed registry document."""
        return self._file