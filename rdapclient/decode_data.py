"""Snapshot of the raw fields seen while decoding an RDAP object."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class DecodeData:
    """Raw field values and decoding notes for one RDAP object.

    Every decoded field is kept in its raw JSON form, so the values of
    fields the object model does not know about can still be read. Minor
    warnings raised while decoding a field are kept as notes.

    Names are RDAP field names ("port43"), not attribute names.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        known: Iterable[str] | None = None,
        notes: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self._known: set[str] = set(known or ())
        self._notes: dict[str, list[str]] = {
            name: list(items) for name, items in (notes or {}).items()
        }

    def __str__(self) -> str:
        lines = [
            f"\n !!!{name}: {note}"
            for name, notes in self._notes.items()
            for note in notes
        ]
        return "[" + "".join(lines) + "\n"

    def _set_value(self, name: str, value: Any, known: bool = False) -> None:
        self._values[name] = value
        if known:
            self._known.add(name)

    def _add_note(self, name: str, note: str) -> None:
        self._notes.setdefault(name, []).append(note)

    def notes(self, name: str) -> list[str]:
        """Return the warnings recorded while decoding field *name*."""
        return list(self._notes.get(name, ()))

    def value(self, name: str) -> Any:
        """Return the raw value of field *name*, or None if it was not decoded."""
        return self._values.get(name)

    def fields(self) -> list[str]:
        """Return the names of all decoded fields, known and unknown."""
        return list(self._values)

    def unknown_fields(self) -> list[str]:
        """Return the names of decoded fields the object model does not know."""
        return [name for name in self._values if name not in self._known]