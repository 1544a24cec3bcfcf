"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]``. Names are stored lower-cased so that
``dict(headers)`` yields the canonical keys used when building a parse
context.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. repeated ``Accept``).
    """

    __slots__ = ("_items",)

    def __init__(
        self,
        items: Mapping[str, str] | Iterable[tuple[str, str]] = (),
    ) -> None:
        pairs = items.items() if isinstance(items, Mapping) else items
        object.__setattr__(
            self,
            "_items",
            tuple((str(name).lower(), str(value)) for name, value in pairs),
        )

    @classmethod
    def from_raw(cls, raw: Iterable[tuple[bytes, bytes]]) -> "Headers":
        """Build from raw byte pairs (ASGI scope headers)."""
        return cls((name.decode("latin-1"), value.decode("latin-1")) for name, value in raw)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._items:
            if name == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name == key_lower for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len(set(self))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._items == other._items
        if isinstance(other, Mapping):
            return dict(self) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = key.lower()
        return [value for name, value in self._items if name == key_lower]

    def merge(self, other: Mapping[str, str]) -> "Headers":
        """Return new Headers where *other* replaces matching names."""
        replaced = {name.lower() for name in other}
        kept = tuple(pair for pair in self._items if pair[0] not in replaced)
        return Headers((*kept, *other.items()))

    @property
    def raw(self) -> tuple[tuple[str, str], ...]:
        """All (name, value) pairs, duplicates included."""
        return self._items
