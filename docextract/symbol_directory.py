"""A documentation id lookup that never reports a missing symbol."""

import threading
from collections.abc import Callable, Iterator, MutableMapping

from docextract.documented_symbol import DocumentedSymbol

FallbackProvider = Callable[[str], DocumentedSymbol]
AlternateKeyProvider = Callable[[str], str | None]


class SymbolDirectory(MutableMapping[str, DocumentedSymbol]):
    """Maps documentation ids to documented symbols.

    A key that is not stored is retried under its alternate key (if an
    alternate key provider is configured and produces one), and otherwise
    handed to the fallback provider, which synthesizes a value. Synthesized
    values are not stored unless committed, so iteration only ever sees the
    real entries.
    """

    def __init__(
        self,
        entries: dict[str, DocumentedSymbol] | None = None,
        fallback_provider: FallbackProvider | None = None,
        alternate_key_provider: AlternateKeyProvider | None = None,
    ) -> None:
        """Initialize the directory, optionally over existing storage."""
        self._storage: dict[str, DocumentedSymbol] = (
            entries if entries is not None else {}
        )
        self.fallback_provider = fallback_provider
        self.alternate_key_provider = alternate_key_provider
        self._lock = threading.Lock()

    def _stored_key(self, key: str) -> str | None:
        """Return the key under which a value is stored, trying the alternate."""
        if key in self._storage:
            return key
        if self.alternate_key_provider is not None and key is not None:
            alternate = self.alternate_key_provider(key)
            if alternate is not None and alternate in self._storage:
                return alternate
        return None

    def __getitem__(self, key: str) -> DocumentedSymbol:
        stored = self._stored_key(key)
        if stored is not None:
            return self._storage[stored]
        if self.fallback_provider is not None:
            return self.fallback_provider(key)
        raise KeyError(key)

    def lookup(self, key: str) -> DocumentedSymbol:
        """Return the symbol for a key, synthesizing a stub on a miss."""
        return self[key]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._stored_key(key) is not None

    def __setitem__(self, key: str, value: DocumentedSymbol) -> None:
        self._storage[key] = value

    def __delitem__(self, key: str) -> None:
        del self._storage[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def commit(self, key: str) -> DocumentedSymbol:
        """Store the value for a key if absent, and return the stored value."""
        with self._lock:
            stored = self._stored_key(key)
            if stored is not None:
                return self._storage[stored]
            value = self[key]
            return self._storage.setdefault(key, value)
