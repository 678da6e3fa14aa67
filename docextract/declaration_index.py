"""In-memory symbol model over a list of loaded declarations."""

import logging
from collections.abc import Iterable, Iterator

from docextract.declaration import Declaration, Parameter
from docextract.symbol_kind import CONSTRUCTOR, is_kind
from docextract.symbol_model import DeclarationIdError

logger = logging.getLogger(__name__)


class DeclarationIndex:
    """Answers structural questions about declarations by documentation id."""

    def __init__(self, declarations: Iterable[Declaration]) -> None:
        """Index the declarations; the first declaration seen for a uid wins."""
        self._declarations: list[Declaration] = []
        self.uid_to_decl: dict[str, Declaration] = {}
        self._children: dict[str, list[Declaration]] = {}
        for decl in declarations:
            self.add(decl)

    def add(self, decl: Declaration) -> None:
        """Register one more declaration."""
        self._declarations.append(decl)
        if decl.uid:
            self.uid_to_decl.setdefault(decl.uid, decl)
        if decl.parent:
            self._children.setdefault(decl.parent, []).append(decl)

    def declarations(self) -> Iterator[Declaration]:
        """Iterate over all declarations in the order they were added."""
        return iter(self._declarations)

    def _get(self, uid: str | None) -> Declaration | None:
        if not uid:
            return None
        return self.uid_to_decl.get(uid)

    def _get_all(self, uids: Iterable[str]) -> list[Declaration]:
        return [d for d in (self._get(u) for u in uids) if d is not None]

    def documentation_markup(self, symbol: Declaration) -> str:
        return symbol.documentation or ""

    def kind(self, symbol: Declaration) -> str:
        return symbol.kind

    def name(self, symbol: Declaration) -> str:
        return symbol.name

    def accessibility(self, symbol: Declaration) -> str:
        return symbol.accessibility

    def is_static(self, symbol: Declaration) -> bool:
        return symbol.is_static

    def containing_symbol(self, symbol: Declaration) -> Declaration | None:
        return self._get(symbol.parent)

    def overridden_member(self, symbol: Declaration) -> Declaration | None:
        return self._get(symbol.overridden)

    def explicit_interface_implementations(
        self, symbol: Declaration
    ) -> list[Declaration]:
        return self._get_all(symbol.explicit_implementations)

    def implicit_interface_implementations(
        self, symbol: Declaration
    ) -> list[Declaration]:
        return self._get_all(symbol.implicit_implementations)

    def base_type(self, symbol: Declaration) -> Declaration | None:
        return self._get(symbol.base_type)

    def base_interfaces(self, symbol: Declaration) -> list[Declaration]:
        return self._get_all(symbol.interfaces)

    def constructors(self, type_symbol: Declaration) -> list[Declaration]:
        """Return the constructors declared directly in a type."""
        if not type_symbol.uid:
            return []
        return [
            d
            for d in self._children.get(type_symbol.uid, [])
            if is_kind(d.kind, CONSTRUCTOR)
        ]

    def parameters(self, symbol: Declaration) -> list[Parameter]:
        return list(symbol.parameters)

    def return_type(self, symbol: Declaration) -> str | None:
        return symbol.return_type

    def type_parameters(self, symbol: Declaration) -> list[str]:
        return list(symbol.type_parameters)

    def _chain(self, symbol: Declaration) -> Iterator[Declaration]:
        """Yield the symbol and its containers, stopping on a parent cycle."""
        seen: set[int] = set()
        current: Declaration | None = symbol
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = self.containing_symbol(current)

    def all_type_parameters(self, symbol: Declaration) -> list[str]:
        """Return own type parameters followed by those of enclosing symbols."""
        result: list[str] = []
        for decl in self._chain(symbol):
            result.extend(decl.type_parameters)
        return result

    def all_type_arguments(self, symbol: Declaration) -> list[str]:
        """Return own type arguments followed by those of enclosing symbols.

        A generic definition with no explicit arguments is its own
        instantiation, so its type parameter names stand in as arguments.
        """
        result: list[str] = []
        for decl in self._chain(symbol):
            if decl.type_arguments is None:
                result.extend(decl.type_parameters)
            else:
                result.extend(decl.type_arguments)
        return result

    def compute_declaration_id(self, symbol: Declaration) -> str:
        if not symbol.uid:
            msg = f"No documentation id for {symbol.kind} {symbol.name!r}"
            raise DeclarationIdError(msg)
        return symbol.uid

    def resolve_declaration_id(self, identifier: str) -> Declaration | None:
        """Find the declaration for a documentation id.

        Falls back to scanning every declaration when the fast index misses.
        Ids here are the stored uids, so the scan only finds declarations
        whose index entry was removed; models that derive ids from
        declaration structure rely on it.
        """
        found = self._get(identifier)
        if found is not None:
            return found

        logger.debug("Index miss for %s, scanning all declarations", identifier)
        for decl in self._declarations:
            try:
                if self.compute_declaration_id(decl) == identifier:
                    return decl
            except DeclarationIdError:
                continue
        return None
