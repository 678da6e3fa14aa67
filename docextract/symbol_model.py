"""Capability contract consumed from the semantic-analysis backend."""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from docextract.declaration import Parameter


class DeclarationIdError(Exception):
    """Raised when no documentation id can be computed for a symbol."""


class SymbolModel(Protocol):
    """Read-only view over the declarations of an analyzed source set.

    Symbols are opaque handles; only the model knows how to interpret them.
    Type parameter and type argument lists are chained: the symbol's own
    entries first, then those of each enclosing symbol walking outward.
    """

    def declarations(self) -> Iterable[Any]: ...

    def documentation_markup(self, symbol: Any) -> str: ...

    def kind(self, symbol: Any) -> str: ...

    def name(self, symbol: Any) -> str: ...

    def accessibility(self, symbol: Any) -> str: ...

    def is_static(self, symbol: Any) -> bool: ...

    def containing_symbol(self, symbol: Any) -> Any | None: ...

    def overridden_member(self, symbol: Any) -> Any | None: ...

    def explicit_interface_implementations(self, symbol: Any) -> Sequence[Any]: ...

    def implicit_interface_implementations(self, symbol: Any) -> Sequence[Any]: ...

    def base_type(self, symbol: Any) -> Any | None: ...

    def base_interfaces(self, symbol: Any) -> Sequence[Any]: ...

    def constructors(self, type_symbol: Any) -> Sequence[Any]: ...

    def parameters(self, symbol: Any) -> Sequence[Parameter]: ...

    def return_type(self, symbol: Any) -> str | None: ...

    def type_parameters(self, symbol: Any) -> Sequence[str]: ...

    def all_type_parameters(self, symbol: Any) -> Sequence[str]: ...

    def all_type_arguments(self, symbol: Any) -> Sequence[str]: ...

    def compute_declaration_id(self, symbol: Any) -> str: ...

    def resolve_declaration_id(self, identifier: str) -> Any | None: ...
