"""Data models for representing analyzed declarations."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    """A declared parameter of a method, constructor, delegate or indexer."""

    name: str
    type_id: str | None  # documentation id of the parameter type, e.g. T:System.Int32
    type_name: str


@dataclass(eq=False)
class Declaration:
    """Represents a declared symbol (namespace, type or member).

    References to other declarations are held as documentation ids and
    resolved by the DeclarationIndex.
    """

    uid: str | None
    kind: str  # Namespace/Class/Method/Property/etc.
    name: str
    parent: str | None = None
    accessibility: str = "Public"
    is_static: bool = False
    documentation: str = ""
    base_type: str | None = None
    interfaces: list[str] = field(default_factory=list)
    overridden: str | None = None
    explicit_implementations: list[str] = field(default_factory=list)
    implicit_implementations: list[str] = field(default_factory=list)
    type_parameters: list[str] = field(default_factory=list)
    type_arguments: list[str] | None = None
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
