"""Predicates for classifying declaration kinds."""

NAMESPACE = "Namespace"
CLASS = "Class"
STRUCT = "Struct"
INTERFACE = "Interface"
ENUM = "Enum"
DELEGATE = "Delegate"
METHOD = "Method"
CONSTRUCTOR = "Constructor"
OPERATOR = "Operator"
PROPERTY = "Property"
INDEXER = "Indexer"
EVENT = "Event"
FIELD = "Field"
ENUM_MEMBER = "EnumMember"


def is_namespace_kind(kind: str) -> bool:
    """Check if the kind represents a namespace."""
    return kind.lower() == "namespace"


def is_type_kind(kind: str) -> bool:
    """Check if the kind represents a type (class, struct, etc.)."""
    k = kind.lower()
    return k in {"class", "struct", "interface", "enum", "delegate"}


def is_member_kind(kind: str) -> bool:
    """Check if the kind represents a member (method, property, etc.)."""
    k = kind.lower()
    return k in {
        "method",
        "property",
        "field",
        "event",
        "operator",
        "constructor",
        "indexer",
        "enummember",
    }


def is_kind(kind: str, *names: str) -> bool:
    """Check if the kind matches any of the given kind names."""
    k = kind.lower()
    return any(k == n.lower() for n in names)
