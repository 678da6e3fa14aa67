"""Short names for well-known primitive types."""

KNOWN_TYPES: dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}


def strip_kind_prefix(doc_id: str) -> str:
    """Remove the two-character kind prefix (e.g. 'T:') from a documentation id."""
    return doc_id[2:]


def display_name_for_id(doc_id: str, known_types: dict[str, str] | None = None) -> str:
    """Return a display name for a documentation id, preferring primitive names."""
    name = strip_kind_prefix(doc_id)
    return (known_types or KNOWN_TYPES).get(name, name)
