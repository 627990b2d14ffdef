"""
Error kinds raised by the naming and registry layers.

Every error carries the structured fields it was built from so callers can
match on them instead of parsing messages.
"""


class SchemaError(Exception):
    """Base class for all schema naming and registry errors."""

    pass


class ParseError(SchemaError):
    """Raised when a raw object name does not match the identifier grammar."""

    def __init__(self, raw: str, position: int, reason: str) -> None:
        self.raw = raw
        self.position = position
        self.reason = reason
        super().__init__(f"Cannot parse name '{raw}' at position {position}: {reason}")


class TooManyQualifiers(SchemaError):
    """Raised when a name has more than one dot-qualifier."""

    def __init__(self, raw: str, qualifier_count: int) -> None:
        self.raw = raw
        self.qualifier_count = qualifier_count
        super().__init__(
            f"Object name '{raw}' contains {qualifier_count} qualifiers. At most one is allowed."
        )


class InvalidObjectName(SchemaError, ValueError):
    """Raised when an object is given a name that cannot be parsed."""

    def __init__(self, raw: str, cause: SchemaError) -> None:
        self.raw = raw
        self.cause = cause
        super().__init__(f"Unable to parse object name '{raw}': {cause}")


class DuplicateObject(SchemaError):
    """Raised when an add or rename targets a key that is already taken."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"The {kind} '{key}' already exists.")


class ObjectNotFound(SchemaError):
    """Raised when a lookup, rename or removal names a missing object."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"There is no {kind} with name '{name}'.")
