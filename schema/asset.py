"""
Named schema assets.

Every schema object (table, sequence, column, index, ...) derives its
structured name from AbstractAsset: an optional namespace, a local name and
whether the local name was quoted when it was given.
"""

import copy
import zlib
from typing import Any, Iterable

from schema.errors import InvalidObjectName, ParseError, TooManyQualifiers
from schema.parser import Segment, parse_name
from schema.platform import Platform


class AbstractAsset:
    """
    Base class giving an object its parsed name.

    Names are set once at construction and only changed again through an
    explicit rename performed by the owning container.
    """

    def __init__(self, name: str = "") -> None:
        self._name = ""
        self._namespace: str | None = None
        self._quoted = False
        self._segments: list[Segment] = []
        self._set_name(name)

    def _set_name(self, name: str) -> None:
        """
        Parse and store a raw name.

        Raises:
            InvalidObjectName: if the name cannot be parsed or has too many qualifiers
        """
        try:
            segments = parse_name(name)
        except (ParseError, TooManyQualifiers) as e:
            raise InvalidObjectName(name, e) from e

        if not segments:
            self._name, self._namespace, self._quoted, self._segments = "", None, False, []
            return

        if len(segments) == 1:
            namespace, local = None, segments[0]
        else:
            namespace, local = segments[0].value, segments[1]

        self._name = local.value
        self._quoted = local.quoted
        self._namespace = namespace
        self._segments = segments

    @property
    def name(self) -> str:
        return self.get_name()

    @property
    def local_name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def get_name(self) -> str:
        """Qualified name: namespace.local, or just local without a namespace."""
        if self._namespace is not None:
            return f"{self._namespace}.{self._name}"
        return self._name

    def get_namespace_name(self) -> str | None:
        """Namespace of the asset; None means the default namespace is assumed."""
        return self._namespace

    def is_quoted(self) -> bool:
        return self._quoted

    def is_in_default_namespace(self, default_namespace_name: str | None) -> bool:
        return self._namespace == default_namespace_name or self._namespace is None

    def get_shortest_name(self, default_namespace_name: str | None) -> str:
        """
        Lowercase name stripped of the default namespace.

        Assets in any other namespace keep their full qualified name.
        """
        if self._namespace == default_namespace_name:
            return self._name.lower()
        return self.get_name().lower()

    def get_quoted_name(self, platform: Platform) -> str:
        """
        Render the name for a platform, one segment at a time.

        Unquoted segments are normalized by the platform before quoting, so a
        quoted namespace and unquoted local name render the way each was typed.
        """
        parts = []
        for segment in self._segments:
            value = segment.value
            if not segment.quoted:
                value = platform.normalize_unquoted_identifier(value)
            parts.append(platform.quote_single_identifier(value))

        return ".".join(parts)

    @staticmethod
    def generate_short_identifier(column_names: Iterable[str], prefix: str = "", max_length: int = 30) -> str:
        """
        Build a deterministic identifier from column names.

        Each name contributes its CRC-32 checksum in lowercase hex; the result
        is PREFIX_HASHES uppercased and cut to max_length characters.
        """
        hashes = "".join(format(zlib.crc32(name.encode("utf-8")), "x") for name in column_names)
        return f"{prefix}_{hashes}".upper()[:max_length]

    def clone(self) -> "AbstractAsset":
        """Independent copy of this asset."""
        clone = copy.copy(self)
        clone._segments = list(self._segments)
        return clone

    def _value_state(self) -> tuple[Any, ...]:
        return (tuple(self._segments),)

    def equals(self, other: object) -> bool:
        """Whether other is the same kind of asset with the same name and contents."""
        return type(other) is type(self) and self._value_state() == other._value_state()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_name()!r})"


class Identifier(AbstractAsset):
    """A bare name, used for lookups and for references to other objects by name."""

    @classmethod
    def from_asset(cls, asset: AbstractAsset) -> "Identifier":
        """Capture another asset's name, quoting included."""
        identifier = cls()
        identifier._name = asset._name
        identifier._namespace = asset._namespace
        identifier._quoted = asset._quoted
        identifier._segments = list(asset._segments)
        return identifier
