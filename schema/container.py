"""
Schema container: tables and sequences keyed by namespace-aware names.

Unqualified names are resolved against the configured default namespace.
Without one, mixing qualified and unqualified names for objects sharing a
local name is still accepted but reported to the diagnostics sink, once per
category for adds and once per category for lookups.
"""

import copy
import logging
from typing import Iterable, TypeVar

from config.settings import Settings
from schema.asset import AbstractAsset, Identifier
from schema.diagnostics import (
    QUALIFIED_DEFAULT_NAMESPACE,
    QUALIFIED_NAMES_AFTER_UNQUALIFIED,
    UNQUALIFIED_NAMES_AFTER_QUALIFIED,
    Diagnostics,
    LoggingDiagnostics,
)
from schema.errors import DuplicateObject, InvalidObjectName
from schema.models import ForeignKeyConstraint, Sequence, Table
from schema.parser import strip_quotes
from schema.registry import ObjectRegistry
from schema.schema_config import SchemaConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=AbstractAsset)

ADD = "add"
LOOKUP = "lookup"

# (category, trigger) -> one-shot flag attribute on Schema
_NOTICE_FLAGS = {
    (QUALIFIED_NAMES_AFTER_UNQUALIFIED, ADD): "_added_qualified_after_unqualified",
    (UNQUALIFIED_NAMES_AFTER_QUALIFIED, ADD): "_added_unqualified_after_qualified",
    (QUALIFIED_NAMES_AFTER_UNQUALIFIED, LOOKUP): "_referenced_qualified_among_unqualified",
    (UNQUALIFIED_NAMES_AFTER_QUALIFIED, LOOKUP): "_referenced_unqualified_among_qualified",
}


class Schema:
    """
    In-memory registry of tables and sequences.

    Objects are stored under the lowercase form of their resolved qualified
    name. Namespaces of added objects are registered implicitly unless they
    are the default namespace.
    """

    def __init__(
        self,
        tables: Iterable[Table] = (),
        sequences: Iterable[Sequence] = (),
        config: SchemaConfig | None = None,
        namespaces: Iterable[str] = (),
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._config = config if config is not None else SchemaConfig()
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

        self._tables: ObjectRegistry[Table] = ObjectRegistry("table", self._resolve_key)
        self._sequences: ObjectRegistry[Sequence] = ObjectRegistry("sequence", self._resolve_key)
        # lowercase unquoted name -> name as first given
        self._namespaces: dict[str, str] = {}

        self._added_qualified_after_unqualified = False
        self._added_unqualified_after_qualified = False
        self._referenced_qualified_among_unqualified = False
        self._referenced_unqualified_among_qualified = False

        default_namespace = self._config.get_default_namespace_name()
        if default_namespace is not None and Identifier(default_namespace).get_namespace_name() is not None:
            self._diagnostics.notify_deprecated_usage(QUALIFIED_DEFAULT_NAMESPACE)

        for namespace in namespaces:
            self.create_namespace(namespace)
        for table in tables:
            self.add_table(table)
        for sequence in sequences:
            self.add_sequence(sequence)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, diagnostics: Diagnostics | None = None) -> "Schema":
        """Create an empty schema configured from process settings."""
        return cls(config=SchemaConfig.from_settings(settings), diagnostics=diagnostics)

    def get_name(self) -> str | None:
        """Default namespace of this schema, if any."""
        return self._config.get_default_namespace_name()

    def get_object_name(self) -> Identifier | None:
        """Parsed default namespace, or None when the schema has none."""
        name = self.get_name()
        if name is None:
            return None
        return Identifier(name)

    def get_config(self) -> SchemaConfig:
        return self._config

    def _resolve_key(self, asset: AbstractAsset) -> str:
        name = asset.get_name()
        default_namespace = self.get_name()
        if asset.get_namespace_name() is None and default_namespace is not None:
            name = f"{default_namespace}.{name}"
        return name.lower()

    # Compatibility policy

    def _check_mixed_usage(self, registry: ObjectRegistry[T], asset: AbstractAsset, trigger: str) -> None:
        """Report qualified/unqualified mixing for objects sharing the asset's local name."""
        if self.get_name() is not None:
            return

        local_name = asset.local_name.lower()
        qualified = asset.get_namespace_name() is not None

        for other in registry.list():
            if other is asset or other.local_name.lower() != local_name:
                continue
            if (other.get_namespace_name() is not None) != qualified:
                if qualified:
                    self._notify_once(QUALIFIED_NAMES_AFTER_UNQUALIFIED, trigger)
                else:
                    self._notify_once(UNQUALIFIED_NAMES_AFTER_QUALIFIED, trigger)
                return

    def _notify_once(self, identifier: str, trigger: str) -> None:
        flag = _NOTICE_FLAGS[(identifier, trigger)]
        if getattr(self, flag):
            return

        setattr(self, flag, True)
        self._diagnostics.notify_deprecated_usage(identifier)

    def _reference(self, registry: ObjectRegistry[T], name: str) -> bool:
        """Check whether a raw name resolves to a stored object, reporting mixed usage on a miss."""
        identifier = Identifier(name)
        if registry.has_key(self._resolve_key(identifier)):
            return True

        self._check_mixed_usage(registry, identifier, LOOKUP)
        return False

    def _has(self, registry: ObjectRegistry[T], name: str) -> bool:
        try:
            return self._reference(registry, name)
        except InvalidObjectName:
            return False

    def _add(self, registry: ObjectRegistry[T], asset: T) -> None:
        key = self._resolve_key(asset)
        if registry.has_key(key):
            raise DuplicateObject(registry.kind, key)

        self._check_mixed_usage(registry, asset, ADD)
        self._register_implicit_namespace(asset)
        registry.add(asset)

    # Namespaces

    def _register_implicit_namespace(self, asset: AbstractAsset) -> None:
        namespace = asset.get_namespace_name()
        if namespace is None or asset.is_in_default_namespace(self.get_name()):
            return
        if not self.has_namespace(namespace):
            self.create_namespace(namespace)

    def create_namespace(self, name: str) -> None:
        """
        Register a namespace.

        Raises:
            DuplicateObject: if a namespace with the same unquoted name (any case) exists
        """
        key = strip_quotes(name).lower()
        if key in self._namespaces:
            raise DuplicateObject("namespace", key)

        self._namespaces[key] = name
        logger.debug(f"Registered namespace '{name}'")

    def has_namespace(self, name: str) -> bool:
        return strip_quotes(name).lower() in self._namespaces

    def get_namespaces(self) -> list[str]:
        return list(self._namespaces.values())

    # Tables

    def add_table(self, table: Table) -> None:
        """
        Add a table, registering its namespace when it is new.

        Raises:
            DuplicateObject: if a table with the same resolved name exists
        """
        self._add(self._tables, table)
        table.set_schema_config(self._config)

    def create_table(self, name: str) -> Table:
        table = Table(name)
        self.add_table(table)
        return table

    def has_table(self, name: str) -> bool:
        return self._has(self._tables, name)

    def get_table(self, name: str) -> Table:
        """
        Get a table by name (case-insensitive, quotes ignored).

        Raises:
            ObjectNotFound: if no table resolves to the name
        """
        self._reference(self._tables, name)
        return self._tables.get(name)

    def get_tables(self) -> list[Table]:
        return self._tables.list()

    def rename_table(self, old_name: str, new_name: str) -> Table:
        """
        Rename a table, keeping the same Table instance.

        Raises:
            InvalidObjectName: if new_name cannot be parsed
            ObjectNotFound: if old_name does not resolve to a table
            DuplicateObject: if new_name resolves to another existing table
        """
        Identifier(new_name)
        self._reference(self._tables, old_name)

        table = self._tables.rename(old_name, new_name)
        table._set_name(new_name)

        self._check_mixed_usage(self._tables, table, ADD)
        self._register_implicit_namespace(table)
        return table

    def drop_table(self, name: str) -> None:
        self._reference(self._tables, name)
        self._tables.remove(name)

    def get_foreign_table(self, constraint: ForeignKeyConstraint) -> Table:
        """Resolve a foreign key's referenced table against this schema."""
        return self.get_table(constraint.get_foreign_table_name())

    # Sequences

    def add_sequence(self, sequence: Sequence) -> None:
        """
        Add a sequence, registering its namespace when it is new.

        Raises:
            DuplicateObject: if a sequence with the same resolved name exists
        """
        self._add(self._sequences, sequence)

    def create_sequence(
        self,
        name: str,
        allocation_size: int = 1,
        initial_value: int = 1,
        cache: int | None = None,
    ) -> Sequence:
        sequence = Sequence(name, allocation_size, initial_value, cache)
        self.add_sequence(sequence)
        return sequence

    def has_sequence(self, name: str) -> bool:
        return self._has(self._sequences, name)

    def get_sequence(self, name: str) -> Sequence:
        self._reference(self._sequences, name)
        return self._sequences.get(name)

    def get_sequences(self) -> list[Sequence]:
        return self._sequences.list()

    def drop_sequence(self, name: str) -> None:
        self._reference(self._sequences, name)
        self._sequences.remove(name)

    # Copying

    def clone(self) -> "Schema":
        """
        Deep copy of the schema.

        Registries, namespace entries, tables (with their columns, indexes and
        foreign keys) and sequences are all newly allocated. Foreign keys keep
        their target as a name and so resolve against the clone.
        """
        clone = copy.copy(self)
        clone._config = self._config.model_copy()
        clone._namespaces = dict(self._namespaces)
        clone._tables = ObjectRegistry("table", clone._resolve_key)
        clone._sequences = ObjectRegistry("sequence", clone._resolve_key)

        for table in self._tables:
            table_clone = table.clone()
            table_clone.set_schema_config(clone._config)
            clone._tables.add(table_clone)

        for sequence in self._sequences:
            clone._sequences.add(sequence.clone())

        return clone

    def __deepcopy__(self, memo: dict) -> "Schema":
        return self.clone()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.get_name()!r}, "
            f"tables={len(self._tables)}, sequences={len(self._sequences)})"
        )
