"""
Schema object models stored in a Schema's registries.

Tables own their columns, indexes and foreign keys. Foreign keys refer to
their target table by name only, so a copied table never points into the
schema it was copied from.
"""

import copy
from typing import Any, Iterable

from schema.asset import AbstractAsset, Identifier
from schema.errors import DuplicateObject, ObjectNotFound
from schema.schema_config import DEFAULT_MAX_IDENTIFIER_LENGTH, SchemaConfig

PRIMARY_KEY_NAME = "primary"


class Column(AbstractAsset):
    """Represents a table column."""

    def __init__(
        self,
        name: str,
        type_name: str,
        *,
        notnull: bool = True,
        default: Any = None,
        length: int | None = None,
        autoincrement: bool = False,
        comment: str = "",
    ) -> None:
        super().__init__(name)
        self.type_name = type_name
        self.notnull = notnull
        self.default = default
        self.length = length
        self.autoincrement = autoincrement
        self.comment = comment

    def clone(self) -> "Column":
        clone = super().clone()
        clone.default = copy.deepcopy(self.default)
        return clone

    def _value_state(self) -> tuple[Any, ...]:
        return super()._value_state() + (
            self.type_name,
            self.notnull,
            self.default,
            self.length,
            self.autoincrement,
            self.comment,
        )


class Index(AbstractAsset):
    """Represents an index, including the primary key."""

    def __init__(self, name: str, columns: Iterable[str], *, unique: bool = False, primary: bool = False) -> None:
        super().__init__(name)
        self.columns = list(columns)
        self.unique = unique or primary
        self.primary = primary

    def clone(self) -> "Index":
        clone = super().clone()
        clone.columns = list(self.columns)
        return clone

    def _value_state(self) -> tuple[Any, ...]:
        return super()._value_state() + (tuple(self.columns), self.unique, self.primary)


class ForeignKeyConstraint(AbstractAsset):
    """Represents a foreign key. The referenced table is held by name."""

    def __init__(
        self,
        local_columns: Iterable[str],
        foreign_table_name: str | Identifier,
        foreign_columns: Iterable[str],
        name: str = "",
        options: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(name)
        self.local_columns = list(local_columns)
        self.foreign_columns = list(foreign_columns)
        self.options = dict(options or {})

        if isinstance(foreign_table_name, Identifier):
            self._foreign_table_name = foreign_table_name.clone()
        else:
            self._foreign_table_name = Identifier(foreign_table_name)

    def get_foreign_table_name(self) -> str:
        return self._foreign_table_name.get_name()

    @property
    def foreign_table(self) -> Identifier:
        return self._foreign_table_name

    def clone(self) -> "ForeignKeyConstraint":
        clone = super().clone()
        clone.local_columns = list(self.local_columns)
        clone.foreign_columns = list(self.foreign_columns)
        clone.options = dict(self.options)
        clone._foreign_table_name = self._foreign_table_name.clone()
        return clone

    def _value_state(self) -> tuple[Any, ...]:
        return super()._value_state() + (
            tuple(self.local_columns),
            self._foreign_table_name.get_name(),
            tuple(self.foreign_columns),
            tuple(sorted(self.options.items())),
        )


class Sequence(AbstractAsset):
    """Represents a database sequence."""

    def __init__(self, name: str, allocation_size: int = 1, initial_value: int = 1, cache: int | None = None) -> None:
        super().__init__(name)
        self.allocation_size = allocation_size
        self.initial_value = initial_value
        self.cache = cache

    def _value_state(self) -> tuple[Any, ...]:
        return super()._value_state() + (self.allocation_size, self.initial_value, self.cache)


class Table(AbstractAsset):
    """
    Represents a database table.

    Column, index and foreign key names are case-insensitive within a table.
    Auto-generated index and constraint names are bounded by the max
    identifier length of the attached SchemaConfig.
    """

    def __init__(
        self,
        name: str,
        columns: Iterable[Column] = (),
        indexes: Iterable[Index] = (),
        foreign_keys: Iterable[ForeignKeyConstraint] = (),
        config: SchemaConfig | None = None,
    ) -> None:
        super().__init__(name)
        self._columns: dict[str, Column] = {}
        self._indexes: dict[str, Index] = {}
        self._foreign_keys: dict[str, ForeignKeyConstraint] = {}
        self._config = config

        for column in columns:
            self._add_column(column)
        for index in indexes:
            self._add_index(index)
        for constraint in foreign_keys:
            self._add_foreign_key(constraint)

    def set_schema_config(self, config: SchemaConfig | None) -> None:
        self._config = config

    def _get_max_identifier_length(self) -> int:
        if self._config is None:
            return DEFAULT_MAX_IDENTIFIER_LENGTH
        return self._config.get_max_identifier_length()

    def _generate_name(self, column_names: Iterable[str], prefix: str) -> str:
        return self.generate_short_identifier(
            [self.get_name(), *column_names],
            prefix,
            self._get_max_identifier_length(),
        )

    # Columns

    def add_column(self, name: str, type_name: str, **options: Any) -> Column:
        """Create a column and add it to the table."""
        column = Column(name, type_name, **options)
        self._add_column(column)
        return column

    def _add_column(self, column: Column) -> None:
        key = column.get_name().lower()
        if key in self._columns:
            raise DuplicateObject("column", f"{self.get_name()}.{column.get_name()}")
        self._columns[key] = column

    def has_column(self, name: str) -> bool:
        return Identifier(name).get_name().lower() in self._columns

    def get_column(self, name: str) -> Column:
        key = Identifier(name).get_name().lower()
        if key not in self._columns:
            raise ObjectNotFound("column", f"{self.get_name()}.{name}")
        return self._columns[key]

    def get_columns(self) -> list[Column]:
        return list(self._columns.values())

    def drop_column(self, name: str) -> None:
        key = Identifier(name).get_name().lower()
        if key not in self._columns:
            raise ObjectNotFound("column", f"{self.get_name()}.{name}")
        del self._columns[key]

    def _require_columns(self, column_names: Iterable[str]) -> None:
        for column_name in column_names:
            if not self.has_column(column_name):
                raise ObjectNotFound("column", f"{self.get_name()}.{column_name}")

    # Indexes

    def add_index(self, columns: list[str], name: str | None = None) -> Index:
        """Add an index over existing columns, generating its name when none is given."""
        self._require_columns(columns)
        index = Index(name or self._generate_name(columns, "idx"), columns)
        self._add_index(index)
        return index

    def add_unique_index(self, columns: list[str], name: str | None = None) -> Index:
        self._require_columns(columns)
        index = Index(name or self._generate_name(columns, "uniq"), columns, unique=True)
        self._add_index(index)
        return index

    def set_primary_key(self, columns: list[str], name: str = PRIMARY_KEY_NAME) -> Index:
        """Declare the primary key; its columns become NOT NULL."""
        self._require_columns(columns)
        index = Index(name, columns, primary=True)
        self._add_index(index)

        for column_name in columns:
            self.get_column(column_name).notnull = True
        return index

    def _add_index(self, index: Index) -> None:
        key = index.get_name().lower()
        if key in self._indexes:
            raise DuplicateObject("index", f"{self.get_name()}.{index.get_name()}")
        if index.primary and self.get_primary_key() is not None:
            raise DuplicateObject("primary key", self.get_name())
        self._indexes[key] = index

    def has_index(self, name: str) -> bool:
        return Identifier(name).get_name().lower() in self._indexes

    def get_index(self, name: str) -> Index:
        key = Identifier(name).get_name().lower()
        if key not in self._indexes:
            raise ObjectNotFound("index", f"{self.get_name()}.{name}")
        return self._indexes[key]

    def get_indexes(self) -> list[Index]:
        return list(self._indexes.values())

    def get_primary_key(self) -> Index | None:
        for index in self._indexes.values():
            if index.primary:
                return index
        return None

    # Foreign keys

    def add_foreign_key_constraint(
        self,
        foreign_table: "Table | str",
        local_columns: list[str],
        foreign_columns: list[str],
        name: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> ForeignKeyConstraint:
        """
        Add a foreign key to another table.

        The target is kept as a name reference; resolve it through
        Schema.get_foreign_table().
        """
        self._require_columns(local_columns)

        if isinstance(foreign_table, Table):
            foreign_table_name = Identifier.from_asset(foreign_table)
        else:
            foreign_table_name = Identifier(foreign_table)

        constraint = ForeignKeyConstraint(
            local_columns,
            foreign_table_name,
            foreign_columns,
            name or self._generate_name(local_columns, "fk"),
            options,
        )
        self._add_foreign_key(constraint)
        return constraint

    def _add_foreign_key(self, constraint: ForeignKeyConstraint) -> None:
        key = constraint.get_name().lower()
        if key in self._foreign_keys:
            raise DuplicateObject("foreign key", f"{self.get_name()}.{constraint.get_name()}")
        self._foreign_keys[key] = constraint

    def has_foreign_key(self, name: str) -> bool:
        return Identifier(name).get_name().lower() in self._foreign_keys

    def get_foreign_key(self, name: str) -> ForeignKeyConstraint:
        key = Identifier(name).get_name().lower()
        if key not in self._foreign_keys:
            raise ObjectNotFound("foreign key", f"{self.get_name()}.{name}")
        return self._foreign_keys[key]

    def get_foreign_keys(self) -> list[ForeignKeyConstraint]:
        return list(self._foreign_keys.values())

    def clone(self) -> "Table":
        """Copy the table with independently copied columns, indexes and foreign keys."""
        clone = super().clone()
        clone._columns = {key: column.clone() for key, column in self._columns.items()}
        clone._indexes = {key: index.clone() for key, index in self._indexes.items()}
        clone._foreign_keys = {key: fk.clone() for key, fk in self._foreign_keys.items()}
        if self._config is not None:
            clone._config = self._config.model_copy()
        return clone

    def _value_state(self) -> tuple[Any, ...]:
        return super()._value_state() + (
            tuple(column._value_state() for column in self._columns.values()),
            tuple(index._value_state() for index in self._indexes.values()),
            tuple(fk._value_state() for fk in self._foreign_keys.values()),
        )
