"""
Platform collaborators used to render object names for a database backend.

Only the two identifier hooks needed by name rendering live here; the rest
of SQL dialect rendering belongs to the caller's database layer.
"""

from typing import Protocol

from config.settings import get_settings


class Platform(Protocol):
    """Identifier rendering interface consumed by AbstractAsset.get_quoted_name()."""

    def quote_single_identifier(self, value: str) -> str: ...

    def normalize_unquoted_identifier(self, value: str) -> str: ...


class AnsiPlatform:
    """SQL standard double-quote quoting, unquoted names kept as typed."""

    name = "ansi"
    open_quote = '"'
    close_quote = '"'

    def quote_single_identifier(self, value: str) -> str:
        escaped = value.replace(self.close_quote, self.close_quote * 2)
        return f"{self.open_quote}{escaped}{self.close_quote}"

    def normalize_unquoted_identifier(self, value: str) -> str:
        return value


class PostgreSQLPlatform(AnsiPlatform):
    """PostgreSQL folds unquoted identifiers to lower case."""

    name = "postgres"

    def normalize_unquoted_identifier(self, value: str) -> str:
        return value.lower()


class OraclePlatform(AnsiPlatform):
    """Oracle folds unquoted identifiers to upper case."""

    name = "oracle"

    def normalize_unquoted_identifier(self, value: str) -> str:
        return value.upper()


class MySQLPlatform(AnsiPlatform):
    name = "mysql"
    open_quote = "`"
    close_quote = "`"


class SQLServerPlatform(AnsiPlatform):
    name = "sqlserver"
    open_quote = "["
    close_quote = "]"


PLATFORMS: dict[str, type[AnsiPlatform]] = {
    "ansi": AnsiPlatform,
    "postgres": PostgreSQLPlatform,
    "postgresql": PostgreSQLPlatform,
    "oracle": OraclePlatform,
    "mysql": MySQLPlatform,
    "mariadb": MySQLPlatform,
    "sqlserver": SQLServerPlatform,
    "mssql": SQLServerPlatform,
}


def get_platform(dialect: str | None = None) -> AnsiPlatform:
    """
    Get a platform instance by dialect name (case-insensitive).

    Without a dialect, the configured default_dialect setting is used.

    Raises:
        ValueError: if the dialect is not known
    """
    if dialect is None:
        dialect = get_settings().default_dialect

    try:
        return PLATFORMS[dialect.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown dialect '{dialect}'. Expected one of: {', '.join(sorted(PLATFORMS))}"
        ) from None
