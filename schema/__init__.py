"""Schema object naming and registry module."""

from schema.asset import AbstractAsset, Identifier
from schema.container import Schema
from schema.diagnostics import (
    QUALIFIED_DEFAULT_NAMESPACE,
    QUALIFIED_NAMES_AFTER_UNQUALIFIED,
    UNQUALIFIED_NAMES_AFTER_QUALIFIED,
    LoggingDiagnostics,
    RecordingDiagnostics,
)
from schema.errors import (
    DuplicateObject,
    InvalidObjectName,
    ObjectNotFound,
    ParseError,
    SchemaError,
    TooManyQualifiers,
)
from schema.models import Column, ForeignKeyConstraint, Index, Sequence, Table
from schema.parser import Segment, parse, parse_name
from schema.platform import get_platform
from schema.registry import ObjectRegistry
from schema.schema_config import SchemaConfig

__all__ = [
    "AbstractAsset",
    "Identifier",
    "Segment",
    "parse",
    "parse_name",
    "Column",
    "Index",
    "ForeignKeyConstraint",
    "Sequence",
    "Table",
    "ObjectRegistry",
    "Schema",
    "SchemaConfig",
    "get_platform",
    "LoggingDiagnostics",
    "RecordingDiagnostics",
    "QUALIFIED_NAMES_AFTER_UNQUALIFIED",
    "UNQUALIFIED_NAMES_AFTER_QUALIFIED",
    "QUALIFIED_DEFAULT_NAMESPACE",
    "SchemaError",
    "ParseError",
    "TooManyQualifiers",
    "InvalidObjectName",
    "DuplicateObject",
    "ObjectNotFound",
]
