"""
Diagnostics sinks for deprecated naming usage.

The schema container reports mixed qualified/unqualified usage here instead
of raising. Each category has a stable identifier so a sink can deduplicate
or link to documentation.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

QUALIFIED_NAMES_AFTER_UNQUALIFIED = "qualified-names-after-unqualified"
UNQUALIFIED_NAMES_AFTER_QUALIFIED = "unqualified-names-after-qualified"
QUALIFIED_DEFAULT_NAMESPACE = "qualified-default-namespace"

DEPRECATION_MESSAGES = {
    QUALIFIED_NAMES_AFTER_UNQUALIFIED: (
        "Using qualified names to create or reference objects in a schema that "
        "contains unqualified names is deprecated."
    ),
    UNQUALIFIED_NAMES_AFTER_QUALIFIED: (
        "Using unqualified names to create or reference objects in a schema that "
        "contains qualified names and lacks a default namespace configuration is deprecated."
    ),
    QUALIFIED_DEFAULT_NAMESPACE: (
        "Using a qualified name as the default namespace of a schema is deprecated."
    ),
}


class Diagnostics(Protocol):
    """Receiver of deprecation notices raised by a Schema."""

    def notify_deprecated_usage(self, identifier: str) -> None: ...


class LoggingDiagnostics:
    """Default sink: writes each notice as a warning to the module logger."""

    def notify_deprecated_usage(self, identifier: str) -> None:
        message = DEPRECATION_MESSAGES.get(identifier, "Deprecated schema usage.")
        logger.warning(f"{message} ({identifier})")


class RecordingDiagnostics:
    """Sink that keeps every identifier it receives, in order."""

    def __init__(self) -> None:
        self.identifiers: list[str] = []

    def notify_deprecated_usage(self, identifier: str) -> None:
        self.identifiers.append(identifier)

    def count(self, identifier: str) -> int:
        return self.identifiers.count(identifier)
