"""
Per-schema configuration shared between a Schema and the tables it creates.
"""

from pydantic import BaseModel, Field

from config.settings import Settings, get_settings

DEFAULT_MAX_IDENTIFIER_LENGTH = 63


class SchemaConfig(BaseModel):
    """Default namespace and identifier length limit of a Schema."""

    model_config = {"validate_assignment": True}

    name: str | None = Field(
        default=None,
        description="Default namespace; unqualified objects are resolved against it",
    )
    max_identifier_length: int = Field(
        default=DEFAULT_MAX_IDENTIFIER_LENGTH,
        ge=1,
        description="Upper bound for auto-generated identifier names",
    )

    def get_default_namespace_name(self) -> str | None:
        return self.name

    def get_max_identifier_length(self) -> int:
        return self.max_identifier_length

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SchemaConfig":
        """Build a config from process settings (environment / .env)."""
        settings = settings or get_settings()
        return cls(
            name=settings.default_namespace,
            max_identifier_length=settings.max_identifier_length,
        )
