"""Language-agnostic argument and context field types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ArgType(enum.Enum):
    """Argument types supported in the schema."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    PATH = "path"

    def as_str(self) -> str:
        """Return the schema type name used in bao.toml."""
        return self.value


class DatabaseType(enum.Enum):
    """Database kinds for context fields."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


@dataclass(frozen=True)
class ContextFieldType:
    """A context field: either a database pool or an HTTP client."""

    database: DatabaseType | None = None

    @classmethod
    def http(cls) -> ContextFieldType:
        """An HTTP client field."""
        return cls()

    @classmethod
    def for_database(cls, db_type: DatabaseType) -> ContextFieldType:
        """A database connection pool field."""
        return cls(DatabaseType(db_type))

    @property
    def is_http(self) -> bool:
        return self.database is None

    def is_async(self) -> bool:
        """Return whether this field needs asynchronous initialisation."""
        return self.database is not None