"""Interface and configuration for database adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass, field

from baobao.adapters import Dependency, ImportSpec
from baobao.argtypes import DatabaseType
from baobao.fragments import CodeFragment


@dataclass
class PoolConfig:
    """Connection pool options; timeouts are in seconds."""

    max_connections: int | None = None
    min_connections: int | None = None
    acquire_timeout: int | None = None
    idle_timeout: int | None = None
    max_lifetime: int | None = None

    def has_config(self) -> bool:
        """Return whether any option is set."""
        return any(value is not None for value in astuple(self))


@dataclass
class SqliteConfig:
    """SQLite options; ``path`` takes precedence over the environment variable."""

    path: str | None = None
    create_if_missing: bool | None = None
    read_only: bool | None = None
    journal_mode: str | None = None
    synchronous: str | None = None
    busy_timeout: int | None = None
    foreign_keys: bool | None = None

    def has_config(self) -> bool:
        """Return whether any connect option is set; ``path`` does not count."""
        return any(
            value is not None
            for value in (
                self.create_if_missing,
                self.read_only,
                self.journal_mode,
                self.synchronous,
                self.busy_timeout,
                self.foreign_keys,
            )
        )


@dataclass
class PoolInitInfo:
    """What is needed to generate pool initialisation."""

    field_name: str
    db_type: DatabaseType
    env_var: str
    pool_config: PoolConfig = field(default_factory=PoolConfig)
    sqlite_config: SqliteConfig | None = None
    is_async: bool = True


@dataclass
class DatabaseOptionsInfo:
    """What is needed to generate database-specific options."""

    db_type: DatabaseType
    sqlite: SqliteConfig | None = None


class DatabaseAdapter(ABC):
    """Generates connection and pool code for one database library."""

    @abstractmethod
    def name(self) -> str:
        """Return the adapter name."""

    @abstractmethod
    def dependencies(self, db_type: DatabaseType) -> list[Dependency]:
        """Return the packages needed for ``db_type``."""

    @abstractmethod
    def pool_type(self, db_type: DatabaseType) -> str:
        """Return the type name of a pool for ``db_type``."""

    @abstractmethod
    def generate_pool_init(self, info: PoolInitInfo) -> list[CodeFragment]:
        """Generate pool initialisation code."""

    @abstractmethod
    def generate_options(self, info: DatabaseOptionsInfo) -> list[CodeFragment] | None:
        """Generate database-specific options, if any."""

    @abstractmethod
    def imports(self, db_type: DatabaseType) -> list[ImportSpec]:
        """Return the imports database code needs."""

    @abstractmethod
    def requires_async(self, db_type: DatabaseType) -> bool:
        """Return whether initialisation is asynchronous."""