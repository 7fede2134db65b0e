import pytest

from baobao.adapters import Dependency, ImportSpec
from baobao.argtypes import DatabaseType
from baobao.database import (
    DatabaseAdapter,
    DatabaseOptionsInfo,
    PoolConfig,
    PoolInitInfo,
    SqliteConfig,
)
from baobao.fragments import Line


class _SqlxAdapter(DatabaseAdapter):
    def name(self):
        return "sqlx"

    def dependencies(self, db_type):
        return [Dependency("sqlx", "0.8")]

    def pool_type(self, db_type):
        return {DatabaseType.SQLITE: "sqlx::SqlitePool"}.get(db_type, "sqlx::AnyPool")

    def generate_pool_init(self, info):
        lines = [Line(f'let url = std::env::var("{info.env_var}")?;')]
        if info.pool_config.has_config():
            lines.append(Line("let opts = PoolOptions::new();"))
        return lines

    def generate_options(self, info):
        if info.sqlite is None or not info.sqlite.has_config():
            return None
        return [Line("let opts = SqliteConnectOptions::new();")]

    def imports(self, db_type):
        return [ImportSpec("sqlx")]

    def requires_async(self, db_type):
        return True


def test_pool_config_default_has_no_config():
    assert PoolConfig().has_config() is False


@pytest.mark.parametrize(
    "option",
    ["max_connections", "min_connections", "acquire_timeout", "idle_timeout", "max_lifetime"],
)
def test_pool_config_any_option_counts(option):
    assert PoolConfig(**{option: 5}).has_config() is True


def test_sqlite_config_default_has_no_config():
    assert SqliteConfig().has_config() is False


def test_sqlite_path_alone_is_not_config():
    assert SqliteConfig(path="db.sqlite").has_config() is False


@pytest.mark.parametrize(
    "option,value",
    [
        ("create_if_missing", True),
        ("read_only", False),
        ("journal_mode", "wal"),
        ("synchronous", "normal"),
        ("busy_timeout", 5000),
        ("foreign_keys", True),
    ],
)
def test_sqlite_config_any_option_counts(option, value):
    assert SqliteConfig(**{option: value}).has_config() is True


def test_pool_init_info_defaults():
    info = PoolInitInfo("database", DatabaseType.SQLITE, "DATABASE_URL")
    assert info.pool_config == PoolConfig()
    assert info.sqlite_config is None


def test_database_adapter_is_abstract():
    with pytest.raises(TypeError):
        DatabaseAdapter()


def test_adapter_uses_pool_config():
    adapter = _SqlxAdapter()
    plain = PoolInitInfo("db", DatabaseType.POSTGRES, "DATABASE_URL")
    configured = PoolInitInfo(
        "db", DatabaseType.POSTGRES, "DATABASE_URL", pool_config=PoolConfig(max_connections=5)
    )
    assert len(adapter.generate_pool_init(plain)) == 1
    assert len(adapter.generate_pool_init(configured)) == 2
    assert adapter.generate_pool_init(plain)[0] == Line(
        'let url = std::env::var("DATABASE_URL")?;'
    )


def test_adapter_options_follow_sqlite_config():
    adapter = _SqlxAdapter()
    assert adapter.generate_options(DatabaseOptionsInfo(DatabaseType.SQLITE)) is None
    assert (
        adapter.generate_options(
            DatabaseOptionsInfo(DatabaseType.SQLITE, SqliteConfig(path="db.sqlite"))
        )
        is None
    )
    options = adapter.generate_options(
        DatabaseOptionsInfo(DatabaseType.SQLITE, SqliteConfig(foreign_keys=True))
    )
    assert options is not None and len(options) == 1