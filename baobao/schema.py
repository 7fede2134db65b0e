"""Traversal of the command hierarchy and info types for code generation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Protocol

from baobao.argtypes import ContextFieldType


class CommandLike(Protocol):
    """A command definition with nested subcommands keyed by name."""

    commands: Mapping[str, Any]


def _subcommands(command: Any) -> Mapping[str, Any]:
    return getattr(command, "commands", None) or {}


@dataclass(frozen=True)
class FlatCommand:
    """A command together with its position in the tree."""

    name: str
    path: tuple[str, ...]
    depth: int
    is_leaf: bool
    command: Any

    def path_str(self, sep: str = "/") -> str:
        """Return the path joined by ``sep``, e.g. ``db/migrate``."""
        return sep.join(self.path)

    def parent_path(self) -> list[str]:
        """Return the path without this command's own name."""
        return list(self.path[:-1])


class CommandTree:
    """A flat, depth-first view of a command hierarchy."""

    def __init__(self, commands: Mapping[str, Any]) -> None:
        self._commands = list(self._flatten(commands, (), 0))

    @classmethod
    def _flatten(
        cls, commands: Mapping[str, Any], parent: tuple[str, ...], depth: int
    ) -> Iterator[FlatCommand]:
        for name, command in commands.items():
            path = (*parent, name)
            children = _subcommands(command)
            yield FlatCommand(name, path, depth, not children, command)
            if children:
                yield from cls._flatten(children, path, depth + 1)

    def __iter__(self) -> Iterator[FlatCommand]:
        """Yield every command in depth-first order."""
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def leaves(self) -> Iterator[FlatCommand]:
        """Yield commands without subcommands; these have handlers."""
        return (cmd for cmd in self._commands if cmd.is_leaf)

    def parents(self) -> Iterator[FlatCommand]:
        """Yield commands that group subcommands."""
        return (cmd for cmd in self._commands if not cmd.is_leaf)

    def leaf_count(self) -> int:
        """Return the number of leaf commands."""
        return sum(1 for _ in self.leaves())

    def parent_count(self) -> int:
        """Return the number of parent commands."""
        return sum(1 for _ in self.parents())

    def collect_paths(self) -> set[str]:
        """Return every command path, e.g. ``{"hello", "db", "db/migrate"}``."""
        return {cmd.path_str("/") for cmd in self._commands}

    def collect_leaf_paths(self) -> set[str]:
        """Return the paths of leaf commands, which match handler files."""
        return {cmd.path_str("/") for cmd in self.leaves()}


@dataclass
class CommandInfo:
    """A command as needed for code generation."""

    name: str
    description: str
    has_subcommands: bool = False


@dataclass
class PoolConfigInfo:
    """Connection pool options; timeouts are in seconds."""

    max_connections: int | None = None
    min_connections: int | None = None
    acquire_timeout: int | None = None
    idle_timeout: int | None = None
    max_lifetime: int | None = None

    def has_config(self) -> bool:
        """Return whether any option is set."""
        return any(getattr(self, f.name) is not None for f in fields(self))


@dataclass
class SqliteConfigInfo:
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
            getattr(self, f.name) is not None for f in fields(self) if f.name != "path"
        )


@dataclass
class ContextFieldInfo:
    """A context field as needed for code generation."""

    name: str
    field_type: ContextFieldType
    env_var: str
    is_async: bool
    pool: PoolConfigInfo = field(default_factory=PoolConfigInfo)
    sqlite: SqliteConfigInfo | None = None