"""Interfaces for CLI framework, async runtime and error handling adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from baobao.argtypes import ArgType
from baobao.fragments import CodeFragment
from baobao.version import Version


@dataclass
class Dependency:
    """A package an adapter needs in the generated project."""

    name: str
    version: str
    dev: bool = False

    @classmethod
    def dev_dependency(cls, name: str, version: str) -> Dependency:
        """A development-only dependency."""
        return cls(name, version, dev=True)


@dataclass
class ImportSpec:
    """An import in generated code; no symbols means the module itself."""

    module: str
    symbols: list[str] = field(default_factory=list)
    type_only: bool = False

    def symbol(self, symbol: str) -> ImportSpec:
        """Add one symbol and return the spec."""
        self.symbols.append(str(symbol))
        return self

    def add_symbols(self, symbols: Iterable[str]) -> ImportSpec:
        """Add several symbols and return the spec."""
        self.symbols.extend(str(symbol) for symbol in symbols)
        return self

    def as_type_only(self) -> ImportSpec:
        """Mark the import as type-only and return the spec."""
        self.type_only = True
        return self


@dataclass
class ArgMeta:
    """A positional argument of a command."""

    name: str
    field_name: str
    arg_type: ArgType
    required: bool
    default: str | None = None
    description: str | None = None


@dataclass
class FlagMeta:
    """An optional flag of a command."""

    name: str
    field_name: str
    flag_type: ArgType
    short: str | None = None
    default: str | None = None
    description: str | None = None


@dataclass
class SubcommandMeta:
    """A subcommand of a parent command."""

    name: str
    pascal_name: str
    snake_name: str
    description: str
    has_subcommands: bool = False


@dataclass
class CommandMeta:
    """A command with its arguments, flags and subcommands."""

    name: str
    pascal_name: str
    snake_name: str
    description: str
    args: list[ArgMeta] = field(default_factory=list)
    flags: list[FlagMeta] = field(default_factory=list)
    has_subcommands: bool = False
    subcommands: list[SubcommandMeta] = field(default_factory=list)


@dataclass
class CliInfo:
    """The application as a whole."""

    name: str
    version: Version
    description: str | None = None
    commands: list[CommandMeta] = field(default_factory=list)
    is_async: bool = False


@dataclass
class DispatchInfo:
    """What is needed to route a parent command to its handlers."""

    parent_name: str
    subcommands: list[SubcommandMeta]
    handler_path: str
    is_async: bool = False


class CliAdapter(ABC):
    """Generates code for one CLI framework."""

    @abstractmethod
    def name(self) -> str:
        """Return the adapter name."""

    @abstractmethod
    def dependencies(self) -> list[Dependency]:
        """Return the packages this framework needs."""

    @abstractmethod
    def generate_cli(self, info: CliInfo) -> list[CodeFragment]:
        """Generate the main CLI entry point definition."""

    @abstractmethod
    def generate_command(self, info: CommandMeta) -> list[CodeFragment]:
        """Generate a command definition."""

    @abstractmethod
    def generate_subcommands(self, info: CommandMeta) -> list[CodeFragment]:
        """Generate the subcommand routing of a parent command."""

    @abstractmethod
    def generate_dispatch(self, info: DispatchInfo) -> list[CodeFragment]:
        """Generate the dispatch to handlers."""

    @abstractmethod
    def imports(self) -> list[ImportSpec]:
        """Return the imports the CLI code needs."""

    @abstractmethod
    def command_imports(self, info: CommandMeta) -> list[ImportSpec]:
        """Return the imports a command's code needs."""

    @abstractmethod
    def map_arg_type(self, arg_type: ArgType) -> str:
        """Return the framework's type for an argument type."""

    @abstractmethod
    def map_optional_type(self, arg_type: ArgType) -> str:
        """Return the framework's type for an optional argument type."""


@dataclass
class RuntimeInfo:
    """How the generated application runs asynchronous code."""

    is_async: bool
    multi_threaded: bool


class RuntimeAdapter(ABC):
    """Generates setup code for one async runtime."""

    @abstractmethod
    def name(self) -> str:
        """Return the adapter name."""

    @abstractmethod
    def dependencies(self) -> list[Dependency]:
        """Return the packages this runtime needs."""

    @abstractmethod
    def main_attribute(self) -> str | None:
        """Return the attribute for the async main function, if any."""

    @abstractmethod
    def generate_init(self, info: RuntimeInfo) -> list[CodeFragment] | None:
        """Generate runtime initialisation code, if any."""

    @abstractmethod
    def imports(self) -> list[ImportSpec]:
        """Return the imports runtime code needs."""


class ErrorAdapter(ABC):
    """Describes one error handling library."""

    @abstractmethod
    def name(self) -> str:
        """Return the adapter name."""

    @abstractmethod
    def dependencies(self) -> list[Dependency]:
        """Return the packages this library needs."""

    @abstractmethod
    def result_type(self, inner: str) -> str:
        """Return the result type wrapping ``inner``."""

    def unit_result(self) -> str:
        """Return the result type of a function with no value."""
        return self.result_type("()")

    @abstractmethod
    def imports(self) -> list[ImportSpec]:
        """Return the imports error handling needs."""

    @abstractmethod
    def wrap_error(self, message: str) -> str | None:
        """Return the expression that adds ``message`` to an error, if any."""