"""The bao.toml configuration file of a new project."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from baobao.files import FileRules, GeneratedFile, Overwrite
from baobao.version import Version

_SUPPORTED_CONTEXT_TYPES = ("sqlite", "postgres", "mysql", "http")

_EXAMPLE_DATABASE: dict[str, Any] = {
    "type": "sqlite",
    "env": "DATABASE_URL",
    "create_if_missing": True,
    "journal_mode": "wal",
    "synchronous": "normal",
    "busy_timeout": 5000,
    "foreign_keys": True,
    "max_connections": 5,
}

_EXAMPLE_HTTP: dict[str, Any] = {"type": "http"}

_HELLO_COMMAND: dict[str, Any] = {"description": "Say hello"}

_HELLO_ARG: dict[str, Any] = {
    "name": "name",
    "type": "string",
    "required": False,
    "description": "Name to greet",
}

_HELLO_FLAG: dict[str, Any] = {
    "name": "uppercase",
    "type": "bool",
    "short": "u",
    "description": "Print in uppercase",
}


def _assignment(key: str, value: Any) -> str:
    if isinstance(value, bool):
        literal = "true" if value else "false"
    elif isinstance(value, int):
        literal = str(value)
    else:
        literal = f'"{value}"'
    return f"{key} = {literal}"


def _section(header: str, entries: dict[str, Any], prefix: str = "") -> list[str]:
    return [f"{prefix}{header}"] + [
        f"{prefix}{_assignment(key, value)}" for key, value in entries.items()
    ]


class BaoToml(GeneratedFile):
    """The bao.toml of a project; by default written only if missing."""

    def __init__(self, name: str, language: Any) -> None:
        self.name = str(name)
        self.version = Version(0, 1, 0)
        self.description = "A CLI application"
        self.language = language
        self.overwrite = Overwrite.IF_MISSING

    def with_version(self, version: Version) -> BaoToml:
        """Set the version and return the file."""
        self.version = version
        return self

    def with_description(self, description: str) -> BaoToml:
        """Set the description and return the file."""
        self.description = description
        return self

    def with_overwrite(self, overwrite: Overwrite) -> BaoToml:
        """Set the overwrite rule and return the file."""
        self.overwrite = overwrite
        return self

    def path(self, base: str | Path) -> Path:
        return Path(base) / "bao.toml"

    def rules(self) -> FileRules:
        return FileRules(overwrite=self.overwrite)

    def render(self) -> str:
        cli = {
            "name": self.name,
            "version": str(self.version),
            "description": str(self.description),
            "language": str(self.language),
        }
        lines = [
            *_section("[cli]", cli),
            "",
            "# Uncomment to add shared resources accessible in all handlers:",
            *_section("[context.database]", _EXAMPLE_DATABASE, "# "),
            "#",
            *_section("[context.http]", _EXAMPLE_HTTP, "# "),
            "#",
            "# Supported types: " + ", ".join(_SUPPORTED_CONTEXT_TYPES),
            "",
            *_section("[commands.hello]", _HELLO_COMMAND),
            "",
            *_section("[[commands.hello.args]]", _HELLO_ARG),
            "",
            *_section("[[commands.hello.flags]]", _HELLO_FLAG),
        ]
        return "\n".join(lines) + "\n"