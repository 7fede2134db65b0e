"""Generated files and the rules for writing them to disk."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


class WriteResult(enum.Enum):
    """Outcome of writing a file."""

    WRITTEN = "written"
    SKIPPED = "skipped"


class Overwrite(enum.Enum):
    """How an existing file is handled."""

    ALWAYS = "always"
    """Always overwrite (generated code)."""
    IF_MISSING = "if_missing"
    """Only create the file if it does not exist yet (stubs)."""


@dataclass
class FileRules:
    """Rules that determine how a file is written."""

    overwrite: Overwrite = Overwrite.ALWAYS
    header: str | None = None


def write_file(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def _write_with_rules(path: Path, rules: FileRules, render) -> WriteResult:
    if rules.overwrite is Overwrite.IF_MISSING and path.exists():
        return WriteResult.SKIPPED
    write_file(path, render())
    return WriteResult.WRITTEN


class GeneratedFile(ABC):
    """A file whose location and content are computed from a base directory."""

    @abstractmethod
    def path(self, base: Path) -> Path:
        """Return the file path below ``base``."""

    @abstractmethod
    def rules(self) -> FileRules:
        """Return the rules for writing this file."""

    @abstractmethod
    def render(self) -> str:
        """Return the file content."""

    def write(self, base: str | Path) -> WriteResult:
        """Write the file below ``base`` according to its rules."""
        return _write_with_rules(self.path(Path(base)), self.rules(), self.render)


@dataclass
class File:
    """A file with a fixed path and content."""

    path: Path
    content: str
    rules: FileRules = field(default_factory=FileRules)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def exists(self) -> bool:
        """Return whether the file is already on disk."""
        return self.path.exists()

    def write(self) -> WriteResult:
        """Write the file according to its rules."""
        return _write_with_rules(self.path, self.rules, lambda: self.content)