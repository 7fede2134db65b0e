"""Interfaces for language-specific code generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from baobao.argtypes import ArgType, ContextFieldType


@dataclass
class GenerateResult:
    """What a generation run did."""

    created_handlers: list[str] = field(default_factory=list)
    """Handler stubs created for new commands."""
    orphan_handlers: list[str] = field(default_factory=list)
    """Handler files that exist but are no longer used."""


@dataclass
class CleanResult:
    """What cleaning orphaned files did."""

    deleted_commands: list[str] = field(default_factory=list)
    deleted_handlers: list[str] = field(default_factory=list)
    """Unmodified handler stubs that were deleted."""
    skipped_handlers: list[str] = field(default_factory=list)
    """Handler files kept because the user changed them."""


@dataclass
class PreviewFile:
    """A generated file shown without writing it."""

    path: str
    """Path relative to the output directory."""
    content: str


class LanguageCodegen(ABC):
    """Generates a CLI project in one language."""

    @abstractmethod
    def language(self) -> str:
        """Return the language identifier, e.g. ``rust``."""

    @abstractmethod
    def file_extension(self) -> str:
        """Return the source file extension without dot, e.g. ``rs``."""

    @abstractmethod
    def preview(self) -> list[PreviewFile]:
        """Return the generated files without writing them."""

    @abstractmethod
    def generate(self, output_dir: Path) -> GenerateResult:
        """Write all files into ``output_dir``."""


class TypeMapper(ABC):
    """Maps schema types to a language's type names."""

    @abstractmethod
    def language(self) -> str:
        """Return the target language name."""

    @abstractmethod
    def map_arg_type(self, arg_type: ArgType) -> str:
        """Return the language type for an argument type."""

    def map_optional_arg_type(self, arg_type: ArgType) -> str:
        """Return the language type for an optional argument."""
        return f"Option<{self.map_arg_type(arg_type)}>"

    @abstractmethod
    def map_context_type(self, field_type: ContextFieldType) -> str:
        """Return the language type for a context field."""