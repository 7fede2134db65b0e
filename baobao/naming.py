"""Naming rules of a target language."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class NamingConvention:
    """How names are transformed and escaped for one language."""

    command_to_type: Callable[[str], str]
    """Command name to type name, e.g. ``hello-world`` to ``HelloWorld``."""
    command_to_file: Callable[[str], str]
    """Command name to file name, e.g. ``hello-world`` to ``hello_world``."""
    field_to_name: Callable[[str], str]
    """Field name to the language's field name."""
    reserved_words: frozenset[str]
    """Words the language reserves."""
    escape_reserved: Callable[[str], str]
    """Escape a reserved word, e.g. ``type`` to ``r#type``."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "reserved_words", frozenset(self.reserved_words))

    def is_reserved(self, name: str) -> bool:
        """Return whether ``name`` is a reserved word."""
        return name in self.reserved_words

    def safe_name(self, name: str) -> str:
        """Return ``name``, escaped if it is reserved."""
        return self.escape_reserved(name) if self.is_reserved(name) else name

    def type_name(self, name: str) -> str:
        """Transform ``name`` into a safe type name."""
        return self.safe_name(self.command_to_type(name))

    def file_name(self, name: str) -> str:
        """Transform ``name`` into a file name; file names are not escaped."""
        return self.command_to_file(name)

    def field_name(self, name: str) -> str:
        """Transform ``name`` into a safe field name."""
        return self.safe_name(self.field_to_name(name))