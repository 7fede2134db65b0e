"""Combines import collection with code building for a single source file."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from baobao.code_builder import CodeBuilder
from baobao.imports import ImportCollector
from baobao.indent import Indent


class FileBuilder:
    """Holds the imports and the body of a file being generated."""

    def __init__(self, indent: Indent = Indent.RUST) -> None:
        self.imports = ImportCollector()
        self.code = CodeBuilder(indent)

    @classmethod
    def rust(cls) -> FileBuilder:
        """A builder indenting with four spaces."""
        return cls(Indent.RUST)

    @classmethod
    def typescript(cls) -> FileBuilder:
        """A builder indenting with two spaces."""
        return cls(Indent.TYPESCRIPT)

    @classmethod
    def go(cls) -> FileBuilder:
        """A builder indenting with tabs."""
        return cls(Indent.GO)

    def add_import(self, module: str, symbol: str) -> FileBuilder:
        """Import ``symbol`` from ``module``."""
        self.imports.add(module, symbol)
        return self

    def add_module(self, module: str) -> FileBuilder:
        """Import ``module`` without specific symbols."""
        self.imports.add_module(module)
        return self

    def with_code(self, body: Callable[[CodeBuilder], Any]) -> FileBuilder:
        """Run ``body`` on the code builder; a returned builder replaces it."""
        result = body(self.code)
        if isinstance(result, CodeBuilder):
            self.code = result
        return self

    def has_imports(self) -> bool:
        """Return whether any import has been added."""
        return len(self.imports) > 0

    def into_parts(self) -> tuple[ImportCollector, CodeBuilder]:
        """Return the import collector and the code builder."""
        return self.imports, self.code