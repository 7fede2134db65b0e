"""Builds indented source text line by line."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from baobao.fragments import (
    Blank,
    Block,
    CodeFragment,
    Indented,
    JsDoc,
    Line,
    Raw,
    Renderable,
    RustDoc,
    Sequence,
)
from baobao.indent import Indent

T = TypeVar("T")


class CodeBuilder:
    """Accumulates code with indentation; every mutating method returns the builder."""

    def __init__(self, indent: Indent = Indent.RUST) -> None:
        self._indent = indent
        self._level = 0
        self._parts: list[str] = []

    @classmethod
    def rust(cls) -> CodeBuilder:
        """A builder indenting with four spaces."""
        return cls(Indent.RUST)

    @classmethod
    def typescript(cls) -> CodeBuilder:
        """A builder indenting with two spaces."""
        return cls(Indent.TYPESCRIPT)

    @classmethod
    def go(cls) -> CodeBuilder:
        """A builder indenting with tabs."""
        return cls(Indent.GO)

    def _write_indent(self) -> None:
        self._parts.append(self._indent.as_str() * self._level)

    def line(self, text: str) -> CodeBuilder:
        """Add a line at the current indentation."""
        self._write_indent()
        self._parts.append(text)
        self._parts.append("\n")
        return self

    def blank(self) -> CodeBuilder:
        """Add an empty line, without indentation."""
        self._parts.append("\n")
        return self

    def raw(self, text: str) -> CodeBuilder:
        """Add text without indentation or newline."""
        self._parts.append(text)
        return self

    def indent(self) -> CodeBuilder:
        """Increase the indentation level."""
        self._level += 1
        return self

    def dedent(self) -> CodeBuilder:
        """Decrease the indentation level, never below zero."""
        self._level = max(0, self._level - 1)
        return self

    def doc(self, prefix: str, text: str) -> CodeBuilder:
        """Add a comment line made of ``prefix``, a space and ``text``."""
        return self.line(f"{prefix} {text}")

    def rust_doc(self, text: str) -> CodeBuilder:
        """Add a ``///`` doc comment."""
        return self.doc("///", text)

    def jsdoc(self, text: str) -> CodeBuilder:
        """Add a one-line ``/** ... */`` comment."""
        return self.line(f"/** {text} */")

    def emit(self, node: Renderable) -> CodeBuilder:
        """Render every fragment of ``node``."""
        for fragment in node.to_fragments():
            self.apply_fragment(fragment)
        return self

    def apply_fragment(self, fragment: CodeFragment) -> CodeBuilder:
        """Render a single fragment."""
        match fragment:
            case Line(text=text):
                self.line(text)
            case Blank():
                self.blank()
            case Raw(text=text):
                self.raw(text)
            case Block(header=header, body=body, close=close):
                self.line(header).indent()
                for child in body:
                    self.apply_fragment(child)
                self.dedent()
                if close is not None:
                    self.line(close)
            case Indented(body=body):
                self.indent()
                for child in body:
                    self.apply_fragment(child)
                self.dedent()
            case Sequence(body=body):
                for child in body:
                    self.apply_fragment(child)
            case JsDoc(text=text):
                self.jsdoc(text)
            case RustDoc(text=text):
                self.rust_doc(text)
            case _:
                raise TypeError(f"not a code fragment: {fragment!r}")
        return self

    def block(self, header: str, body: Callable[[CodeBuilder], Any]) -> CodeBuilder:
        """Add ``header`` and run ``body`` one level deeper."""
        self.line(header).indent()
        body(self)
        return self.dedent()

    def block_with_close(
        self, header: str, close: str, body: Callable[[CodeBuilder], Any]
    ) -> CodeBuilder:
        """Like :meth:`block`, then add the closing line."""
        return self.block(header, body).line(close)

    def when(self, condition: bool, body: Callable[[CodeBuilder], Any]) -> CodeBuilder:
        """Run ``body`` only if ``condition`` holds."""
        if condition:
            body(self)
        return self

    def each(self, items: Iterable[T], body: Callable[[CodeBuilder, T], Any]) -> CodeBuilder:
        """Run ``body`` once for each item."""
        for item in items:
            body(self, item)
        return self

    def current_indent(self) -> int:
        """Return the current indentation level."""
        return self._level

    def build(self) -> str:
        """Return the generated code."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.build()