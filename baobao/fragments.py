"""Code fragments: an intermediate form between syntax nodes and text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Line:
    """A single line of code; a newline is appended when rendered."""

    text: str


@dataclass(frozen=True)
class Blank:
    """An empty line."""


@dataclass(frozen=True)
class Raw:
    """Text written as-is, without indentation or newline."""

    text: str


@dataclass(frozen=True)
class Block:
    """A header line, an indented body and an optional closing line."""

    header: str
    body: tuple[CodeFragment, ...] = field(default_factory=tuple)
    close: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


@dataclass(frozen=True)
class Indented:
    """Fragments rendered one indentation level deeper."""

    body: tuple[CodeFragment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


@dataclass(frozen=True)
class Sequence:
    """Fragments rendered one after another."""

    body: tuple[CodeFragment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


@dataclass(frozen=True)
class JsDoc:
    """A one-line JSDoc comment."""

    text: str


@dataclass(frozen=True)
class RustDoc:
    """A one-line Rust doc comment."""

    text: str


CodeFragment = Line | Blank | Raw | Block | Indented | Sequence | JsDoc | RustDoc


class Renderable(ABC):
    """Something that can be turned into code fragments."""

    @abstractmethod
    def to_fragments(self) -> Iterable[CodeFragment]:
        """Return the fragments for this node."""