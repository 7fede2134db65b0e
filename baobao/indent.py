"""Indentation styles for generated code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_SPACE_STRINGS = {2: "  ", 4: "    ", 8: "        "}
_FALLBACK = "    "


@dataclass(frozen=True)
class Indent:
    """One level of indentation: a number of spaces, or a tab when ``width`` is None."""

    width: int | None = 4

    RUST: ClassVar[Indent]
    TYPESCRIPT: ClassVar[Indent]
    GO: ClassVar[Indent]

    def __post_init__(self) -> None:
        if self.width is not None and (
            not isinstance(self.width, int) or isinstance(self.width, bool) or self.width < 0
        ):
            raise ValueError(f"invalid indent width: {self.width!r}")

    @classmethod
    def spaces(cls, width: int) -> Indent:
        """Indentation of ``width`` spaces."""
        return cls(width)

    @classmethod
    def tab(cls) -> Indent:
        """Tab indentation."""
        return cls(None)

    @property
    def is_tab(self) -> bool:
        return self.width is None

    def as_str(self) -> str:
        """Return the text for one indentation level.

        Widths other than 2, 4 and 8 fall back to four spaces.
        """
        if self.width is None:
            return "\t"
        return _SPACE_STRINGS.get(self.width, _FALLBACK)


Indent.RUST = Indent.spaces(4)
Indent.TYPESCRIPT = Indent.spaces(2)
Indent.GO = Indent.tab()