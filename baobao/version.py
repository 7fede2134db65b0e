"""Three-part semantic version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF
_NUMBER = re.compile(r"\+?[0-9]+")


def _parse_component(text: str, label: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid {label}")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(f"invalid {label}")
    return value


@dataclass(frozen=True)
class Version:
    """A version of the form ``major.minor.patch``."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for label in ("major", "minor", "patch"):
            value = getattr(self, label)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _U32_MAX:
                raise ValueError(f"invalid {label}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``X.Y.Z``; raise ValueError for anything else."""
        parts = text.split(".")
        if len(parts) != 3:
            raise ValueError(f"invalid version '{text}', expected 'X.Y.Z'")
        return cls(
            _parse_component(parts[0], "major"),
            _parse_component(parts[1], "minor"),
            _parse_component(parts[2], "patch"),
        )

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"