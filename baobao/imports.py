"""Collecting imports and package dependencies for generated code."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


class ImportCollector:
    """Deduplicates imports, keeping modules in insertion order.

    Symbols within a module are yielded in sorted order for deterministic output.
    """

    def __init__(self) -> None:
        self._imports: dict[str, set[str]] = {}

    def add(self, module: str, symbol: str) -> None:
        """Record ``symbol`` under ``module``."""
        self._imports.setdefault(module, set()).add(symbol)

    def add_module(self, module: str) -> None:
        """Record ``module`` itself, without specific symbols."""
        self._imports.setdefault(module, set())

    def merge(self, other: ImportCollector) -> None:
        """Add every entry of ``other`` to this collector."""
        for module, symbols in other._imports.items():
            self._imports.setdefault(module, set()).update(symbols)

    def has_module(self, module: str) -> bool:
        """True if ``module`` has been recorded."""
        return module in self._imports

    def has_symbol(self, module: str, symbol: str) -> bool:
        """True if ``symbol`` is recorded under ``module``."""
        return symbol in self._imports.get(module, ())

    def __iter__(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Yield ``(module, sorted symbols)`` in insertion order of the modules."""
        for module, symbols in self._imports.items():
            yield module, tuple(sorted(symbols))

    def __len__(self) -> int:
        return len(self._imports)

    def __repr__(self) -> str:
        return f"ImportCollector({dict(self)!r})"


@dataclass
class DependencySpec:
    """A package dependency: version requirement, features and optionality."""

    version: str
    features: list[str] = field(default_factory=list)
    optional: bool = False

    def with_features(self, features: Iterable[str]) -> DependencySpec:
        """Set the features to enable and return the spec."""
        self.features = [str(feature) for feature in features]
        return self

    def as_optional(self) -> DependencySpec:
        """Mark the dependency optional and return the spec."""
        self.optional = True
        return self


class DependencyCollector:
    """Tracks package dependencies by name; the first spec added wins."""

    def __init__(self) -> None:
        self._deps: dict[str, DependencySpec] = {}

    def add(self, name: str, spec: DependencySpec) -> None:
        """Add a dependency unless one of that name is already present."""
        self._deps.setdefault(name, spec)

    def add_simple(self, name: str, version: str) -> None:
        """Add a dependency with only a version."""
        self.add(name, DependencySpec(version))

    def has(self, name: str) -> bool:
        """Return whether the dependency is present."""
        return name in self._deps

    def get(self, name: str) -> DependencySpec | None:
        """Return the spec for ``name``, or None."""
        return self._deps.get(name)

    def __iter__(self) -> Iterator[tuple[str, DependencySpec]]:
        return iter(self._deps.items())

    def sorted(self) -> list[tuple[str, DependencySpec]]:
        """Return the dependencies sorted by name."""
        return sorted(self._deps.items(), key=lambda item: item[0])

    def __len__(self) -> int:
        return len(self._deps)