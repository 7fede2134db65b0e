"""Handler file paths and detection of handler files no longer in the schema."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

HANDLER_STUB_MARKER = 'todo!("implement'


@dataclass(frozen=True)
class OrphanHandler:
    """A handler file that no command in the schema uses any more."""

    relative_path: str
    full_path: Path
    is_unmodified: bool


def _entries(directory: Path) -> list[Path]:
    return sorted(directory.iterdir())


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name


def _is_handler_unmodified(path: Path) -> bool:
    try:
        return HANDLER_STUB_MARKER in path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


class HandlerPaths:
    """Computes handler file locations below a base directory."""

    def __init__(self, base_dir: str | Path, extension: str) -> None:
        self.base_dir = Path(base_dir)
        self.extension = extension

    @property
    def _mod_file(self) -> str:
        return f"mod.{self.extension}"

    def _has_extension(self, path: Path) -> bool:
        return path.suffix == f".{self.extension}"

    def handler_path(self, command_path: Sequence[str]) -> Path:
        """Return the handler file for a command, e.g. ``base/db/migrate.rs``."""
        if not command_path:
            return self.base_dir
        *parents, last = command_path
        return self.base_dir.joinpath(*parents, f"{last}.{self.extension}")

    def mod_path(self, command_path: Sequence[str]) -> Path:
        """Return the module file for a parent command, e.g. ``base/db/mod.rs``."""
        return self.base_dir.joinpath(*command_path, self._mod_file)

    def exists(self, command_path: Sequence[str]) -> bool:
        """Return whether the handler file for a command exists."""
        return self.handler_path(command_path).exists()

    def find_orphans(self, expected_paths: Collection[str]) -> list[str]:
        """Return paths, relative to the base directory, that are not expected.

        An unexpected directory is reported once, without its contents.
        """
        return list(self._scan(self.base_dir, "", expected_paths))

    def _scan(self, directory: Path, prefix: str, expected: Collection[str]) -> Iterator[str]:
        if not directory.exists():
            return
        for path in _entries(directory):
            if path.name == self._mod_file:
                continue
            if path.is_dir():
                relative = _join(prefix, path.name)
                if relative not in expected:
                    yield relative
                else:
                    yield from self._scan(path, relative, expected)
            elif self._has_extension(path):
                relative = _join(prefix, path.stem)
                if relative not in expected:
                    yield relative

    def find_orphans_with_status(self, expected_paths: Collection[str]) -> list[OrphanHandler]:
        """Return unexpected handler files with whether each is still an untouched stub.

        Every handler file inside an unexpected directory is reported.
        """
        return list(self._scan_with_status(self.base_dir, "", expected_paths))

    def _scan_with_status(
        self, directory: Path, prefix: str, expected: Collection[str]
    ) -> Iterator[OrphanHandler]:
        if not directory.exists():
            return
        for path in _entries(directory):
            if path.name == self._mod_file:
                continue
            if path.is_dir():
                relative = _join(prefix, path.name)
                if relative not in expected:
                    yield from self._collect_all(path, relative)
                else:
                    yield from self._scan_with_status(path, relative, expected)
            elif self._has_extension(path):
                relative = _join(prefix, path.stem)
                if relative not in expected:
                    yield OrphanHandler(relative, path, _is_handler_unmodified(path))

    def _collect_all(self, directory: Path, prefix: str) -> Iterator[OrphanHandler]:
        if not directory.exists():
            return
        for path in _entries(directory):
            if path.is_dir():
                yield from self._collect_all(path, f"{prefix}/{path.name}")
            elif self._has_extension(path):
                yield OrphanHandler(
                    f"{prefix}/{path.stem}", path, _is_handler_unmodified(path)
                )


def find_orphan_commands(
    commands_dir: str | Path, extension: str, expected_commands: Collection[str]
) -> list[Path]:
    """Return source files in ``commands_dir`` whose stem is not an expected command."""
    directory = Path(commands_dir)
    if not directory.exists():
        return []
    orphans = []
    for path in _entries(directory):
        if path.is_dir() or path.name == f"mod.{extension}":
            continue
        if path.suffix != f".{extension}":
            continue
        if path.stem not in expected_commands:
            orphans.append(path)
    return orphans