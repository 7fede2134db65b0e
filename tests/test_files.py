from pathlib import Path

from baobao.files import (
    File,
    FileRules,
    GeneratedFile,
    Overwrite,
    WriteResult,
    write_file,
)


def test_write_file_creates_file(tmp_path):
    path = tmp_path / "test.txt"
    write_file(path, "hello")
    assert path.exists()
    assert path.read_text() == "hello"


def test_write_file_creates_parent_dirs(tmp_path):
    path = tmp_path / "a" / "b" / "c" / "test.txt"
    write_file(path, "nested")
    assert path.exists()
    assert path.read_text() == "nested"


def test_write_file_overwrites_existing(tmp_path):
    path = tmp_path / "test.txt"
    write_file(path, "first")
    write_file(path, "second")
    assert path.read_text() == "second"


def test_file_write_always_overwrites(tmp_path):
    path = tmp_path / "test.txt"
    path.write_text("original")
    result = File(path, "updated").write()
    assert result is WriteResult.WRITTEN
    assert path.read_text() == "updated"


def test_file_write_if_missing_creates_new(tmp_path):
    path = tmp_path / "new.txt"
    file = File(path, "new content", FileRules(overwrite=Overwrite.IF_MISSING))
    assert file.write() is WriteResult.WRITTEN
    assert path.read_text() == "new content"


def test_file_write_if_missing_skips_existing(tmp_path):
    path = tmp_path / "existing.txt"
    path.write_text("original")
    file = File(path, "should not write", FileRules(overwrite=Overwrite.IF_MISSING))
    assert file.write() is WriteResult.SKIPPED
    assert path.read_text() == "original"


def test_file_exists(tmp_path):
    path = tmp_path / "test.txt"
    file = File(path, "content")
    assert not file.exists()
    path.write_text("content")
    assert file.exists()


def test_default_rules():
    rules = FileRules()
    assert rules.overwrite is Overwrite.ALWAYS
    assert rules.header is None


class _Stub(GeneratedFile):
    def __init__(self, overwrite):
        self._overwrite = overwrite

    def path(self, base: Path) -> Path:
        return base / "out" / "stub.txt"

    def rules(self) -> FileRules:
        return FileRules(overwrite=self._overwrite)

    def render(self) -> str:
        return "rendered"


def test_generated_file_writes_below_base(tmp_path):
    stub = _Stub(Overwrite.ALWAYS)
    assert GeneratedFile.write(stub, tmp_path) is WriteResult.WRITTEN
    assert (tmp_path / "out" / "stub.txt").read_text() == "rendered"


def test_generated_file_if_missing_skips(tmp_path):
    target = tmp_path / "out" / "stub.txt"
    target.parent.mkdir()
    target.write_text("kept")
    stub = _Stub(Overwrite.IF_MISSING)
    assert GeneratedFile.write(stub, tmp_path) is WriteResult.SKIPPED
    assert target.read_text() == "kept"


def test_generated_file_always_overwrites(tmp_path):
    target = tmp_path / "out" / "stub.txt"
    target.parent.mkdir()
    target.write_text("old")
    stub = _Stub(Overwrite.ALWAYS)
    assert GeneratedFile.write(stub, tmp_path) is WriteResult.WRITTEN
    assert target.read_text() == "rendered"