from __future__ import annotations

from planfs.core.errors import ErrorKind
from planfs.tools.fs.delete import handle_delete
from planfs.tools.fs.replace import handle_replace
from planfs.tools.fs.write import handle_write
from planfs.tools.requests import DeleteRequest, ReplaceRequest, WriteRequest


def test_write_creates_parents(context, resolver, root) -> None:
    result = handle_write(WriteRequest("a/b/c.md", "# title\n"), context, resolver)
    assert result.ok
    assert result.text == "File written successfully (created): a/b/c.md"
    assert (root / "a" / "b" / "c.md").read_text(encoding="utf-8") == "# title\n"


def test_write_overwrites(context, resolver, root) -> None:
    (root / "note.txt").write_text("old", encoding="utf-8")
    result = handle_write(WriteRequest("note.txt", "new"), context, resolver)
    assert result.text == "File written successfully (overwritten): note.txt"
    assert (root / "note.txt").read_text(encoding="utf-8") == "new"


def test_write_accepts_empty_contents(context, resolver, root) -> None:
    result = handle_write(WriteRequest("empty.txt", ""), context, resolver)
    assert result.ok
    assert (root / "empty.txt").read_bytes() == b""


def test_write_requires_contents(context, resolver, root) -> None:
    result = handle_write(WriteRequest("note.txt", None), context, resolver)
    assert result.error is ErrorKind.MISSING_PARAMETER
    assert result.text == "Error: contents parameter is required"
    assert not (root / "note.txt").exists()


def test_write_preserves_crlf(context, resolver, root) -> None:
    handle_write(WriteRequest("win.txt", "a\r\nb\r\n"), context, resolver)
    assert (root / "win.txt").read_bytes() == b"a\r\nb\r\n"


def test_write_cannot_escape(context, resolver, root, tmp_path) -> None:
    result = handle_write(WriteRequest("../../pwned.txt", "x"), context, resolver)
    assert result.error is ErrorKind.ACCESS_DENIED
    assert not (tmp_path / "pwned.txt").exists()


def test_write_through_symlinked_dir_is_denied(context, resolver, root, tmp_path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    (root / "out").symlink_to(outside, target_is_directory=True)
    result = handle_write(WriteRequest("out/new.txt", "x"), context, resolver)
    assert result.error is ErrorKind.ACCESS_DENIED
    assert not (outside / "new.txt").exists()


def test_replace_unique_occurrence(context, resolver, root) -> None:
    (root / "code.py").write_text("x = 1\ny = 2\n", encoding="utf-8")
    result = handle_replace(
        ReplaceRequest("code.py", "y = 2", "y = 3"), context, resolver
    )
    assert result.ok
    assert result.text == "Replacement successful in file: code.py"
    assert (root / "code.py").read_text(encoding="utf-8") == "x = 1\ny = 3\n"


def test_replace_ambiguous(context, resolver, root) -> None:
    (root / "code.py").write_text("x = 1\nx = 1\n", encoding="utf-8")
    result = handle_replace(
        ReplaceRequest("code.py", "x = 1", "x = 2"), context, resolver
    )
    assert result.error is ErrorKind.AMBIGUOUS
    assert "found 2 occurrences" in result.text
    assert (root / "code.py").read_text(encoding="utf-8") == "x = 1\nx = 1\n"


def test_replace_counts_without_overlap(context, resolver, root) -> None:
    (root / "a.txt").write_text("aaa", encoding="utf-8")
    result = handle_replace(ReplaceRequest("a.txt", "aa", "b"), context, resolver)
    assert result.ok
    assert (root / "a.txt").read_text(encoding="utf-8") == "ba"


def test_replace_missing_old_string(context, resolver, root) -> None:
    (root / "a.txt").write_text("hello", encoding="utf-8")
    result = handle_replace(ReplaceRequest("a.txt", "bye", "hi"), context, resolver)
    assert result.error is ErrorKind.INVALID_PARAMETER
    assert result.text == "Error: old_string was not found in file: a.txt"


def test_replace_creates_missing_file(context, resolver, root) -> None:
    result = handle_replace(
        ReplaceRequest("new/a.txt", "anything", "else"), context, resolver
    )
    assert result.error is not ErrorKind.NOT_FOUND
    assert (root / "new" / "a.txt").read_text(encoding="utf-8") == ""


def test_replace_rejects_identical_strings(context, resolver, root) -> None:
    result = handle_replace(ReplaceRequest("a.txt", "same", "same"), context, resolver)
    assert result.error is ErrorKind.INVALID_PARAMETER
    assert "must be different" in result.text
    assert not (root / "a.txt").exists()


def test_replace_requires_both_strings(context, resolver, root) -> None:
    result = handle_replace(ReplaceRequest("a.txt", None, "x"), context, resolver)
    assert result.error is ErrorKind.MISSING_PARAMETER


def test_replace_keeps_replacement_literal(context, resolver, root) -> None:
    (root / "a.txt").write_text("path = X\n", encoding="utf-8")
    handle_replace(ReplaceRequest("a.txt", "X", r"C:\new\$1"), context, resolver)
    assert (root / "a.txt").read_text(encoding="utf-8") == "path = C:\\new\\$1\n"


def test_delete_file(context, resolver, root) -> None:
    (root / "gone.txt").write_text("bye", encoding="utf-8")
    result = handle_delete(DeleteRequest("gone.txt"), context, resolver)
    assert result.text == "File deleted successfully: gone.txt"
    assert not (root / "gone.txt").exists()


def test_delete_missing_file(context, resolver, root) -> None:
    result = handle_delete(DeleteRequest("gone.txt"), context, resolver)
    assert result.error is ErrorKind.NOT_FOUND
    assert result.text == "Error: File does not exist: gone.txt"


def test_delete_directory_is_refused(context, resolver, root) -> None:
    (root / "docs").mkdir()
    (root / "docs" / "keep.md").write_text("keep", encoding="utf-8")
    result = handle_delete(DeleteRequest("docs/"), context, resolver)
    assert result.error is ErrorKind.IO_FAILURE
    assert (root / "docs" / "keep.md").exists()


def test_delete_symlink_removes_link_only(context, resolver, root) -> None:
    (root / "real.txt").write_text("keep", encoding="utf-8")
    (root / "alias.txt").symlink_to(root / "real.txt")

    result = handle_delete(DeleteRequest("alias.txt"), context, resolver)

    assert result.text == "File deleted successfully: alias.txt"
    assert not (root / "alias.txt").is_symlink()
    assert (root / "real.txt").read_text(encoding="utf-8") == "keep"
