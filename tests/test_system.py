import os

import pytest

from diffslice import DiffIOError, DiffSliceError, parse, partition, unparse
from diffslice.predicates import hunk_contains
from diffslice.system import read_diff, write_diff


def test_read_write_preserve_crlf(tmp_path):
    text = "diff --git a/w b/w\r\n@@ -1 +1 @@\r\n-a\r\n+b\r\n"
    target = tmp_path / "nested" / "out.diff"
    written = write_diff(str(target), text)
    assert os.path.realpath(str(target)) == written
    with open(written, "rb") as f:
        assert f.read() == text.encode("utf-8")
    assert unparse(parse(read_diff(written))) == text


def test_non_utf8_bytes_round_trip(tmp_path):
    raw = (
        b"diff --git a/menu.txt b/menu.txt\n"
        b"--- a/menu.txt\n"
        b"+++ b/menu.txt\n"
        b"@@ -1 +1 @@\n"
        b"-caf\xe9 cr\xe8me\n"
        b"+caf\xc3\xa9 cr\xc3\xa8me\n"
    )
    src = tmp_path / "latin1.diff"
    src.write_bytes(raw)

    changes = parse(read_diff(str(src)))
    assert len(changes[0].hunks) == 1
    out = write_diff(str(tmp_path / "copy.diff"), unparse(changes))
    with open(out, "rb") as f:
        assert f.read() == raw


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(DiffIOError, match="Failed to read diff") as exc:
        read_diff(str(tmp_path / "nope.diff"))
    assert isinstance(exc.value, DiffSliceError)
    assert isinstance(exc.value.__cause__, OSError)


def test_read_undecodable_file_raises_diff_io_error(tmp_path):
    # A single ASCII byte is truncated UTF-16 that surrogateescape cannot absorb
    src = tmp_path / "odd.diff"
    src.write_bytes(b"A")
    with pytest.raises(DiffIOError) as exc:
        read_diff(str(src), encoding="utf-16")
    assert isinstance(exc.value.__cause__, UnicodeError)


def test_write_into_file_path_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(DiffIOError):
        write_diff(str(blocker / "out.diff"), "text")


def test_failed_write_leaves_no_partial_or_temp_file(tmp_path):
    target = tmp_path / "out.diff"
    target.write_text("previous\n", encoding="utf-8")

    with pytest.raises(DiffIOError) as exc:
        write_diff(str(target), "diff --git a/é b/é\n", encoding="ascii")
    assert isinstance(exc.value.__cause__, UnicodeEncodeError)

    assert sorted(os.listdir(tmp_path)) == ["out.diff"]
    assert target.read_text(encoding="utf-8") == "previous\n"


def test_split_file_into_two(tmp_path, zoo_text):
    src = write_diff(str(tmp_path / "zoo.diff"), zoo_text)
    matched, rest = partition(parse(read_diff(src)), hunk_predicate=hunk_contains("friendly"))
    keep = write_diff(str(tmp_path / "keep.diff"), unparse(rest))
    separate = write_diff(str(tmp_path / "separate.diff"), unparse(matched))
    assert len(parse(read_diff(keep))) == 4      # cat, dog (2nd hunk), rename, snake
    assert len(parse(read_diff(separate))) == 2  # dog (1st hunk), owl
