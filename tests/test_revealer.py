import io
import os

import pytest

from reveal.errors import RevealFailure
from reveal.revealer import PathRevealer


def test_directory_lists_absolute_sorted_entries(tmp_path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a").mkdir()
    stdout = io.StringIO()

    PathRevealer(stdout).reveal(tmp_path)

    assert stdout.getvalue().splitlines() == [
        str(tmp_path / "a"),
        str(tmp_path / "b.txt"),
    ]


def test_empty_directory_prints_nothing(tmp_path):
    stdout = io.StringIO()

    PathRevealer(stdout).reveal(tmp_path)

    assert stdout.getvalue() == ""


def test_file_contents_are_copied(tmp_path, capsys):
    target = tmp_path / "notes.txt"
    target.write_text("line 1\nline 2\n")

    PathRevealer().reveal(target)

    assert capsys.readouterr().out == "line 1\nline 2\n"


def test_file_to_text_stream(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("hello")
    stdout = io.StringIO()

    PathRevealer(stdout).reveal(target)

    assert stdout.getvalue() == "hello"


@pytest.mark.skipif(os.name != "posix", reason="needs a fifo")
def test_fifo_is_unsupported(tmp_path):
    fifo = tmp_path / "fifo"
    os.mkfifo(str(fifo))

    with pytest.raises(RevealFailure) as excinfo:
        PathRevealer(io.StringIO()).reveal(fifo)

    assert excinfo.value.message == "Unsupported entry type."


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0,
                    reason="root ignores permissions")
def test_unreadable_directory_fails(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(RevealFailure) as excinfo:
            PathRevealer(io.StringIO()).reveal(locked)
    finally:
        locked.chmod(0o755)

    assert excinfo.value.message == "Could not reveal directory."


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0,
                    reason="root ignores permissions")
def test_unreadable_file_fails(tmp_path):
    locked = tmp_path / "locked.txt"
    locked.write_text("secret")
    locked.chmod(0)
    try:
        with pytest.raises(RevealFailure) as excinfo:
            PathRevealer(io.StringIO()).reveal(locked)
    finally:
        locked.chmod(0o644)

    assert excinfo.value.message == "Could not reveal file."


class ClosedPipeBuffer(io.BytesIO):
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")


class ClosedPipeStdout(io.StringIO):
    buffer = ClosedPipeBuffer()


def test_closed_pipe_is_not_reported_as_read_failure(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("hello")

    with pytest.raises(BrokenPipeError):
        PathRevealer(ClosedPipeStdout()).reveal(target)


def test_closed_pipe_while_listing_propagates(tmp_path):
    (tmp_path / "entry").write_text("")

    class ClosedPipeText(io.StringIO):
        def write(self, data):
            raise BrokenPipeError(32, "Broken pipe")

    with pytest.raises(BrokenPipeError):
        PathRevealer(ClosedPipeText()).reveal(tmp_path)
