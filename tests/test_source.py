import sys

from reveal.args import ArgumentSource


def test_capture_keeps_order_and_program_name():
    arguments = ArgumentSource.capture(["reveal", "-h", "/tmp", "b"])

    assert arguments == ("reveal", "-h", "/tmp", "b")
    assert isinstance(arguments, tuple)


def test_capture_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["reveal", "somewhere"])

    assert ArgumentSource.capture() == ("reveal", "somewhere")


def test_capture_is_detached_from_source_list():
    argv = ["reveal", "a"]
    arguments = ArgumentSource.capture(argv)
    argv.append("b")

    assert arguments == ("reveal", "a")
