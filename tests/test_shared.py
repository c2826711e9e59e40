import sys

from pyads.shared import printf, printf_err, println


def test_printf(capsys):
    printf("{0:d} {1:s}", 1, "a")
    println()
    println("{0:04d}", 7)
    assert capsys.readouterr().out == "1 a\n0007\n"


def test_printf_err_follows_current_stderr(capsys, monkeypatch):
    printf_err("[line {0:d}] Error: oops\n", 3)
    captured = capsys.readouterr()
    assert captured.err == "[line 3] Error: oops\n"
    assert captured.out == ""

    class Sink:
        text = ""

        def write(self, s: str):
            Sink.text += s

        def flush(self):
            pass

    monkeypatch.setattr(sys, "stderr", Sink())
    printf_err("to {0:s}", "sink")
    assert Sink.text == "to sink"
