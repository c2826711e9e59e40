import sys

import pytest

from pyads.main import main, run_file


@pytest.fixture
def script(tmp_path):
    def write(source: str) -> str:
        path = tmp_path / "script.ads"
        path.write_text(source)
        return str(path)

    return write


def test_run_file_ok(script, capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["pyads", script("set a 1\nget a\n")])
    main()
    assert capsys.readouterr().out == "1\n"


def test_run_file_parse_error(script):
    with pytest.raises(SystemExit) as e:
        run_file(script("set a 1\nnope\n"))
    assert e.value.code == 65


def test_run_file_execution_error(script):
    with pytest.raises(SystemExit) as e:
        run_file(script("set a 1\nassert a 2\n"))
    assert e.value.code == 70


def test_usage(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pyads", "a", "b"])
    with pytest.raises(SystemExit) as e:
        main()
    assert e.value.code == 64
    assert capsys.readouterr().err == "Usage: pyads [path]\n"


def test_repl(monkeypatch, capsys):
    lines = iter(["set a 1", "bogus", "get a", "size"])

    def fake_input() -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(sys, "argv", ["pyads"])
    monkeypatch.setattr("builtins.input", fake_input)
    main()

    captured = capsys.readouterr()
    assert captured.out == "1\n1\n"
    assert "Unknown statement 'bogus'." in captured.err
