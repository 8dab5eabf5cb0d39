import io
import sys

import pytest

from fez.interpreter import Interpreter
from fez.repl import main, read_input, repl


@pytest.fixture(autouse=True)
def _keep_recursion_limit(monkeypatch):
    monkeypatch.setenv("FEZ_RECURSION_LIMIT", str(sys.getrecursionlimit()))


def test_read_input_joins_unbalanced_lines():
    chunks = list(read_input(io.StringIO("(+ 1\n 2)\n3\n")))
    assert chunks == ["(+ 1\n 2)\n", "3\n"]


def test_read_input_yields_trailing_partial_chunk():
    assert list(read_input(io.StringIO("(car"))) == ["(car"]


def test_repl_prints_results(capsys):
    out = io.StringIO()
    repl(Interpreter(), io.StringIO("(+ 1 2)\n(begin)\n'(a\n b)\n\"s\"\n"), out)
    assert out.getvalue() == '3\n(a b)\n"s"\n'


def test_repl_reports_errors_and_continues(capsys):
    out = io.StringIO()
    repl(Interpreter(), io.StringIO("(car 1)\nnope\n)\n5\n"), out)
    assert out.getvalue() == "5\n"
    err = capsys.readouterr().err
    assert "error: car: expected a pair, got 1" in err
    assert "error: Unbound variable nope" in err
    assert "error: Unmatched ')'" in err


def test_main_runs_file(tmp_path, capsys):
    source = tmp_path / "prog.scm"
    source.write_text("(set! foo (lambda (x) (* x x)))\n(foo 12)\n")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == "144\n"


def test_main_reports_failure(tmp_path, capsys):
    source = tmp_path / "bad.scm"
    source.write_text("(cons 1)")
    assert main([str(source)]) == 1
    assert "error: cons: expected 2, got 1" in capsys.readouterr().err


def test_read_input_keeps_reading_inside_string():
    assert list(read_input(io.StringIO('(car "abc\ndef")\n'))) == ['(car "abc\ndef")\n']


def test_repl_prints_circular_list():
    out = io.StringIO()
    repl(Interpreter(), io.StringIO("(set! foo (cons 1 '()))\n(set-cdr! foo foo)\n"), out)
    assert out.getvalue() == "(1)\n(1 . ...)\n"


def test_repl_string_spanning_lines():
    out = io.StringIO()
    repl(Interpreter(), io.StringIO('"abc\ndef"\n'), out)
    assert out.getvalue() == '"abc\ndef"\n'
