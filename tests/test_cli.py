import io

from eden.__main__ import main, repl
from eden.interpreter import Interpreter


def test_eval_option_prints_value(capsys):
    assert main(["--no-prelude", "-e", "(+ 1 2)", "-e", "'(a . b)"]) == 0
    assert capsys.readouterr().out == "3\n(a . b)\n"


def test_eval_option_error_exit_code(capsys):
    assert main(["--no-prelude", "-e", "(car 1)"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_files_loaded_in_order(tmp_path, capsys):
    first = tmp_path / "a.lisp"
    first.write_text("(define x 20)", encoding="utf-8")
    second = tmp_path / "b.lisp"
    second.write_text("(define y (+ x 1))", encoding="utf-8")
    assert main([str(first), str(second), "-e", "y"]) == 0
    assert capsys.readouterr().out == "21\n"


def test_repl_session():
    stdin = io.StringIO("(define x 2)\n(+ x\n 3)\n(car 1)\nx\n\n")
    stdout = io.StringIO()
    repl(Interpreter(prelude=None), stdin, stdout)
    lines = [line.replace("eden> ", "").replace("...   ", "") for line in stdout.getvalue().splitlines()]
    outputs = [line for line in lines if line]
    assert outputs[0] == "2"
    assert outputs[1] == "5"
    assert outputs[2].startswith("Error: car: expected a list")
    assert outputs[3] == "2"


def test_repl_reports_syntax_error_and_continues():
    stdin = io.StringIO(")\n(+ 1 1)\n")
    stdout = io.StringIO()
    repl(Interpreter(prelude=None), stdin, stdout)
    out = stdout.getvalue()
    assert "Error: Unexpected ')'" in out
    assert "2\n" in out


def test_repl_incomplete_at_end_of_input():
    stdout = io.StringIO()
    repl(Interpreter(prelude=None), io.StringIO("(+ 1"), stdout)
    assert "Error: unexpected end of input" in stdout.getvalue()
