import pytest

from eden.errors import EdenTypeError, EdenUnboundSymbol
from eden.interpreter import Interpreter


@pytest.fixture(scope="module")
def interp():
    return Interpreter()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", [1, 2, 3]),
        ("(list)", []),
        ("(not #f)", True),
        ("(null? '())", True),
        ("(null? '(1))", False),
        ("(null? 5)", False),
        ("(abs -4)", 4),
        ("(max 3 9)", 9),
        ("(min 3 9)", 3),
        ("(length '(1 2 3))", 3),
        ("(append '(1 2) '(3))", [1, 2, 3]),
        ("(reverse (list 1 2 3))", [3, 2, 1]),
        ("(map (lambda (x) (* x x)) '(1 2 3))", [1, 4, 9]),
        ("(filter (lambda (x) (> x 1)) '(1 2 3))", [2, 3]),
        ("(fold + 0 '(1 2 3 4))", 10),
        ("(apply list '(1 2))", [1, 2]),
    ]
)
def test_prelude_functions(interp, source, expected):
    assert interp.eval(source) == expected


def test_no_prelude():
    bare = Interpreter(prelude=None)
    with pytest.raises(EdenUnboundSymbol):
        bare.eval("(list 1)")


def test_string_prelude():
    custom = Interpreter(prelude="(define answer 42)")
    assert custom.eval("answer") == 42
    with pytest.raises(EdenUnboundSymbol):
        custom.eval("length")


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "core.lisp").write_text("(define custom 1)", encoding="utf-8")
    monkeypatch.setenv("EDEN_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("custom") == 1


def test_missing_prelude_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("EDEN_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("(+ 1 2)") == 3


def test_eval_results():
    it = Interpreter(prelude=None)
    assert it.eval("") == []
    assert it.eval("(define x 1) (+ x 1)") == 2
    assert it.eval_all("1 2 3") == [1, 2, 3]


def test_failure_keeps_environment():
    it = Interpreter(prelude=None)
    it.eval("(define x 1)")
    with pytest.raises(EdenTypeError):
        it.eval("(car x)")
    assert it.eval("x") == 1


def test_interpreters_are_isolated():
    first = Interpreter(prelude=None)
    second = Interpreter(prelude=None)
    first.eval("(define shared 1)")
    with pytest.raises(EdenUnboundSymbol):
        second.eval("shared")


def test_interpreter_load(tmp_path):
    src = tmp_path / "prog.lisp"
    src.write_text("(define (twice f x) (f (f x)))\n(twice (lambda (n) (* n 3)) 2)", encoding="utf-8")
    it = Interpreter(prelude=None)
    assert it.load(str(src)) == 18
