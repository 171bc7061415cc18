import io
import logging

import pytest

import lispy.repl
from lispy import config
from lispy.__main__ import main
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.repl import REPL, repl
from lispy.types.value import ErrorKind, Number, QExpr


@pytest.fixture(autouse=True)
def _no_prelude_from_environment(monkeypatch):
    monkeypatch.delenv("LISPY_PRELUDE_PATH", raising=False)


def test_eval_keeps_definitions():
    interp = Interpreter(prelude=None)
    interp.eval("def {x} 100")
    assert interp.eval("+ x 1") == Number(101)


def test_prelude_source():
    interp = Interpreter(prelude="def {ten} 10\n\ndef {twenty} 20\n")
    assert interp.eval("+ ten twenty") == Number(30)


def test_prelude_errors_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="lispy.interpreter"):
        interp = Interpreter(prelude="def {a} 1\nhead {}")
    assert interp.eval("a") == Number(1)
    assert "<prelude>:2: Error: Function 'head' passed {}!" in caplog.text


def test_prelude_syntax_errors_are_logged(caplog):
    source = "def {a} 1\n(def {b}\n 2)\ndef {c} 3\n" + "(" * 20000 + "\n"
    with caplog.at_level(logging.WARNING, logger="lispy.interpreter"):
        interp = Interpreter(prelude=source)
    assert interp.eval("+ a c") == Number(4)
    assert interp.eval("b").kind is ErrorKind.UNBOUND_SYMBOL
    assert "<prelude>:2: Expected ')' before end of input" in caplog.text
    assert "<prelude>:3: Unexpected ')'" in caplog.text
    assert "<prelude>:5: expression nested too deeply" in caplog.text


def test_prelude_file_with_syntax_error_does_not_stop_startup(tmp_path, capsys):
    prelude = tmp_path / "broken.lspy"
    prelude.write_text("def {k} 7\n(+ 1\n")
    assert main(["--prelude", str(prelude), "-e", "k"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_auto_prelude_from_environment(tmp_path, monkeypatch):
    prelude = tmp_path / "prelude.lspy"
    prelude.write_text("def {nil} {}\ndef {one two} 1 2\n")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(prelude))
    interp = Interpreter()
    assert interp.eval("nil") == QExpr()
    assert interp.eval("+ one two") == Number(3)


def test_missing_prelude_file_is_not_fatal(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path / "missing.lspy"))
    with caplog.at_level(logging.WARNING, logger="lispy.interpreter"):
        interp = Interpreter()
    assert interp.eval("+ 1 1") == Number(2)
    assert "not found" in caplog.text


def test_syntax_errors_propagate():
    interp = Interpreter(prelude=None)
    with pytest.raises(LispySyntaxError):
        interp.eval("(+ 1")


def test_call_copies_arguments():
    interp = Interpreter(prelude=None)
    q = QExpr([Number(1), Number(2)])
    assert interp.call("tail", q) == QExpr([Number(2)])
    assert q == QExpr([Number(1), Number(2)])
    assert interp.call("missing").kind is ErrorKind.UNKNOWN_FUNCTION


# -----------------------------------------------------
# REPL
# -----------------------------------------------------


def test_handle_prints_results_and_errors(tmp_path):
    ctrl = REPL(Interpreter(prelude=None), history=tmp_path / "hist")
    out = io.StringIO()
    ctrl.handle("+ 1 2", out)
    ctrl.handle("head {}", out)
    ctrl.handle("(+ 1", out)
    ctrl.handle("list 1 2", out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "3"
    assert lines[1] == "Error: Function 'head' passed {}!"
    assert lines[2] == "<stdin>:1:5: Expected ')' before end of input"
    assert lines[3] == "{1 2}"


def test_handle_survives_deep_nesting(tmp_path):
    ctrl = REPL(Interpreter(prelude=None), history=tmp_path / "hist")
    out = io.StringIO()
    ctrl.handle("(" * 20000 + ")" * 20000, out)
    ctrl.handle("+ 2 2", out)
    assert out.getvalue() == "Error: expression nested too deeply\n4\n"


def test_handle_prints_wrapped_arithmetic(tmp_path):
    ctrl = REPL(Interpreter(prelude=None), history=tmp_path / "hist")
    out = io.StringIO()
    ctrl.handle("exp 10 5000", out)
    ctrl.handle("* 9223372036854775807 2", out)
    assert out.getvalue() == "0\n-2\n"


def test_completion(tmp_path):
    ctrl = REPL(Interpreter(prelude=None), history=tmp_path / "hist")
    assert ctrl.complete("he", 0) == "head"
    assert ctrl.complete("he", 1) is None


def test_repl_session(monkeypatch, tmp_path):
    monkeypatch.setattr(lispy.repl, "readline", None)
    monkeypatch.setenv("LISPY_HISTORY", str(tmp_path / "hist"))
    lines = iter(["def {x} 5", "", "* x x", "undefined"])

    def fake_input(prompt):
        assert prompt == config.get_prompt()
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    out = io.StringIO()
    repl(Interpreter(prelude=None), out)
    assert out.getvalue() == (
        config.BANNER + "\n"
        "()\n"
        "25\n"
        "Error: unbound symbol 'undefined'!\n"
        "\nThank you\n"
    )


# -----------------------------------------------------
# Command line
# -----------------------------------------------------


def test_main_eval(capsys):
    assert main(["--no-prelude", "-e", "eval (list + 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_main_eval_syntax_error(capsys):
    assert main(["--no-prelude", "-e", "(+ 1"]) == 1
    assert "Expected ')'" in capsys.readouterr().err


def test_main_runs_files(tmp_path, capsys):
    script = tmp_path / "script.lspy"
    script.write_text("def {a b} 1 2\n\n+ a b\njoin {a} {b}\n")
    assert main(["--no-prelude", str(script)]) == 0
    assert capsys.readouterr().out == "()\n3\n{a b}\n"


def test_main_prelude_option(tmp_path, capsys):
    prelude = tmp_path / "p.lspy"
    prelude.write_text("def {k} 7\n")
    assert main(["--prelude", str(prelude), "-e", "* k 6"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_missing_file(tmp_path, capsys):
    script = tmp_path / "script.lspy"
    script.write_text("+ 1 2\n")
    assert main(["--no-prelude", str(tmp_path / "missing.lspy"), str(script)]) == 1
    captured = capsys.readouterr()
    assert "cannot open" in captured.err
    assert "missing.lspy" in captured.err
    assert captured.out == "3\n"
