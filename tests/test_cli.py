import io
import pytest

from rpnpoly._cli import main_cli
from rpnpoly import reports
from rpnpoly.calculator import Calculator


def run_cli(argv, capsys, monkeypatch, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    try:
        main_cli(argv)
    except SystemExit as ex:
        code = ex.code
    else:
        code = 0
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_stdin(capsys, monkeypatch):
    code, out, err = run_cli([], capsys, monkeypatch, stdin="2\n3\nADD\nPRINT\nSUB\n")
    assert code == 0
    assert out == "5\n"
    assert err == "ERROR 5 STACK UNDERFLOW\n"


def test_strict(capsys, monkeypatch):
    code, _out, _err = run_cli(["--strict", "-"], capsys, monkeypatch, stdin="ADD\n")
    assert code == 1
    code, _out, _err = run_cli(["--strict", "-"], capsys, monkeypatch, stdin="1\nPRINT\n")
    assert code == 0


def test_files_share_a_stack(tmp_path, capsys, monkeypatch):
    first = tmp_path / "first.txt"
    first.write_text("(1,1)\n", encoding="utf-8")
    second = tmp_path / "second.txt"
    second.write_text("(2,1)\nADD\nPRINT\nMUL\n", encoding="utf-8")

    code, out, err = run_cli([str(first), str(second)], capsys, monkeypatch)
    assert code == 0
    assert out == "(3,1)\n"
    assert err == "ERROR 4 STACK UNDERFLOW\n"


def test_missing_file(tmp_path, capsys, monkeypatch):
    code, out, err = run_cli([str(tmp_path / "missing.txt")], capsys, monkeypatch)
    assert code == 1
    assert out == ""
    assert "Could not read input file" in err


def test_not_utf8(tmp_path, capsys, monkeypatch):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xff\xfe\n")
    code, _out, err = run_cli([str(path)], capsys, monkeypatch)
    assert code == 1
    assert "is not in UTF-8" in err


def test_graphical_report(capsys, monkeypatch):
    code, out, err = run_cli(["--report-format", "graphical"], capsys, monkeypatch, stdin="1\nDEG_BY x\n")
    assert code == 0
    assert out == ""
    assert "[-Wdeg-by-wrong-variable]" in err
    assert "stdin" in err
    assert "expects a single space and an integer" in err


def test_resource_exhaustion_is_fatal(capsys, monkeypatch):
    def explode(self, token):
        raise MemoryError()

    monkeypatch.setattr(Calculator, "execute", explode)
    code, out, err = run_cli([], capsys, monkeypatch, stdin="1\n2\n")
    assert code == 1
    assert out == ""
    assert err == "ERROR 1 RESOURCE EXHAUSTED\n"


def test_nested_literal(capsys, monkeypatch):
    depth = 500
    literal = "(" * depth + "1" + ",1)" * depth
    code, out, err = run_cli([], capsys, monkeypatch, stdin=f"{literal}\nCLONE\nADD\nDEG\nPRINT\n1\nPRINT\n")
    assert code == 0
    assert out == f"{depth}\n" + "(" * depth + "2" + ",1)" * depth + "\n1\n"
    assert err == ""


def test_exhausting_recursion_is_fatal(capsys, monkeypatch):
    depth = 100000
    # Parsing needs no recursion, printing does
    code, out, err = run_cli([], capsys, monkeypatch, stdin="(" * depth + "1" + ",1)" * depth + "\nDEG\nPRINT\n1\n")
    assert code == 1
    assert out == ""
    assert err == "ERROR 2 RESOURCE EXHAUSTED\n"


def test_bare_handler(capsys):
    calc = Calculator()
    with reports.handle_reports(reports.BareHandler()) as handler:
        calc.run("test.txt", "\n\nNOPE\n")
    assert handler.is_error_condition
    assert capsys.readouterr().err == "ERROR 3 WRONG COMMAND\n"


def test_critical_is_unrecoverable():
    with pytest.raises(reports.UnrecoverableError):
        with reports.handle_reports(lambda *args: None):
            reports.critical("resource-exhausted", (None, None, ""))
