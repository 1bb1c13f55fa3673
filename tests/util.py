from contextlib import contextmanager
import io

from rpnpoly import reports
from rpnpoly.calculator import Calculator


@contextmanager
def expect_error(*errors):
    matched_errors = []

    def report_handler(priority, identifier, *lst_reports):
        matched_errors.append(identifier)

    try:
        with reports.handle_reports(report_handler):
            yield
    except reports.RecoverableError:
        pass

    matched_errors = sorted(matched_errors)
    errors = sorted(errors)
    assert matched_errors == errors, f"{matched_errors} != {errors}"


def expect_no_errors():
    return expect_error()  # I know, semantics kinda suck


def run(source, calc=None):
    if calc is None:
        calc = Calculator(output=io.StringIO())
    errors = []

    def report_handler(priority, identifier, *lst_reports):
        ctx_start, _ctx_end, _text = lst_reports[0]
        errors.append((ctx_start.line_no, identifier))

    with reports.handle_reports(report_handler):
        calc.run("test.txt", source)

    return calc.output.getvalue().splitlines(), errors, calc
