import re
import sys


class Report:
    def __init__(self, text: str, raw_text: str):
        self.text: str = text
        self.raw_text: str = raw_text

    def __call__(self, *args, **kwargs):
        emit_report(self, *args, **kwargs)

error = Report("\x1b[91mError\x1b[0m", "ERROR")
critical = Report("\x1b[91mError\x1b[0m", "ERROR")


def colorize(text):
    text = text.replace("\x00", "␀").replace("\x01", "").replace("\x02", "")
    if text.startswith("#"):
        return f"\x01\x1b[38;5;242m\x02{text}\x01\x1b[39m\x02"
    text = re.sub(r"(\b[A-Z_]+\b)", "\x01\x1b[94m\x02\\1\x01\x1b[39m\x02", text)
    text = re.sub(r"(-?\b\d+\b)", "\x01\x1b[95m\x02\\1\x01\x1b[39m\x02", text)
    return text


class handle_reports:
    handlers_stack = []

    def __init__(self, fn):
        self.fn = fn
        self.obj = None
        self.is_error_condition = False

    def __enter__(self):
        if hasattr(self.fn, "__enter__"):
            self.obj = self.fn.__enter__()
        else:
            self.obj = self.fn

        self.handlers_stack.append(self)

        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        assert self.handlers_stack.pop() is self

        if hasattr(self.obj, "__exit__"):
            return self.obj.__exit__(exc_type, exc_value, exc_tb)
        return False


def excerpt_name(identifier):
    return identifier.replace("-", " ").upper()


class BareHandler:
    def __call__(self, priority, identifier, *reports):
        ctx_start, _ctx_end, _text = reports[0]
        print(f"{priority.raw_text} {ctx_start.line_no} {excerpt_name(identifier)}", file=sys.stderr)


class GraphicalHandler:
    def __call__(self, priority, identifier, *reports):
        ctx = reports[0][0]
        print(f"{priority.text} in \x1b[96m{ctx.filename}\x1b[0m: \x1b[38;5;208m[-W{identifier}]\x1b[0m", file=sys.stderr)

        for ctx_start, ctx_end, text in reports:
            line = ctx_start.code.replace("\t", " ")
            start_col_no = ctx_start.pos
            end_col_no = max(ctx_end.pos, start_col_no + 1)

            print("\x1b[92m" + str(ctx_start.line_no).rjust(5) + "\x1b[0m \x1b[38;5;242m│ \x1b[0m" + colorize(line), end="", file=sys.stderr)
            highlighted = line[start_col_no:end_col_no]
            if highlighted:
                print(f"\x1b[{1 + 5 + 3 + start_col_no}G\x1b[48;5;52m{colorize(highlighted)}\x1b[0m", end="", file=sys.stderr)
            print(file=sys.stderr)

            for line_i, text_line in enumerate(text.split("\n")):
                print(" " * 5 + " \x1b[38;5;242m│ \x1b[38;5;11m" + " " * start_col_no + ("🡹 " if line_i == 0 else "  ") + text_line + "\x1b[0m", file=sys.stderr)

        print(file=sys.stderr)


def emit_report(priority, identifier, *reports):
    if not handle_reports.handlers_stack:
        # Shouldn't happen in normal operation mode, but may be used in tests
        raise Exception(f"Unhandled report: {identifier}")  # pragma: no cover

    handler = handle_reports.handlers_stack[-1]
    handler.obj(priority, identifier, *reports)

    handler.is_error_condition = True

    if priority is critical:
        raise UnrecoverableError()


class RecoverableError(Exception):
    pass

class UnrecoverableError(Exception):
    pass
