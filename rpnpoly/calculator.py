import sys
import threading

from .context import Context
from .parser import parse_line
from .stack import PolyStack
from . import reports
from . import types


# Room for nested coefficients: every nesting level of a polynomial takes a
# couple of Python frames in the engine
RECURSION_LIMIT = 20000
THREAD_STACK_SIZE = 256 * 1024 * 1024


def split_lines(source):
    lines = source.split("\n")
    if lines[-1] == "":
        # A trailing newline does not start another line
        lines.pop()
    return lines


def call_with_deep_stack(fn, *args):
    """Calls ``fn`` in a worker thread whose stack and recursion limit fit
    deeply nested polynomials, and passes its result or exception back."""
    outcome = {}

    def worker():
        try:
            outcome["result"] = fn(*args)
        except BaseException as ex:  # pylint: disable=broad-except
            outcome["exception"] = ex

    old_limit = sys.getrecursionlimit()
    old_stack_size = threading.stack_size(THREAD_STACK_SIZE)
    sys.setrecursionlimit(max(old_limit, RECURSION_LIMIT))
    try:
        thread = threading.Thread(target=worker, name="rpnpoly-calculator")
        thread.start()
        thread.join()
    finally:
        sys.setrecursionlimit(old_limit)
        threading.stack_size(old_stack_size)

    if "exception" in outcome:
        raise outcome["exception"]
    return outcome.get("result")


class Calculator:
    def __init__(self, output=None):
        self.stack = PolyStack()
        self.output = output


    def emit(self, value):
        if isinstance(value, bool):
            value = int(value)
        print(value, file=self.output)


    def execute(self, token):
        if isinstance(token, types.PolyLiteral):
            self.stack.push(token.poly)
        elif isinstance(token, types.Command):
            token.command.execute(self, token)
        else:
            raise TypeError(f"Cannot execute {type(token).__name__}")  # pragma: no cover


    def execute_line(self, filename, line_no, code):
        try:
            token = parse_line(filename, line_no, code)
            if token is not None:
                self.execute(token)
        except reports.RecoverableError:
            # Reported already, the stack is untouched
            return False
        except (MemoryError, RecursionError):
            ctx_start = Context(filename, line_no, code)
            ctx_end = ctx_start.save()
            ctx_end.pos = len(code)
            reports.critical(
                "resource-exhausted",
                (ctx_start, ctx_end, "Ran out of memory or recursion depth while processing this line")
            )
        return True


    def run(self, filename, source):
        call_with_deep_stack(self._run_lines, filename, source)


    def _run_lines(self, filename, source):
        for line_no, code in enumerate(split_lines(source), start=1):
            self.execute_line(filename, line_no, code)
