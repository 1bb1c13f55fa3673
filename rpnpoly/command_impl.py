import inspect
import typing

from .poly import Poly
from . import reports


uint64 = typing.NewType("uint64", int)
int64 = typing.NewType("int64", int)


def get_parameter_range(hint):
    type_name = hint.__name__
    unsigned = type_name.startswith("u")
    bitness = int(type_name.replace("u", "").replace("int", ""))
    if unsigned:
        return 0, 2 ** bitness - 1
    else:
        return -2 ** (bitness - 1), 2 ** (bitness - 1) - 1


def plural(count, noun):
    return f"{count} {noun}" + ("" if count == 1 else "s")


class Command:
    def __init__(self, fn, name, consumes=True, arity=None, parameter_report=None):
        self.fn = fn
        self.name = name
        self.consumes = consumes
        self.arity_fn = arity
        self.parameter_report = parameter_report

        hints = typing.get_type_hints(fn)
        sig = inspect.signature(fn)
        assert list(sig.parameters.keys())[:1] == ["state"]

        self.min_operands = 0
        self.variadic = False
        self.parameter_info = None

        for param in list(sig.parameters.values())[1:]:
            hint = hints[param.name]

            if param.kind == inspect.Parameter.KEYWORD_ONLY:
                assert self.parameter_info is None, "A command takes at most one numeric parameter"
                low, high = get_parameter_range(hint)
                self.parameter_info = {
                    "name": param.name,
                    "hint": hint,
                    "signed": low < 0,
                    "min": low,
                    "max": high
                }
                continue

            assert hint is Poly, f"Operands of '{name}' must be polynomials"
            if param.kind == inspect.Parameter.VAR_POSITIONAL:
                self.variadic = True
            else:
                self.min_operands += 1

        assert self.variadic == (arity is not None), "A variadic command must compute its arity from the parameter"
        assert (self.parameter_info is None) == (parameter_report is None), "A parameter needs a report identifier"

        self.return_type = hints.get("return", type(None))


    def takes_parameter(self):
        return self.parameter_info is not None


    def arity(self, parameter=None):
        if self.arity_fn is None:
            return self.min_operands
        return self.arity_fn(parameter)


    def execute(self, state, insn):
        stack = state.stack
        arity = self.arity(insn.parameter)

        if stack.size() < arity:
            reports.error(
                "stack-underflow",
                (insn.ctx_start, insn.ctx_end, f"'{self.name}' needs {plural(arity, 'polynomial')} on the stack, but there {'is' if stack.size() == 1 else 'are'} only {stack.size()}")
            )
            if self.return_type is bool:
                state.emit(False)
            raise reports.RecoverableError("Stack underflow")

        # Operands are listed from the top of the stack down
        if self.consumes:
            operands = [stack.pop() for _ in range(arity)]
        else:
            operands = [stack.peek(depth) for depth in range(arity)]

        kwargs = {}
        if self.parameter_info is not None:
            kwargs[self.parameter_info["name"]] = insn.parameter

        result = self.fn(state, *operands, **kwargs)

        if isinstance(result, Poly):
            stack.push(result)
        elif result is not None:
            state.emit(result)


commands = {}


def _command_impl(fn, **kwargs):
    name = fn.__name__.rstrip("_").upper()

    cmd = Command(fn, name, **kwargs)
    commands[name] = cmd

    # That is not to override globals with the same name, e.g. print
    return __builtins__.get(fn.__name__, None)


def command(fn=None, **kwargs):
    if fn is None:
        return lambda fn: command(fn, **kwargs)  # pylint: disable=unnecessary-lambda
    else:
        return _command_impl(fn, **kwargs)
