import re
import string

from .builtins import builtin_commands
from .context import Context
from .poly import COEFF_MAX, COEFF_MIN, EXP_MAX, Mono, Poly
from . import reports
from . import types


class Parser:
    def __init__(self, fn):
        self.fn = fn


    def __or__(self, rhs):
        assert isinstance(rhs, Parser)
        def fn(ctx, **kwargs):
            result = self(ctx, **kwargs, maybe=True)
            if result is not None:
                return result
            return rhs(ctx, **kwargs)
        return Parser(fn)


    def __call__(self, ctx, *, maybe=False, **kwargs):
        if maybe:
            old_ctx = ctx.save()
            try:
                result = self.fn(ctx, **kwargs)
                assert result is not None
            except reports.RecoverableError:
                ctx.restore(old_ctx)
                return None
            else:
                return result
        else:
            result = self.fn(ctx, **kwargs)
            assert result is not None
            return result


    @classmethod
    def regex(cls, regex):
        regex = re.compile(regex)
        def fn(ctx):
            match = regex.match(ctx.code, ctx.pos)
            if match is None:
                raise reports.RecoverableError(f"Failed to match regex at position {ctx.pos}")
            ctx.pos = match.end()
            return match.group()
        return Parser(fn)


    @classmethod
    def literal(cls, literal):
        def fn(ctx):
            if ctx.code[ctx.pos:ctx.pos + len(literal)] == literal:
                ctx.pos += len(literal)
                return literal
            else:
                raise reports.RecoverableError(f"Failed to match literal at position {ctx.pos}")
        return Parser(fn)


@Parser
def eof(ctx):
    if not ctx.eof():
        raise reports.RecoverableError("Failed to match EOF")
    return ""


comma = Parser.literal(",")
plus = Parser.literal("+")
space = Parser.literal(" ")
opening_parenthesis = Parser.literal("(")
closing_parenthesis = Parser.literal(")")

# \d would accept non-ASCII digits too
unsigned_number = Parser.regex(r"[0-9]+")
signed_number = Parser.regex(r"-?[0-9]+")
command_name = Parser.regex(r"\S+")


def to_int(text, low, high):
    # Leading zeros are fine, but int() refuses overly long strings
    digits = text.lstrip("-").lstrip("0") or "0"
    if len(digits) > len(str(max(-low, high))):
        raise reports.RecoverableError(f"{text} is out of range")
    value = -int(digits) if text.startswith("-") else int(digits)
    if not low <= value <= high:
        raise reports.RecoverableError(f"{text} is out of range")
    return value


@Parser
def coefficient(ctx):
    return Poly.from_coeff(to_int(signed_number(ctx), COEFF_MIN, COEFF_MAX))


@Parser
def exponent(ctx):
    return to_int(unsigned_number(ctx), 0, EXP_MAX)


@Parser
def polynomial(ctx):
    # Monomials of every expansion still open, innermost last. Nesting is
    # tracked here rather than by recursion, so depth is bounded by memory.
    pending = []
    while True:
        while opening_parenthesis(ctx, maybe=True):
            pending.append([])
        poly = coefficient(ctx)

        while pending:
            comma(ctx)
            exp = exponent(ctx)
            closing_parenthesis(ctx)
            pending[-1].append(Mono(poly, exp))
            if plus(ctx, maybe=True):
                # The next monomial of the same expansion
                opening_parenthesis(ctx)
                break
            # Repeated exponents and zero terms are legal in a literal
            poly = Poly.from_monos(pending.pop())
        else:
            return poly


@Parser
def literal_line(ctx):
    ctx_start = ctx.save()
    poly = polynomial(ctx)
    eof(ctx)
    return types.PolyLiteral(ctx_start, ctx, poly)


def end_of_line(ctx):
    ctx_end = ctx.save()
    ctx_end.pos = len(ctx.code)
    return ctx_end


def parse_literal(ctx):
    ctx_start = ctx.save()
    try:
        return literal_line(ctx)
    except reports.RecoverableError:
        reports.error(
            "wrong-poly",
            (ctx_start, end_of_line(ctx), "This is not a valid polynomial.\nExpected an integer, or monomials '(coeff,exp)' joined with '+', without spaces")
        )
        raise


def parse_command(ctx):
    ctx_start = ctx.save()
    name = command_name(ctx)

    cmd = builtin_commands.get(name)
    if cmd is None:
        reports.error(
            "wrong-command",
            (ctx_start, ctx, f"Unknown command '{name}'")
        )
        raise reports.RecoverableError("Unknown command")

    if not cmd.takes_parameter():
        if not ctx.eof():
            reports.error(
                "wrong-command",
                (ctx, end_of_line(ctx), f"'{name}' does not take a parameter, nothing may follow it")
            )
            raise reports.RecoverableError("Junk after command")
        return types.Command(ctx_start, ctx, cmd)

    info = cmd.parameter_info
    ctx_parameter = ctx.save()
    try:
        space(ctx)
        text = (signed_number if info["signed"] else unsigned_number)(ctx)
        eof(ctx)
        parameter = to_int(text, info["min"], info["max"])
    except reports.RecoverableError:
        reports.error(
            cmd.parameter_report,
            (ctx_parameter, end_of_line(ctx), f"'{name}' expects a single space and an integer from {info['min']} to {info['max']}")
        )
        raise

    return types.Command(ctx_start, ctx, cmd, parameter)


def parse_line(filename, line_no, code):
    ctx = Context(filename, line_no, code)

    if ctx.eof() or ctx.peek() == "#":
        return None
    elif ctx.peek() in string.ascii_letters:
        return parse_command(ctx)
    else:
        return parse_literal(ctx)


def parse_poly(code, filename="<literal>"):
    ctx = Context(filename, 1, code)
    return literal_line(ctx).poly
