from .poly import Poly

from .command_impl import command, int64, uint64


@command
def zero(state) -> Poly:
    return Poly.zero()


@command(consumes=False)
def is_coeff(state, p: Poly) -> bool:
    return p.is_coeff()


@command(consumes=False)
def is_zero(state, p: Poly) -> bool:
    return p.is_zero()


@command(consumes=False)
def clone(state, p: Poly) -> Poly:
    return p.clone()


@command
def add(state, p: Poly, q: Poly) -> Poly:
    return p + q


@command
def mul(state, p: Poly, q: Poly) -> Poly:
    return p * q


@command
def neg(state, p: Poly) -> Poly:
    return -p


@command
def sub(state, p: Poly, q: Poly) -> Poly:
    return p - q


@command(consumes=False)
def is_eq(state, p: Poly, q: Poly) -> bool:
    return p == q


@command(consumes=False)
def deg(state, p: Poly) -> int:
    return p.deg()


@command(consumes=False, parameter_report="deg-by-wrong-variable")
def deg_by(state, p: Poly, *, var_index: uint64) -> int:
    return p.deg_by(var_index)


@command(parameter_report="at-wrong-value")
def at(state, p: Poly, *, x: int64) -> Poly:
    return p.at(x)


@command(arity=lambda count: count + 1, parameter_report="compose-wrong-parameter")
def compose(state, p: Poly, *q: Poly, count: uint64) -> Poly:
    # The deepest operand is substituted for the first variable
    return p.compose(reversed(q))


@command(consumes=False)
def print(state, p: Poly) -> str:
    return repr(p)


@command
def pop(state, p: Poly) -> None:
    pass
