from .context import Context
from .poly import Poly


class Token:
    def __init__(self, ctx_start, ctx_end, *args, **kwargs):
        assert ctx_start is None or isinstance(ctx_start, Context)
        assert ctx_end is None or isinstance(ctx_end, Context)
        self.ctx_start = None if ctx_start is None else ctx_start.save()
        self.ctx_end = None if ctx_end is None else ctx_end.save()
        self.init(*args, **kwargs)

    def init(self):
        pass

    def __eq__(self, rhs):
        raise NotImplementedError()  # pragma: no cover


class PolyLiteral(Token):
    # pylint: disable=arguments-differ
    def init(self, poly: Poly):
        self.poly: Poly = poly

    def __repr__(self):
        return repr(self.poly)

    def __eq__(self, rhs):
        return isinstance(rhs, type(self)) and self.poly == rhs.poly


class Command(Token):
    # pylint: disable=arguments-differ
    def init(self, command, parameter=None):
        self.command = command
        self.parameter = parameter

    @property
    def name(self):
        return self.command.name

    def __repr__(self):
        if self.parameter is None:
            return self.name
        return f"{self.name} {self.parameter}"

    def __eq__(self, rhs):
        return isinstance(rhs, type(self)) and (self.command, self.parameter) == (rhs.command, rhs.parameter)
