import heapq
import itertools


COEFF_BITS = 64
COEFF_MIN = -2 ** (COEFF_BITS - 1)
COEFF_MAX = 2 ** (COEFF_BITS - 1) - 1
EXP_MAX = 2 ** 31 - 1


def wrap(value):
    # Two's complement, as native 64-bit integers behave on overflow
    value &= 2 ** COEFF_BITS - 1
    if value > COEFF_MAX:
        value -= 2 ** COEFF_BITS
    return value


def power(base, exp):
    return wrap(pow(base, exp, 2 ** COEFF_BITS))


def _exp_key(mono):
    return mono.exp


# Recursion over nested coefficients calls the underscored methods directly,
# never operators or builtins that call back into Python.


class Mono:
    def __init__(self, coeff, exp):
        assert isinstance(coeff, Poly)
        assert isinstance(exp, int) and exp >= 0
        self.coeff = coeff
        self.exp = exp


    def clone(self):
        return Mono(self.coeff.clone(), self.exp)


    def __neg__(self):
        return Mono(self.coeff._neg(), self.exp)


    def __eq__(self, rhs):
        return isinstance(rhs, Mono) and self.exp == rhs.exp and self.coeff._equals(rhs.coeff)


    def __hash__(self):
        return hash((self.exp, self.coeff))


    def __repr__(self):
        return f"({self.coeff._format()},{self.exp})"


class Poly:
    def __init__(self, coeff=0, monos=None):
        if monos is None:
            assert isinstance(coeff, int)
            self.coeff = wrap(coeff)
            self.monos = None
        else:
            self.coeff = None
            self.monos = tuple(monos)
            assert self.monos
            for prev, cur in zip(self.monos, self.monos[1:]):
                assert prev.exp < cur.exp


    @classmethod
    def zero(cls):
        return cls(0)


    @classmethod
    def from_coeff(cls, coeff):
        return cls(coeff)


    @classmethod
    def from_monos(cls, monos):
        """Sums monomials in any order, with repeated exponents and zero terms
        allowed, into a canonical polynomial. The coefficients of the
        monomials must be canonical themselves."""
        return cls._sum_sorted(sorted(monos, key=_exp_key))


    @classmethod
    def _sum_sorted(cls, monos):
        merged = []
        for exp, group in itertools.groupby(monos, key=_exp_key):
            coeff = next(group).coeff
            for mono in group:
                coeff = coeff._add(mono.coeff)
            # A canonical coefficient is recursively zero only as plain 0
            if not coeff.is_zero():
                merged.append(Mono(coeff, exp))
        return cls._collapse(merged)


    @classmethod
    def _collapse(cls, monos):
        if not monos:
            return cls.zero()
        if len(monos) == 1 and monos[0].exp == 0 and monos[0].coeff.is_coeff():
            return cls(monos[0].coeff.coeff)
        return cls(monos=monos)


    def is_coeff(self):
        return self.monos is None


    def is_zero(self):
        return self.is_coeff() and self.coeff == 0


    def is_zero_recursive(self):
        if self.is_coeff():
            return self.coeff == 0
        for mono in self.monos:
            if not mono.coeff.is_zero_recursive():
                return False
        return True


    def is_coeff_recursive(self):
        if self.is_coeff():
            return True
        for mono in self.monos:
            if mono.exp == 0:
                if not mono.coeff.is_coeff_recursive():
                    return False
            elif not mono.coeff.is_zero_recursive():
                return False
        return True


    def constant_term(self):
        if self.is_coeff():
            return self.coeff
        head = self.monos[0]
        if head.exp == 0:
            return head.coeff.constant_term()
        return 0


    def clone(self):
        if self.is_coeff():
            return Poly(self.coeff)
        return Poly(monos=[mono.clone() for mono in self.monos])


    def __eq__(self, rhs):
        if not isinstance(rhs, Poly):
            return NotImplemented
        return self._equals(rhs)


    def _equals(self, rhs):
        if self.is_coeff() or rhs.is_coeff():
            return self.coeff == rhs.coeff
        if len(self.monos) != len(rhs.monos):
            return False
        for lhs_mono, rhs_mono in zip(self.monos, rhs.monos):
            if lhs_mono.exp != rhs_mono.exp or not lhs_mono.coeff._equals(rhs_mono.coeff):
                return False
        return True


    def __hash__(self):
        if self.is_coeff():
            return hash(self.coeff)
        return hash(self.monos)


    def __repr__(self):
        return self._format()


    def _format(self):
        if self.is_coeff():
            return str(self.coeff)
        return "+".join([f"({mono.coeff._format()},{mono.exp})" for mono in self.monos])


    def __add__(self, rhs):
        if isinstance(rhs, int):
            rhs = Poly(rhs)
        assert isinstance(rhs, Poly)
        return self._add(rhs)

    def __radd__(self, lhs):
        return self + lhs


    def _add(self, rhs):
        if self.is_coeff() and rhs.is_coeff():
            return Poly(self.coeff + rhs.coeff)
        if self.is_coeff():
            return rhs._add_coeff(self.coeff)
        if rhs.is_coeff():
            return self._add_coeff(rhs.coeff)

        # Both sides are sorted already, a linear merge is enough
        return Poly._sum_sorted(heapq.merge(self.monos, rhs.monos, key=_exp_key))


    def _add_coeff(self, coeff):
        if coeff == 0:
            return self.clone()
        return Poly._sum_sorted(heapq.merge([Mono(Poly(coeff), 0)], self.monos, key=_exp_key))


    def __sub__(self, rhs):
        return self + (-rhs)

    def __rsub__(self, lhs):
        return lhs + (-self)


    def __pos__(self):
        return self

    def __neg__(self):
        return self._neg()


    def _neg(self):
        if self.is_coeff():
            return Poly(-self.coeff)
        return Poly(monos=[Mono(mono.coeff._neg(), mono.exp) for mono in self.monos])


    def __mul__(self, rhs):
        if isinstance(rhs, int):
            rhs = Poly(rhs)
        assert isinstance(rhs, Poly)
        return self._mul(rhs)

    def __rmul__(self, lhs):
        return self * lhs


    def _mul(self, rhs):
        if rhs.is_coeff():
            return self._scale(rhs.coeff)
        if self.is_coeff():
            return rhs._scale(self.coeff)

        return Poly.from_monos([
            Mono(lhs_mono.coeff._mul(rhs_mono.coeff), lhs_mono.exp + rhs_mono.exp)
            for lhs_mono in self.monos
            for rhs_mono in rhs.monos
        ])


    def _scale(self, coeff):
        if self.is_coeff():
            return Poly(self.coeff * coeff)
        if coeff == 0:
            return Poly.zero()
        monos = []
        for mono in self.monos:
            # Wraparound may zero out a product
            product = mono.coeff._scale(coeff)
            if not product.is_zero():
                monos.append(Mono(product, mono.exp))
        return Poly._collapse(monos)


    def __pow__(self, exp):
        assert isinstance(exp, int) and exp >= 0
        if exp == 0:
            return Poly(1)
        if self.is_coeff():
            return Poly(power(self.coeff, exp))
        half = self ** (exp // 2)
        result = half._mul(half)
        if exp % 2 == 1:
            result = result._mul(self)
        return result


    def deg(self):
        if self.is_coeff():
            return -1 if self.coeff == 0 else 0
        result = -1
        for mono in self.monos:
            result = max(result, mono.exp + mono.coeff.deg())
        return result


    def deg_by(self, var_index):
        if self.is_coeff():
            return -1 if self.coeff == 0 else 0
        if var_index == 0:
            return self.monos[-1].exp
        result = -1
        for mono in self.monos:
            result = max(result, mono.coeff.deg_by(var_index - 1))
        return result


    def at(self, x):
        # A constant does not depend on the substituted variable
        if self.is_coeff():
            return self.clone()
        result = Poly.zero()
        for mono in self.monos:
            result = result._add(mono.coeff._scale(power(x, mono.exp)))
        return result


    def compose(self, substitutes):
        """Substitutes ``substitutes[i]`` for variable ``i``. Variables with no
        substitute are replaced by zero."""
        return self._compose(tuple(substitutes), 0)


    def _compose(self, substitutes, depth):
        if self.is_coeff():
            return self.clone()
        substitute = substitutes[depth] if depth < len(substitutes) else Poly.zero()
        result = Poly.zero()
        for mono in self.monos:
            result = result._add((substitute ** mono.exp)._mul(mono.coeff._compose(substitutes, depth + 1)))
        return result
