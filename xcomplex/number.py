import math
import numbers
import operator
from dataclasses import dataclass
from typing import Union

from . import _ieee

# defaults for Complex.isclose
REL_TOL = 1e-9
ABS_TOL = 0.0

Scalar = Union[int, float]


@dataclass(frozen=True, eq=False)
class Complex:
    """
    An immutable complex number ``re + im·i`` over double precision floats.

    Constructors
    ------------
    Complex(re, im)               -> re + im i     (rectangular)
    Complex.from_polar(r, theta)  -> r·e^{iθ}      (polar)
    Complex.cis(theta)            -> e^{iθ}        (unit circle)
    Complex.from_builtin(z)       -> from a Python ``complex``

    Equality is structural: two values are equal when both parts compare
    equal as floats, so a value with a NaN part is not equal to itself.
    Use :meth:`isclose` for tolerant comparison.

    Numeric edge cases never raise.  Division by zero, the logarithm of
    zero and overflowing exponentials produce ``inf``/``nan`` parts.
    """

    re: float
    im: float = 0.0

    def __post_init__(self):
        for name in ("re", "im"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise TypeError(f"Complex.{name} must be a real number, got {type(value).__name__}")
            object.__setattr__(self, name, _ieee.to_float(value))

    # ---------- convenience makers ----------
    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """Explicit polar constructor."""
        return cls(r * _ieee.cos(theta), r * _ieee.sin(theta))

    @classmethod
    def cis(cls, theta: float) -> "Complex":
        """Point on the unit circle at angle ``theta``."""
        return cls(_ieee.cos(theta), _ieee.sin(theta))

    @classmethod
    def from_builtin(cls, z: Union[complex, Scalar]) -> "Complex":
        z = complex(z)
        return cls(z.real, z.imag)

    # ---------- basic properties ----------
    def norm(self) -> float:
        """Euclidean magnitude, overflow-safe."""
        return math.hypot(self.re, self.im)

    def norm_sq(self) -> float:
        return self.re * self.re + self.im * self.im

    def arg(self) -> float:
        """Principal argument in ``(-π, π]``."""
        return math.atan2(self.im, self.re)

    def conj(self) -> "Complex":
        return Complex(self.re, -self.im)

    def isclose(self, other, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
        other = _coerce(other)
        if other is None:
            return False
        return (math.isclose(self.re, other.re, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.im, other.im, rel_tol=rel_tol, abs_tol=abs_tol))

    # ---------- arithmetic ----------
    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def mul(self, other: "Complex") -> "Complex":
        return Complex(self.re * other.re - self.im * other.im,
                       self.re * other.im + self.im * other.re)

    def div(self, other: "Complex") -> "Complex":
        """
        ``self / other`` as ``self · conj(other) / |other|²``.

        The squared norm is computed once; a zero divisor gives
        ``inf``/``nan`` parts following float division.
        """
        d = other.re * other.re + other.im * other.im
        return Complex(_ieee.div(self.re * other.re + self.im * other.im, d),
                       _ieee.div(self.im * other.re - self.re * other.im, d))

    def recip(self) -> "Complex":
        return ONE.div(self)

    # ---------- transcendental ----------
    def exp(self) -> "Complex":
        e = _ieee.exp(self.re)
        return Complex(e * _ieee.cos(self.im), e * _ieee.sin(self.im))

    def ln(self) -> "Complex":
        """Principal natural logarithm; ``ln(0)`` is ``(-inf, 0)``."""
        return Complex(_ieee.ln(self.norm()), self.arg())

    def sqrt(self) -> "Complex":
        """Principal square root (non-negative real part)."""
        r = _ieee.sqrt(self.norm())
        half = self.arg() / 2.0
        return Complex(r * _ieee.cos(half), r * _ieee.sin(half))

    def powi(self, n: int) -> "Complex":
        """
        Integer power.

        Non-negative exponents use the polar form ``|z|^n·e^{inθ}``,
        negative ones the reciprocal of the positive power.
        """
        n = operator.index(n)
        if n == 0:
            return ONE
        if n < 0:
            return ONE.div(self.powi(-n))
        return self._polar_pow(_ieee.to_float(n))

    def powf(self, x: float) -> "Complex":
        """Real power through the polar form, ``|z|^x·e^{ixθ}``."""
        return self._polar_pow(_ieee.to_float(x))

    def powc(self, e: "Complex") -> "Complex":
        """Complex power ``exp(e·ln z)``."""
        return e.mul(self.ln()).exp()

    def _polar_pow(self, x: float) -> "Complex":
        r = _ieee.power(self.norm(), x)
        theta = self.arg() * x
        return Complex(r * _ieee.cos(theta), r * _ieee.sin(theta))

    # ---------- dunder sugar ----------
    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __pow__(self, p):
        if isinstance(p, numbers.Integral):
            return self.powi(p)
        if isinstance(p, numbers.Real):
            return self.powf(p)
        p = _coerce(p)
        return NotImplemented if p is None else self.powc(p)

    def __rpow__(self, base):
        base = _coerce(base)
        return NotImplemented if base is None else base.powc(self)

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __pos__(self):
        return self

    __abs__ = norm

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self):
        return hash(complex(self.re, self.im))

    def __bool__(self):
        return self.re != 0.0 or self.im != 0.0

    def __complex__(self):
        return complex(self.re, self.im)

    def __repr__(self):
        return f"Complex({self.re!r}, {self.im!r})"

    def __str__(self):
        return f"({self.re:g}{self.im:+g}i)"


def _coerce(value) -> Union[Complex, None]:
    """Promote real and builtin complex operands; ``None`` if unsupported."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(value, 0.0)
    if isinstance(value, numbers.Complex):
        return Complex.from_builtin(value)
    return None


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)


if __name__ == "__main__":
    c = Complex(1, 2)                       # 1 + 2i
    d = Complex.from_polar(5, 0.9272952180016122)
    print(c * d, c / d)                     # operator sugar
    print(c.norm(), c.arg())
    print(c.exp(), c.ln(), c.sqrt())
    print(c ** 2, c ** 0.5, c ** Complex(2, 3))
