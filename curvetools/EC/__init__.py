import logging
from enum import Enum, unique
from typing import Optional, Tuple

from curvetools.number_theory_stuff import residue, fermat_inverse
from curvetools.EC.error import NotSmooth, MismatchedCurve, NotOnCurve

__all__ = ['Curve', 'Point', 'CURVE_TYPE', 'POINT_TYPE']

log = logging.getLogger(__name__)


@unique
class CURVE_TYPE(Enum):
    WEIERSTRASS = 'weierstrass'
    MONTGOMERY = 'montgomery'


@unique
class POINT_TYPE(Enum):
    REGULAR = 'regular'
    INFINITE = 'infinite'


class Curve:
    """
        y^2 = x^3 + a2*x^2 + a4*x + a6 over the prime field F_P

        P must be prime, inverses in the group law are computed with Fermat's little theorem.
        Equality only looks at (a2, a4, a6, P); name and order are metadata.
    """

    def __init__(self, name: str, order: int, modulus: int, coefficients: Tuple[int, int, int]):
        a2, a4, a6 = coefficients
        self._name = name
        self._N = order
        self._P = modulus
        self._a2, self._a4, self._a6 = a2, a4, a6
        self._type = CURVE_TYPE.WEIERSTRASS if a2 == 0 else CURVE_TYPE.MONTGOMERY

    @classmethod
    def default(cls) -> 'Curve':
        from curvetools.EC.named import default_curve
        return default_curve()

    @property
    def name(self) -> str:
        return self._name

    @property
    def N(self) -> int:
        """Number of points in the group"""
        return self._N

    @property
    def P(self) -> int:
        """Field modulus"""
        return self._P

    @property
    def a2(self) -> int:
        return self._a2

    @property
    def a4(self) -> int:
        return self._a4

    @property
    def a6(self) -> int:
        return self._a6

    @property
    def type(self) -> CURVE_TYPE:
        return self._type

    def discriminant(self) -> int:
        b2 = 2 * self.a2
        b4 = 2 * self.a4
        b6 = 4 * self.a6
        b8 = b2 * self.a6 - self.a4 ** 2
        return -b8 * b2 ** 2 - 8 * b4 ** 3 - 27 * b6 ** 2 + 9 * b2 * b4 * b6

    def is_smooth(self) -> bool:
        if self.discriminant() == 0:
            log.debug('Curve %s has a zero discriminant', self.name)
            raise NotSmooth(f'Curve {self.name} is singular', curve=self)
        return True

    def f(self, x: int) -> int:
        """Compute y**2 = x^3 + a2*x^2 + a4*x + a6 in field FP"""
        return (x ** 3 + self.a2 * x ** 2 + self.a4 * x + self.a6) % self.P

    def __contains__(self, point: 'Point') -> bool:
        if point.curve != self:
            return False
        if point.is_inf():
            return True
        return point.y ** 2 % self.P == self.f(point.x)

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.a2, self.a4, self.a6, self.P) == (other.a2, other.a4, other.a6, other.P)

    def __hash__(self):
        return hash((self.a2, self.a4, self.a6, self.P))

    def __repr__(self):
        return f"Curve({self.name}, a2={self.a2}, a4={self.a4}, a6={self.a6}, P={self.P})"


class Point:
    """An affine point of a Curve. Both coordinates are None for the point at infinity."""

    def __init__(self, curve: Curve, x: Optional[int] = None, y: Optional[int] = None):
        assert (x is None) == (y is None), 'Either both coordinates or none must be given'
        self._curve = curve
        self._x = x
        self._y = y
        self._type = POINT_TYPE.REGULAR if x is not None else POINT_TYPE.INFINITE

    @classmethod
    def infinity(cls, curve: Curve) -> 'Point':
        return cls(curve)

    @classmethod
    def default(cls) -> 'Point':
        return cls.infinity(Curve.default())

    @property
    def x(self) -> Optional[int]:
        return self._x

    @property
    def y(self) -> Optional[int]:
        return self._y

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def type(self) -> POINT_TYPE:
        return self._type

    def is_inf(self) -> bool:
        return self.type is POINT_TYPE.INFINITE

    def check_on_curve(self) -> bool:
        if self not in self.curve:
            raise NotOnCurve(f"Point {self.x}, {self.y} not in curve {self.curve.name}", curve=self.curve, point=self)
        return True

    def __neg__(self) -> 'Point':
        if self.is_inf():
            return self
        return Point(self.curve, self.x, residue(-self.y, self.curve.P))

    def __add__(self, other: 'Point') -> 'Point':
        """https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Point_addition"""
        if not isinstance(other, Point):
            return NotImplemented
        if self.curve != other.curve:
            log.debug('Refusing to add points of %r and %r', self.curve, other.curve)
            raise MismatchedCurve('Cannot add points on different curves', curve=other.curve, point=other)

        curve = self.curve
        P = curve.P
        if other.is_inf():
            return self
        if self.is_inf():
            return other

        # case split on canonical residues, coordinates may be given unreduced
        x1, y1 = residue(self.x, P), residue(self.y, P)
        x2, y2 = residue(other.x, P), residue(other.y, P)
        if x1 == x2 and y2 == residue(-y1, P):
            return Point.infinity(curve)

        if (x1, y1) == (x2, y2):
            if y1 == 0:  # vertical tangent
                return Point.infinity(curve)
            lam = (3 * x1 ** 2 + 2 * curve.a2 * x1 + curve.a4) * fermat_inverse(2 * y1, P) % P
        else:
            lam = (y2 - y1) * fermat_inverse(x2 - x1, P) % P

        rx = lam ** 2 - curve.a2 - x1 - x2
        ry = lam * (x1 - rx) - y1
        return Point(curve, residue(rx, P), residue(ry, P))

    def __sub__(self, other: 'Point') -> 'Point':
        return self + -other

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y, self.curve, self.type) == (other.x, other.y, other.curve, other.type)

    def __hash__(self):
        return hash((self.x, self.y, self.curve, self.type))

    def __repr__(self):
        if self.is_inf():
            return f"Point(inf, {self.curve.name})"
        return f"Point({self.x}, {self.y}, {self.curve.name})"
