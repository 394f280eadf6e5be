#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup of prime order Curve,
see the ecdsalib.curve module.
"""

from dataclasses import dataclass, field

from ecdsalib.alias import INF, AffinePoint, Infinity, Point
from ecdsalib.exceptions import ECLibTypeError, ECLibValueError
from ecdsalib.number_theory import Modulus, mod_sqrt
from ecdsalib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    Instances are immutable and can be shared freely between threads.
    """

    p: int
    a: int
    b: int
    # field arithmetic, i.e. modulo p
    mod_p: Modulus = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(self.p)
        a = int_from_integer(self.a)
        b = int_from_integer(self.b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECLibValueError(f"p is not prime: {int_repr(p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ECLibValueError(f"negative a: {a}")
        if p <= a:
            raise ECLibValueError(f"p <= a: {int_repr(p)} <= {int_repr(a)}")
        if b < 0:
            raise ECLibValueError(f"negative b: {b}")
        if p <= b:
            raise ECLibValueError(f"p <= b: {int_repr(p)} <= {int_repr(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ECLibValueError("zero discriminant")

        object.__setattr__(self, "p", p)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "mod_p", Modulus(p))

    @property
    def p_size(self) -> int:
        "Byte-length of the field prime."
        return (self.p.bit_length() + 7) // 8

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        if len(Q) == 2:
            return AffinePoint(Q[0], self.mod_p.neg(Q[1]))
        raise ECLibTypeError("not a point")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point must be on the curve.
        """
        self.require_on_curve(Q)
        return self.double_aff(Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if isinstance(R, Infinity):
            return Q
        if isinstance(Q, Infinity):
            return R

        if R[0] == Q[0]:
            # opposite points: vertical chord
            if (R[1] + Q[1]) % self.p == 0:
                return INF
            # same point: the chord formula would divide by zero
            return self.double_aff(Q)

        fp = self.mod_p
        lam = fp.mul(R[1] - Q[1], fp.inv(R[0] - Q[0]))
        x = fp.sub(lam * lam, Q[0] + R[0])
        y = fp.sub(lam * (Q[0] - x), Q[1])
        return AffinePoint(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if isinstance(Q, Infinity):
            return INF
        # vertical tangent
        if Q[1] % self.p == 0:
            return INF

        fp = self.mod_p
        lam = fp.mul(3 * Q[0] * Q[0] + self.a, fp.inv(2 * Q[1]))
        x = fp.sub(lam * lam, 2 * Q[0])
        y = fp.sub(lam * (Q[0] - x), Q[1])
        return AffinePoint(x, y)

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self.a) * x + self.b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise ECLibValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        y2 = self._y2(x)
        try:
            return mod_sqrt(y2, self.p)
        except ECLibValueError as e:
            raise ECLibValueError(f"invalid x-coordinate: {int_repr(x)}") from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        # switch even/odd root as needed
        return self.p - root if root % 2 else root

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECLibValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if isinstance(Q, Infinity):
            return True
        if len(Q) != 2:
            raise ECLibValueError("point must be a tuple[int, int]")
        if not 0 <= Q[0] < self.p:
            raise ECLibValueError(f"x-coordinate not in 0..p-1: {int_repr(Q[0])}")
        if not 0 <= Q[1] < self.p:
            raise ECLibValueError(f"y-coordinate not in 0..p-1: {int_repr(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECLibValueError(f"negative m: {hex(m)}")

    # running result, starting from the group identity
    R: Point = INF
    for bit in bin(m)[2:]:
        # the doubling part of 'double & add'
        R = ec.double_aff(R)
        if bit == "1":
            R = ec.add_aff(R, Q)
    return R


def mult_mont_ladder(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    This implementation uses
    'Montgomery ladder' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.

    Every bit costs exactly one addition and one doubling,
    whatever its value, so that the sequence of group operations
    does not depend on the bits of m.
    (see https://eprint.iacr.org/2014/140.pdf)

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if m < 0:
        raise ECLibValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INF, Q]
    for i in [int(i) for i in bin(m)[2:]]:
        R[not i] = ec.add_aff(R[i], R[not i])
        R[i] = ec.double_aff(R[i])
    return R[0]


# secret scalars are multiplied with the ladder
_mult = mult_mont_ladder


def _double_mult(u: int, H: Point, v: int, Q: Point, ec: CurveGroup) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients,
    affine coordinates.

    Strauss algorithm consists of a single 'double & add' loop
    for the parallel calculation of u*H and v*Q, efficiently
    using a single 'doubling' for both scalar multiplications (see
    https://stackoverflow.com/questions/50993471/ec-scalar-multiplication-with-strauss-shamir-method).

    The Shamir trick adds the precomputation of H+Q,
    which is to be added in the loop when the binary digits
    of u and v are both equal to 1 (on average 1/4 of the cases).

    The input points are assumed to be on curve,
    the u and v coefficients are assumed to have been reduced mod n
    if appropriate (e.g. cyclic groups of order n).
    """

    if u < 0:
        raise ECLibValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise ECLibValueError(f"negative second coefficient: {hex(v)}")

    # at each step one of the following points will be added
    T = [INF, H, Q, ec.add_aff(H, Q)]
    # which one depends on binary digit for that step
    ui = bin(u)[2:]
    vi = bin(v)[2:].zfill(len(ui))
    ui = ui.zfill(len(vi))
    digits = [int(j) + 2 * int(k) for j, k in zip(ui, vi)]
    R = T[digits[0]]
    for i in digits[1:]:
        R = ec.double_aff(R)
        R = ec.add_aff(R, T[i])
    return R
