#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and scalar multiplication functions.

The curve parameters are loaded from the json files in the data folder:

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
"""

import json
from dataclasses import InitVar, dataclass, field
from math import isqrt
from os import path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ecdsalib.alias import INF, AffinePoint, Infinity, Integer, Point
from ecdsalib.curve_group import CurveGroup, _double_mult, mult_aff
from ecdsalib.exceptions import ECLibValueError
from ecdsalib.number_theory import Modulus
from ecdsalib.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class Curve(CurveGroup):
    """Prime order subgroup of the points of an elliptic curve over Fp.

    The subgroup is generated by G, has prime order n,
    and h is the cofactor of the subgroup, i.e. the ratio between
    the number of curve points and n.

    All parameters are checked at construction time:
    an invalid curve can not be instantiated.
    """

    G: AffinePoint
    n: int
    h: int = 1
    weakness_check: InitVar[bool] = True
    # scalar arithmetic, i.e. modulo n
    mod_n: Modulus = field(init=False, repr=False, compare=False)

    def __post_init__(self, weakness_check: bool) -> None:  # type: ignore
        super().__post_init__()

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if isinstance(self.G, Infinity):
            raise ECLibValueError("INF point cannot be a generator")
        if len(self.G) != 2:
            raise ECLibValueError("Generator must be a sequence[int, int]")
        G = AffinePoint(int_from_integer(self.G[0]), int_from_integer(self.G[1]))
        if not self.is_on_curve(G):
            raise ECLibValueError("Generator is not on the curve")
        object.__setattr__(self, "G", G)

        n = int_from_integer(self.n)
        h = int_from_integer(self.h)

        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise ECLibValueError(f"n is not prime: {int_repr(n)}")
        # also check n with Hasse Theorem
        delta = isqrt(4 * self.p)
        if h < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise ECLibValueError(f"n not in p+1-delta..p+1+delta: {int_repr(n)}")

        # 7. Check that nG = INF
        if mult_aff(n, G, self) is not INF:
            raise ECLibValueError(f"n is not the group order: {int_repr(n)}")

        # 6. Check cofactor
        exp_h = (self.p + 1 + delta) // n
        if h != exp_h:
            raise ECLibValueError(f"invalid cofactor: {h}, expected {exp_h}")

        # 8. Check that n ≠ p
        if n == self.p:
            raise UserWarning(f"n=p weak curve: {hex_string(n)}")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

        object.__setattr__(self, "n", n)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "mod_n", Modulus(n))

    @property
    def nlen(self) -> int:
        "Bit-length of the group order."
        return self.n.bit_length()

    @property
    def n_size(self) -> int:
        "Byte-length of the group order."
        return (self.nlen + 7) // 8

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
        else:
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h   = {self.h}"
        return result


def _load_curves(filename: str) -> Dict[str, Curve]:
    with open(filename, "r", encoding="ascii") as file_:
        params = json.load(file_)
    # [p, a, b, [xG, yG], n, h] for each curve name
    return {ec_name: Curve(*ec_params) for ec_name, ec_params in params.items()}


datadir = path.join(path.dirname(__file__), "data")

# curves included in SEC 2 v.2
# http://www.secg.org/sec2-v2.pdf
CURVES: Mapping[str, Curve] = MappingProxyType(
    _load_curves(path.join(datadir, "ec_SEC2v2.json"))
)

secp256k1 = CURVES["secp256k1"]


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    Q defaults to the generator G; any other point must be on curve
    and belong to the subgroup of order n, as m is reduced mod n.

    Use the 'left-to-right double & add' algorithm.
    """
    if Q is None:
        Q = ec.G
    else:
        ec.require_on_curve(Q)
    m = int_from_integer(m) % ec.n
    return mult_aff(m, Q, ec)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: Curve = secp256k1
) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    The input points must be on curve and
    belong to the subgroup of order n, as u and v are reduced mod n.
    """
    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    return _double_mult(u, H, v, Q, ec)
