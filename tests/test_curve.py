#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecdsalib.curve` module."

import dataclasses
import secrets
from typing import Dict

import pytest

from ecdsalib.alias import INF, AffinePoint
from ecdsalib.curve import CURVES, Curve, double_mult, mult, secp256k1
from ecdsalib.exceptions import ECLibValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, (1, 1), 11, 1, False)
low_card_curves["ec13_19"] = Curve(13, 0, 2, (1, 9), 19, 1, False)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, (0, 12), 13, 2, False)
low_card_curves["ec17_23"] = Curve(17, 3, 5, (1, 14), 23, 1, False)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, (4, 16), 13, 2, False)
low_card_curves["ec19_23"] = Curve(19, 2, 9, (0, 16), 23, 1, False)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, (5, 4), 19, 1, False)
low_card_curves["ec23_31"] = Curve(23, 5, 1, (0, 1), 31, 1, False)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)

ec23_31 = low_card_curves["ec23_31"]


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="negative a: "):
        Curve(13, -1, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="p <= a: "):
        Curve(13, 13, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="negative b: "):
        Curve(13, 0, -2, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="p <= b: "):
        Curve(13, 0, 13, (1, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19, 1, False)

    err_msg = "Generator must be a sequence\\[int, int\\]"
    with pytest.raises(ECLibValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9, 1), 19, 1, False)  # type: ignore

    with pytest.raises(ECLibValueError, match="Generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19, 1, False)

    with pytest.raises(ECLibValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20, 1, False)

    with pytest.raises(ECLibValueError, match="n not in "):
        Curve(13, 0, 2, (1, 9), 71, 1, False)

    with pytest.raises(ECLibValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19, 1, False)  # type: ignore

    with pytest.raises(ECLibValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17, 1, False)

    with pytest.raises(ECLibValueError, match="invalid cofactor: "):
        Curve(13, 0, 2, (1, 9), 19, 2, False)

    with pytest.raises(UserWarning, match="weak curve"):
        Curve(11, 2, 7, (6, 9), 7, 2, True)


def test_secp256k1() -> None:
    ec = CURVES["secp256k1"]
    assert ec is secp256k1

    assert ec.p == 2 ** 256 - 2 ** 32 - 977
    assert ec.a == 0
    assert ec.b == 7
    assert ec.G == (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    )
    assert isinstance(ec.G, AffinePoint)
    assert ec.n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert ec.h == 1
    assert ec.p_size == ec.n_size == 32
    assert ec.nlen == 256
    assert ec.mod_p.m == ec.p
    assert ec.mod_n.m == ec.n


def test_hex_string_parameters() -> None:
    ec = Curve(
        "0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f",
        0,
        "07",
        (
            "0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
            "0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8",
        ),
        "0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141",
        "0x1",
    )
    assert ec == secp256k1
    assert hash(ec) == hash(secp256k1)

    # the cofactor accepts the same integer representations
    ec = Curve(17, "0x6", "08", ("0x0", 12), "0d", "0x2", False)
    assert ec == low_card_curves["ec17_13"]
    assert ec.h == 2
    assert isinstance(ec.h, int)
    with pytest.raises(ECLibValueError, match="invalid cofactor: 1, expected 2"):
        Curve(17, 6, 8, (0, 12), 13, "01", False)


def test_immutability() -> None:
    ec = low_card_curves["ec13_11"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        ec.p = 17  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        ec.G = (0, 0)  # type: ignore

    # the curve registry is read-only
    with pytest.raises(TypeError):
        CURVES["ec13_11"] = ec  # type: ignore

    # curves are values: usable as dict keys
    assert len({c: name for name, c in all_curves.items()}) == len(all_curves)


def test_ec_str() -> None:
    ec = low_card_curves["ec13_11"]
    assert str(ec) == (
        "Curve\n p   = 13\n a   = 7\n b   = 6"
        "\n x_G = 1\n y_G = 1\n n   = 11\n h   = 1"
    )

    ec_str = str(secp256k1)
    assert " p   = FFFFFFFF FFFFFFFF " in ec_str
    assert " x_G = 79BE667E F9DCBBAC " in ec_str
    assert " n   = FFFFFFFF FFFFFFFF " in ec_str


def test_mult() -> None:
    for ec in all_curves.values():
        assert mult(0, ec.G, ec) == INF
        assert mult(0, INF, ec) == INF

        assert mult(1, INF, ec) == INF
        assert mult(1, ec.G, ec) == ec.G
        assert mult(1, None, ec) == ec.G

        assert mult(2, ec.G, ec) == ec.double(ec.G)

        Q = mult(ec.n - 1, ec.G, ec)
        assert ec.negate(ec.G) == Q

        # m is reduced mod n
        assert mult(ec.n, ec.G, ec) == INF
        assert mult(ec.n + 1, ec.G, ec) == ec.G
        assert mult(-1, ec.G, ec) == Q

    for ec in low_card_curves.values():
        Q = INF
        for q in range(ec.n):
            assert mult(q, ec.G, ec) == Q
            Q = ec.add(Q, ec.G)

    with pytest.raises(ECLibValueError, match="point not on curve"):
        mult(1, (1, 2), ec23_31)


def test_known_multiples() -> None:
    ec = secp256k1

    # scalar one gives back exactly the generator
    Q = mult(1)
    assert Q.x == ec.G.x
    assert Q.y == ec.G.y

    G2 = (
        0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
        0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
    )
    assert mult(2) == G2
    assert ec.double(ec.G) == G2
    assert ec.add(ec.G, ec.G) == G2

    G3 = (
        0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
        0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
    )
    assert mult(3) == G3
    assert ec.add(G2, ec.G) == G3
    assert ec.add(ec.G, G2) == G3


def test_linearity() -> None:
    ec = secp256k1
    for _ in range(3):
        a = secrets.randbelow(ec.n)
        b = secrets.randbelow(ec.n)
        P = mult(1 + secrets.randbelow(ec.n - 1))
        assert mult(a + b, P) == ec.add(mult(a, P), mult(b, P))
        assert mult(a * b, ec.G) == mult(a, mult(b, ec.G))

    for ec in low_card_curves.values():
        for a in range(ec.n):
            for b in range(ec.n):
                assert mult(a + b, ec.G, ec) == ec.add(
                    mult(a, ec.G, ec), mult(b, ec.G, ec)
                )


def test_double_mult() -> None:
    for ec in (ec23_31, secp256k1):
        H = mult(1 + secrets.randbelow(ec.n - 1), ec.G, ec)
        G = ec.G

        # 0*H + 1*G = G
        assert double_mult(0, H, 1, G, ec) == G
        # 1*H + 0*G = H
        assert double_mult(1, H, 0, G, ec) == H
        # 0*H + 0*G = INF
        assert double_mult(0, H, 0, G, ec) == INF
        # n*H + n*G = INF
        assert double_mult(ec.n, H, ec.n, G, ec) == INF
        # 1*INF + 1*G = G
        assert double_mult(1, INF, 1, G, ec) == G
        # 1*G + (n-1)*G = INF
        assert double_mult(1, G, ec.n - 1, G, ec) == INF

        u = secrets.randbelow(ec.n)
        v = secrets.randbelow(ec.n)
        assert double_mult(u, H, v, G, ec) == ec.add(mult(u, H, ec), mult(v, G, ec))

    ec = ec23_31
    H = mult(7, ec.G, ec)
    for u in range(ec.n):
        for v in range(ec.n):
            assert double_mult(u, H, v, ec.G, ec) == mult(u * 7 + v, ec.G, ec)

    with pytest.raises(ECLibValueError, match="point not on curve"):
        double_mult(1, (1, 2), 1, ec.G, ec)
