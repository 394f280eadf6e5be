#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions,
and the elliptic curve point types.
"""

from typing import Any, Callable, NamedTuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "02 cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
# "02cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
#
# use ecdsalib.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests (32 bytes for sha256),
# SEC public keys (33 or 65 bytes), and
# dsa.Sig serialization (r || s, 64 bytes for secp256k1)
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]


class AffinePoint(NamedTuple):
    """Finite elliptic curve point in affine coordinates.

    Being a tuple, it compares equal to the plain (x, y) tuple.
    """

    x: int
    y: int


class Infinity:
    """The point at infinity, i.e. the identity of the curve group.

    It has no coordinates: (0, 0), or any other (x, y) pair,
    is not the point at infinity.
    There is only one instance, INF, and it can be checked with
    'Q is INF' or 'isinstance(Q, Infinity)'.
    """

    _instance = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __reduce__(self) -> Any:
        return (Infinity, ())


INF = Infinity()

# Elliptic curve point: tagged variant {Infinity} | {AffinePoint(x, y)}
Point = Union[Infinity, AffinePoint]
