#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for conversions between different public key formats."

from typing import Tuple, Union

from ecdsalib.alias import AffinePoint, Infinity, Octets
from ecdsalib.curve import Curve, secp256k1
from ecdsalib.exceptions import ECLibValueError
from ecdsalib.sec_point import point_from_octets

# public key: native (x, y) tuple or SEC Octets
Key = Union[Tuple[int, int], Infinity, Octets]


def point_from_key(key: Key, ec: Curve = secp256k1) -> AffinePoint:
    """Return an AffinePoint from any possible public key representation.

    It supports:

    - SEC Octets (bytes or hex-string, with 02, 03, or 04 prefix)
    - native tuple
    """

    if isinstance(key, (tuple, Infinity)):
        if not isinstance(key, Infinity) and ec.is_on_curve(key):
            return AffinePoint(*key)
        raise ECLibValueError(f"not a valid public key: {key}")

    return point_from_octets(key, ec)
