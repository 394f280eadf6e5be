#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for conversions between different private key formats."

from ecdsalib.alias import Integer
from ecdsalib.curve import Curve, secp256k1
from ecdsalib.exceptions import InvalidScalarError
from ecdsalib.utils import bytes_from_octets, int_repr

# private keys (and nonces) are scalars:
# native int, "0x" prefixed hex-string, or Octets of ec.n_size bytes
PrvKey = Integer


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> int:
    """Return a verified-as-valid private key integer.

    It supports:

    - integer (native int or "0x" prefixed hex-string)
    - Octets (bytes or hex-string) of ec.n_size bytes
    """

    if isinstance(prv_key, int):
        q = prv_key
    elif isinstance(prv_key, str) and prv_key.strip().lower().startswith("0x"):
        q = int(prv_key, 16)
    else:
        try:
            prv_key = bytes_from_octets(prv_key, ec.n_size)
        except ValueError as e:
            raise InvalidScalarError(f"not a private key: {prv_key!r}") from e
        q = int.from_bytes(prv_key, "big")

    if not 0 < q < ec.n:
        raise InvalidScalarError(f"private key not in 1..n-1: {int_repr(q)}")

    return q
