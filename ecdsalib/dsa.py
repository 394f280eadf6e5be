#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

The nonce is always provided by the caller:
it must be secret, unpredictable, and never reused
(two signatures sharing a nonce leak the private key,
see crack_prv_key_).
Deterministic nonce generation (e.g. RFC 6979) is left to the caller.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from hashlib import sha256
from typing import Tuple, Union

from ecdsalib.alias import INF, AffinePoint, HashF, Octets, Point
from ecdsalib.curve import Curve, secp256k1
from ecdsalib.curve_group import _double_mult, _mult
from ecdsalib.exceptions import (
    ECLibRuntimeError,
    ECLibValueError,
    InvalidNonceError,
    InvalidSignatureEncodingError,
)
from ecdsalib.hashes import reduce_to_hlen
from ecdsalib.sec_point import bytes_from_point
from ecdsalib.to_prv_key import PrvKey, int_from_prv_key
from ecdsalib.to_pub_key import Key, point_from_key
from ecdsalib.utils import bytes_from_octets, int_from_bits, int_from_integer, int_repr

# message digest: fixed-width integer or Octets
MsgHash = Union[int, Octets]


@dataclass(frozen=True)
class Sig:
    """ECDSA signature with fixed-width serialization.

    The serialization is the big-endian r value followed by
    the big-endian s value, each padded to ec.n_size bytes
    (64 bytes overall for secp256k1).
    """

    # scalar, 0 < r < ec.n (ec.n is the curve order)
    r: int
    # scalar, 0 < s < ec.n (ec.n is the curve order)
    s: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < self.ec.n:
            err_msg = f"scalar r not in 1..n-1: {int_repr(self.r)}"
            raise InvalidSignatureEncodingError(err_msg)

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < self.ec.n:
            err_msg = f"scalar s not in 1..n-1: {int_repr(self.s)}"
            raise InvalidSignatureEncodingError(err_msg)

    def serialize(self, check_validity: bool = True) -> bytes:
        "Serialize an ECDSA signature to the r || s fixed-width representation."
        if check_validity:
            self.assert_valid()

        size = self.ec.n_size
        out = self.r.to_bytes(size, byteorder="big", signed=False)
        out += self.s.to_bytes(size, byteorder="big", signed=False)
        return out

    @classmethod
    def parse(
        cls: type[Sig], data: Octets, ec: Curve = secp256k1, check_validity: bool = True
    ) -> Sig:
        "Return a Sig by parsing its r || s fixed-width representation."
        size = ec.n_size
        data = bytes_from_octets(data, 2 * size)
        r = int.from_bytes(data[:size], byteorder="big", signed=False)
        s = int.from_bytes(data[size:], byteorder="big", signed=False)
        return cls(r, s, ec, check_validity)


@dataclass(frozen=True)
class KeyPair:
    "Private key q in 1..n-1 and the corresponding public key Q = q*G."

    q: int = field(repr=False)
    Q: AffinePoint
    ec: Curve = secp256k1

    def pub_key_bytes(self, compressed: bool = True) -> bytes:
        "Return the SEC compressed/uncompressed public key."
        return bytes_from_point(self.Q, self.ec, compressed)


def gen_keys(prv_key: PrvKey, ec: Curve = secp256k1) -> KeyPair:
    """Return the private/public key-pair of a private key.

    The private key must be in the range [1, ec.n-1].
    """
    q = int_from_prv_key(prv_key, ec)

    Q = _mult(q, ec.G, ec)
    return KeyPair(q, Q, ec)


def challenge_(msg_hash: MsgHash, ec: Curve = secp256k1) -> int:
    """Return the message digest as a scalar.

    An integer digest is simply reduced mod n;
    a digest as Octets is converted taking its leftmost ec.nlen bits
    (SEC 1 v.2 section 4.1.3, step 5) and then reduced mod n.
    """
    if isinstance(msg_hash, int):
        if msg_hash < 0:
            raise ECLibValueError(f"negative message hash: {msg_hash}")
        return ec.mod_n.reduce(msg_hash)

    return ec.mod_n.reduce(int_from_bits(msg_hash, ec.nlen))


def _sign_(c: int, q: int, nonce: int, lower_s: bool, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # It assumes that c and nonce are in [0, n-1], while q is in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = _mult(nonce, ec.G, ec)  # 1
    if K is INF:
        raise InvalidNonceError("failed to sign: INF nonce point")

    # mod n makes the affine x_K-coordinate a scalar
    r = ec.mod_n.reduce(K[0])  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise InvalidNonceError("failed to sign: r = 0")

    s = ec.mod_n.mul(ec.mod_n.inv(nonce), c + r * q)  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise InvalidNonceError("failed to sign: s = 0")

    # canonical 'low-s' encoding removes signature malleability
    if lower_s and s > ec.n // 2:
        s = ec.n - s

    return Sig(r, s, ec)


def sign_(
    msg_hash: MsgHash,
    prv_key: PrvKey,
    nonce: PrvKey,
    lower_s: bool = False,
    ec: Curve = secp256k1,
) -> Sig:
    """Sign a message digest according to ECDSA signature algorithm.

    The same (msg_hash, prv_key, nonce) always gives the same signature.
    """
    # the challenge
    c = challenge_(msg_hash, ec)  # 4, 5

    # the secret key q: an integer in the range 1..n-1.
    # SEC 1 v.2 section 3.2.1
    q = int_from_prv_key(prv_key, ec)

    # nonce: taken mod n, a zero nonce fails in _sign_ with an INF nonce point
    k = int_from_integer(nonce) % ec.n

    # second part delegated to helper function
    return _sign_(c, q, k, lower_s, ec)


def sign(
    msg: Octets,
    prv_key: PrvKey,
    nonce: PrvKey,
    lower_s: bool = False,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
) -> Sig:
    """ECDSA signature of a message.

    The message msg is first processed by hf, yielding the value

        msg_hash = hf(msg),

    a sequence of bits of length *hf_len*,
    then signed with sign_.
    """
    msg_hash = reduce_to_hlen(msg, hf)
    return sign_(msg_hash, prv_key, nonce, lower_s, ec)


def _assert_as_valid_(
    c: int, Q: Point, r: int, s: int, lower_s: bool, ec: Curve
) -> None:
    # Private function for test/dev purposes

    if lower_s and s > ec.n // 2:
        raise ECLibValueError("not a low s")

    w = ec.mod_n.inv(s)
    u = ec.mod_n.mul(c, w)
    v = ec.mod_n.mul(r, w)  # 4
    # Let K = u*G + v*Q.
    K = _double_mult(v, Q, u, ec.G, ec)  # 5

    # Fail if infinite(K).
    if K is INF:  # 5
        raise ECLibRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != ec.mod_n.reduce(K[0]):  # 6, 7, 8
        raise ECLibRuntimeError("signature verification failed")


def _sig_on_curve(sig: Union[Sig, Octets], ec: Curve) -> Sig:
    # Sig instances carry their own curve, Octets are parsed on ec
    if isinstance(sig, Sig):
        if sig.ec != ec:
            raise ECLibValueError("not the same curve in signature")
        sig.assert_valid()
        return sig
    return Sig.parse(sig, ec)


def assert_as_valid_(
    msg_hash: MsgHash,
    key: Key,
    sig: Union[Sig, Octets],
    lower_s: bool = False,
    ec: Curve = secp256k1,
) -> None:
    # It raises Errors, while verify should always return True or False
    sig = _sig_on_curve(sig, ec)

    c = challenge_(msg_hash, ec)  # 2, 3
    Q = point_from_key(key, ec)
    # second part delegated to helper function
    _assert_as_valid_(c, Q, sig.r, sig.s, lower_s, ec)


def assert_as_valid(
    msg: Octets,
    key: Key,
    sig: Union[Sig, Octets],
    lower_s: bool = False,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
) -> None:
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg, hf)
    assert_as_valid_(msg_hash, key, sig, lower_s, ec)


def verify_(
    msg_hash: MsgHash,
    key: Key,
    sig: Union[Sig, Octets],
    lower_s: bool = False,
    ec: Curve = secp256k1,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    # invalid keys, malformed signatures, and failed checks
    # all make verify return False
    try:
        assert_as_valid_(msg_hash, key, sig, lower_s, ec)
    except (ValueError, RuntimeError):
        return False

    return True


def verify(
    msg: Octets,
    key: Key,
    sig: Union[Sig, Octets],
    lower_s: bool = False,
    ec: Curve = secp256k1,
    hf: HashF = sha256,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    msg_hash = reduce_to_hlen(msg, hf)
    return verify_(msg_hash, key, sig, lower_s, ec)


def crack_prv_key_(
    msg_hash1: MsgHash,
    sig1: Union[Sig, Octets],
    msg_hash2: MsgHash,
    sig2: Union[Sig, Octets],
) -> Tuple[int, int]:
    """Return the (private key, nonce) pair from two signatures sharing a nonce."""
    if isinstance(sig1, Sig):
        sig1.assert_valid()
    else:
        sig1 = Sig.parse(sig1)

    if isinstance(sig2, Sig):
        sig2.assert_valid()
    else:
        sig2 = Sig.parse(sig2)

    ec = sig2.ec
    if sig1.ec != ec:
        raise ECLibValueError("not the same curve in signatures")
    if sig1.r != sig2.r:
        raise ECLibValueError("not the same r in signatures")
    if sig1.s == sig2.s:
        raise ECLibValueError("identical signatures")

    c_1 = challenge_(msg_hash1, ec)
    c_2 = challenge_(msg_hash2, ec)

    mod_n = ec.mod_n
    nonce = mod_n.mul(c_1 - c_2, mod_n.inv(sig1.s - sig2.s))
    q = mod_n.mul(sig2.s * nonce - c_2, mod_n.inv(sig1.r))
    return q, nonce
