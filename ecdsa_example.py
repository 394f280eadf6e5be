#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from ecdsalib.curve import secp256k1 as ec
from ecdsalib.dsa import gen_keys, sign_, verify_
from ecdsalib.utils import hex_string

print("\n*** EC:")
print(ec)

print("\n1. Public key generation")
q = 0xA0DC65FFCA799873CBEA0AC274015B9526505DAAAED385155425F7337704883E
key_pair = gen_keys(q, ec)
Q = key_pair.Q
print(f"private key:     {hex_string(q)}")
print(f"public key:  x = {hex_string(Q.x)}")
print(f"             y = {hex_string(Q.y)}")
print(f"compressed:      {key_pair.pub_key_bytes().hex().upper()}")
print(f"uncompressed:    {key_pair.pub_key_bytes(compressed=False).hex().upper()}")

print("\n2. Signature generation")
# the hash of the message/transaction to be signed
msg_hash = 86032112319101611046176971828093669637772856272773459297323797145286374828050
# never reuse a nonce: replace with a secret random number
k = 28695618543805844332113829720373285210420739438570883203839696518176414791234
sig = sign_(msg_hash, q, k, ec=ec)
print(f"    r: {hex_string(sig.r)}")
print(f"    s: {hex_string(sig.s)}")

print("\n3. Signature verification")
print("Verified" if verify_(msg_hash, Q, sig, ec=ec) else "Invalid signature")
