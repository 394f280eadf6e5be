#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Hash based helper functions."

import hashlib

from ecdsalib.alias import HashF, Octets
from ecdsalib.utils import bytes_from_octets


def reduce_to_hlen(msg: Octets, hf: HashF = hashlib.sha256) -> bytes:
    """Return the hf digest of the message.

    Step 4 of SEC 1 v.2 section 4.1.3:
    the message is hex-string or bytes, not a text string.
    """
    msg = bytes_from_octets(msg)
    h = hf()
    h.update(msg)
    return bytes(h.digest())
