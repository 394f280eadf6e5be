#!/usr/bin/env python3

# Copyright (C) The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
raised by ecdsalib from those raised by other codebase.

The specialized classes name the arithmetic or protocol condition
that failed; they still derive from the regular
ValueError and RuntimeError, so users are free to just deal with those.
"""


class ECLibValueError(ValueError):
    pass


class ECLibTypeError(TypeError):
    pass


class ECLibRuntimeError(RuntimeError):
    pass


class NotInvertibleError(ECLibValueError):
    "No modular inverse exists for the value under the given modulus."


class InvalidScalarError(ECLibValueError):
    "Scalar (private key or nonce) not in 1..n-1."


class InvalidNonceError(ECLibRuntimeError):
    "The signing nonce yields r = 0 or s = 0: retry with a fresh nonce."


class InvalidSignatureEncodingError(ECLibValueError):
    "Signature scalar r or s not in 1..n-1."
