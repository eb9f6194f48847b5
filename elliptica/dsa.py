#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA) verification.

Implementation according to SEC 1 v.2 section 4.1.4:

http://www.secg.org/sec1-v2.pdf

Both signature components r and s are scalars in [1, n-1].
Given the message challenge e, the verification computes
w = s^-1 mod n, u = e*w mod n, v = r*w mod n, K = u*G + v*Q,
and accepts the signature if and only if K is not INF
and r = x_K mod n.

Signature generation is not provided.
"""

import hashlib
from dataclasses import InitVar, dataclass

from elliptica.alias import HashF, Octets, String
from elliptica.curve import Curve, secp256k1
from elliptica.curve_group import double_mult
from elliptica.exceptions import (
    EllipticaRuntimeError,
    EllipticaTypeError,
    EllipticaValueError,
)
from elliptica.keys import assert_valid_pub_key
from elliptica.number_theory import mod_inv
from elliptica.point import Point
from elliptica.utils import bytes_from_octets, bytes_from_string, int_from_bits, int_str


@dataclass(frozen=True)
class Sig:
    "ECDSA signature: the (r, s) pair of scalars."

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
        for name, value in (("r", self.r), ("s", self.s)):
            if not isinstance(value, int):
                raise EllipticaTypeError(f"scalar {name} is not an int: {value!r}")

        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < self.ec.n:
            raise EllipticaValueError(f"scalar r not in 1..n-1: {int_str(self.r)}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < self.ec.n:
            raise EllipticaValueError(f"scalar s not in 1..n-1: {int_str(self.s)}")


def reduce_to_hlen(msg: String, hf: HashF = hashlib.sha256) -> bytes:
    "Return the hf digest of the message."
    h = hf()
    h.update(bytes_from_string(msg))
    return h.digest()


def challenge_(msg_hash: Octets, ec: Curve = secp256k1, hf: HashF = hashlib.sha256) -> int:
    "Return the challenge scalar for the message digest."
    # the message msg_hash: a hf_len array
    hf_len = hf().digest_size
    msg_hash = bytes_from_octets(msg_hash, hf_len)

    # leftmost ec.nlen bits %= ec.n
    return int_from_bits(msg_hash, ec.nlen) % ec.n


def _assert_as_valid_(c: int, Q: Point, r: int, s: int, ec: Curve) -> None:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # Steps numbering follows SEC 1 v.2 section 4.1.4

    w = mod_inv(s, ec.n)
    u = c * w % ec.n
    v = r * w % ec.n  # 4
    # Let K = u*G + v*Q.
    K = double_mult(u, ec.G, v, Q, ec)  # 5

    # Fail if infinite(K).
    if K.inf:  # 5
        raise EllipticaRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K.x % ec.n:  # 6, 7, 8
        raise EllipticaRuntimeError("signature verification failed")


def assert_as_valid_(
    msg_hash: Octets, pub_key: Point, sig: Sig, hf: HashF = hashlib.sha256
) -> None:
    # It raises Errors, while verify should always return True or False
    sig.assert_valid()
    assert_valid_pub_key(pub_key, sig.ec)
    c = challenge_(msg_hash, sig.ec, hf)  # 2, 3
    _assert_as_valid_(c, pub_key, sig.r, sig.s, sig.ec)


def assert_as_valid(
    msg: String, pub_key: Point, sig: Sig, hf: HashF = hashlib.sha256
) -> None:
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg, hf)
    assert_as_valid_(msg_hash, pub_key, sig, hf)


def verify_(
    msg_hash: Octets, pub_key: Point, sig: Sig, hf: HashF = hashlib.sha256
) -> bool:
    "ECDSA signature verification of a message digest."
    # all kind of Exceptions are caught because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, pub_key, sig, hf)
    except Exception:  # pylint: disable=broad-except
        return False
    return True


def verify(msg: String, pub_key: Point, sig: Sig, hf: HashF = hashlib.sha256) -> bool:
    "ECDSA signature verification (SEC 1 v.2 section 4.1.4)."
    msg_hash = reduce_to_hlen(msg, hf)
    return verify_(msg_hash, pub_key, sig, hf)


def verify_signature(
    r: int,
    s: int,
    msg: String,
    pub_key: Point,
    ec: Curve = secp256k1,
    hf: HashF = hashlib.sha256,
) -> bool:
    """ECDSA verification of the (r, s) signature of msg by pub_key.

    Out of range r or s make the verification fail.
    """
    sig = Sig(r, s, ec, check_validity=False)
    return verify(msg, pub_key, sig, hf)
