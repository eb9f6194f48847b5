#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private/public key-pair generation and public key validation.

The source of randomness is always an explicit argument:
any callable returning uniform random bits, like secrets.randbits
(the default), can be used; non-cryptographic generators
(e.g. random.Random().getrandbits) must be used for testing only.
"""

import logging
import secrets
from typing import Tuple

from elliptica.alias import Integer, RandBitsF
from elliptica.curve import Curve, mult, secp256k1
from elliptica.exceptions import EllipticaTypeError, EllipticaValueError
from elliptica.point import Point
from elliptica.utils import int_from_integer, int_str

logger = logging.getLogger(__name__)


def gen_prv_key(ec: Curve = secp256k1, randbits: RandBitsF = secrets.randbits) -> int:
    """Return a private key uniformly distributed in [1, n-1].

    Candidates of ec.nlen random bits are drawn until one falls
    in the valid range (rejection sampling):
    no modulo reduction, hence no bias.
    """
    rejected = 0
    q = randbits(ec.nlen)
    while not 0 < q < ec.n:
        rejected += 1
        q = randbits(ec.nlen)
    if rejected:
        logger.debug("rejected %d private key candidates", rejected)
    return q


def pub_key_from_prv_key(prv_key: Integer, ec: Curve = secp256k1) -> Point:
    "Return the public key Q = q*G for the private key q in [1, n-1]."
    q = int_from_integer(prv_key)
    if not 0 < q < ec.n:
        raise EllipticaValueError(f"private key not in 1..n-1: {int_str(q)}")
    return mult(q, ec.G, ec)


def gen_keys(
    ec: Curve = secp256k1, randbits: RandBitsF = secrets.randbits
) -> Tuple[int, Point]:
    "Return a random private/public (int, Point) key-pair."
    q = gen_prv_key(ec, randbits)
    return q, mult(q, ec.G, ec)


def assert_valid_pub_key(Q: Point, ec: Curve = secp256k1) -> None:
    """Raise an Error if Q is not a valid public key.

    A valid public key is a point on the curve, other than INF,
    belonging to the subgroup of order n (i.e. n*Q = INF).
    """
    if not isinstance(Q, Point):
        raise EllipticaTypeError(f"not a point: {Q!r}")
    if Q.inf:
        raise EllipticaValueError("INF is not a valid public key")
    ec.require_on_curve(Q)
    if not mult(ec.n, Q, ec).inf:
        raise EllipticaValueError("public key not in the subgroup of order n")


def is_valid_pub_key(Q: Point, ec: Curve = secp256k1) -> bool:
    "Return True if Q is a valid public key for the curve."
    try:
        assert_valid_pub_key(Q, ec)
    except (EllipticaTypeError, EllipticaValueError):
        return False
    return True
