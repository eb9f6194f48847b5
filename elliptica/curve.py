#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and scalar multiplication entry points.

Named curves are loaded from the package data:

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* Federal Information Processing Standards Publication 186-4
  (NIST) curves
"""

import json
import logging
from dataclasses import dataclass, field
from math import isqrt
from os import path
from typing import Dict, Optional, Sequence, Union

from dataclasses_json import DataClassJsonMixin, config

from elliptica.alias import Integer
from elliptica.curve_group import CurveGroup, mult_aff, mult_mont_ladder
from elliptica.curve_group import double_mult as _double_mult
from elliptica.exceptions import EllipticaValueError
from elliptica.point import Point
from elliptica.utils import int_from_integer, int_str

logger = logging.getLogger(__name__)


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Point, Sequence[Integer]],
        n: Integer,
        h: Optional[int] = None,
        weakness_check: bool = True,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if not isinstance(G, Point):
            if len(G) != 2:
                raise EllipticaValueError("Generator must a be a sequence[int, int]")
            G = Point(int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(G):
            raise EllipticaValueError("Generator is not on the curve")
        self.G = G

        n = int_from_integer(n)

        # Security level is expressed in bits, where n-bit security
        # means that the attacker would have to perform 2^n operations
        # to break it. Security bits are half the key size for asymmetric
        # elliptic curve cryptography, i.e. half of the number of bits
        # required to express the group order n or, holding Hasse theorem,
        # to express the field prime p
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8

        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise EllipticaValueError(f"n is not prime: {int_str(n)}")

        # Hasse theorem: |#E - (p + 1)| <= 2 sqrt(p)
        delta = isqrt(4 * self.p)
        exp_h = (self.p + 1 + delta) // n
        if h is None:
            h = exp_h
        if exp_h == 0 or (h == 1 and n < self.p + 1 - delta):
            raise EllipticaValueError(f"n not in p+1-delta..p+1+delta: {int_str(n)}")

        # 7. Check that G ≠ INF, nG = INF
        if self.G.inf:
            raise EllipticaValueError("INF point cannot be a generator")
        # n is public: no need for the ladder here
        if not mult_aff(n, self.G, self).inf:
            raise EllipticaValueError(f"n is not the group order: {int_str(n)}")

        # 6. Check cofactor
        if h != exp_h:
            raise EllipticaValueError(f"invalid cofactor: {h}, expected {exp_h}")
        self.h = h

        if weakness_check:
            # 8. Check that n ≠ p
            if n == self.p:
                raise UserWarning(f"n=p weak curve: {int_str(n)}")
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

    def __str__(self) -> str:
        result = super().__str__()
        result += f"\n x_G = {int_str(self.G.x)}"
        result += f"\n y_G = {int_str(self.G.y)}"
        result += f"\n n   = {int_str(self.n)}"
        result += f"\n h   = {self.h}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        result += f", ({self.G.x}, {self.G.y}), {self.n}, {self.h})"
        return result


def _int_from_json(value: Union[str, int]) -> int:
    # decimal or 0x-prefixed hex-string
    return value if isinstance(value, int) else int(value, 0)


def _int_config():  # type: ignore
    return config(encoder=str, decoder=_int_from_json)


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    "Domain parameters of a named curve, as stored in the package data."

    p: int = field(metadata=_int_config())
    a: int = field(metadata=_int_config())
    b: int = field(metadata=_int_config())
    x_G: int = field(metadata=_int_config())
    y_G: int = field(metadata=_int_config())
    n: int = field(metadata=_int_config())
    h: int = 1

    def curve(self) -> Curve:
        return Curve(self.p, self.a, self.b, (self.x_G, self.y_G), self.n, self.h)


datadir = path.join(path.dirname(__file__), "data")


def _load_curves(filename: str) -> Dict[str, Curve]:
    with open(filename, "r", encoding="ascii") as file_:
        data = json.load(file_)
    curves = {name: CurveParams.from_dict(d).curve() for name, d in data.items()}
    logger.debug("loaded %d curves from %s", len(curves), filename)
    return curves


CURVES = _load_curves(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    Return m*Q, Q being the generator of the curve if not provided.
    Q must be on the curve and m must be non-negative;
    m is not reduced mod n, so that mult(ec.n, Q, ec) is INF
    only if the order of Q divides n.

    The Montgomery ladder is used, always running over at least
    the bit length of n: the sequence of group operations
    does not depend on the value of a scalar m < 2^nlen.
    """
    if Q is None:
        Q = ec.G
    ec.require_on_curve(Q)
    m = int_from_integer(m)
    if m < 0:
        raise EllipticaValueError(f"negative m: {int_str(m)}")
    return mult_mont_ladder(m, Q, ec, ec.nlen)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: Curve = secp256k1
) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    The coefficients are not secret: the Shamir-Strauss algorithm is used.
    """
    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u)
    v = int_from_integer(v)
    return _double_mult(u, H, v, Q, ec)
