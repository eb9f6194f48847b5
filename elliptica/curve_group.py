#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication functions.

Note that CurveGroup does not have to be a cyclic group:
it has no distinguished generator.
For the cyclic subgroup of prime order generated by G,
see the elliptica.curve module.
"""

from math import ceil

from elliptica.alias import Integer
from elliptica.exceptions import EllipticaTypeError, EllipticaValueError
from elliptica.number_theory import mod_inv, mod_sqrt
from elliptica.point import INF, Point
from elliptica.utils import int_from_integer, int_str


def _require_point(Q: Point) -> None:
    if not isinstance(Q, Point):
        raise EllipticaTypeError(f"not a point: {Q!r}")


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise EllipticaValueError(f"p is not prime: {int_str(p)}")

        plen = p.bit_length()
        # byte-length
        self.p_size = ceil(plen / 8)
        # must be true to break simmetry using quadratic residue
        self.p_is_3_mod_4 = p % 4 == 3
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise EllipticaValueError(f"negative a: {a}")
        if p <= a:
            raise EllipticaValueError(f"p <= a: {int_str(p)} <= {int_str(a)}")
        if b < 0:
            raise EllipticaValueError(f"negative b: {b}")
        if p <= b:
            raise EllipticaValueError(f"p <= b: {int_str(p)} <= {int_str(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise EllipticaValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {int_str(self.p)}"
        result += f"\n a   = {int_str(self._a)}"
        result += f"\n b   = {int_str(self._b)}"
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.p}, {self._a}, {self._b})"

    # methods using p: they could become functions

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        _require_point(Q)
        if Q.inf:
            return INF
        return Point(Q.x, (self.p - Q.y) % self.p)

    # methods using _a, _b, p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point must be on the curve.
        """

        self.require_on_curve(Q)
        return self.double_aff(Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if Q.inf:
            return R
        if R.inf:
            return Q

        if R.x == Q.x:
            if R.y == Q.y:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R.y - Q.y) * mod_inv(R.x - Q.x, self.p)
        x = (lam * lam - Q.x - R.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q.inf:
            return INF

        # vertical tangent: Q has order two
        denominator = 2 * Q.y % self.p
        if denominator == 0:
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(denominator, self.p)
        x = (lam * lam - 2 * Q.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise EllipticaValueError(f"x-coordinate not in 0..p-1: {int_str(x)}")
        y2 = self._y2(x)
        try:
            return mod_sqrt(y2, self.p)
        except EllipticaValueError as e:
            raise EllipticaValueError(f"invalid x-coordinate: {int_str(x)}") from e

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise EllipticaValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        _require_point(Q)
        if Q.inf:
            return True
        if not (Q.x < self.p and Q.y < self.p):
            return False
        return self._y2(Q.x) == (Q.y * Q.y % self.p)

    #  y-simmetry tiebreaker criteria: even/odd or low/high

    def y_even(self, x: int) -> int:
        "Return the even affine y-coordinate associated to x."
        root = self.y(x)
        return self.p - root if root % 2 else root

    def y_low(self, x: int) -> int:
        "Return the low affine y-coordinate associated to x."
        root = self.y(x)
        return root if root <= self.p // 2 else self.p - root


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time:
    the number of additions leaks the Hamming weight of m.
    Use it for public scalars only.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise EllipticaValueError(f"negative m: {int_str(m)}")

    R = INF  # initialize as infinity point
    while m > 0:  # use binary representation of m
        if m & 1:  # if least significant bit is 1
            R = ec.add_aff(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        Q = ec.double_aff(Q)  # double Q for next step
    return R


def mult_mont_ladder(m: int, Q: Point, ec: CurveGroup, nbits: int = 0) -> Point:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    This implementation uses
    'Montgomery ladder' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.

    Exactly one addition and one doubling are performed for each of
    max(nbits, m.bit_length()) bits, whatever their value,
    and the working points are selected by indexing instead of if:
    passing the bit length of the group order as nbits
    makes the sequence of group operations independent of m.
    Python integers are not constant-time anyway.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise EllipticaValueError(f"negative m: {int_str(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INF, Q]
    for i in reversed(range(max(nbits, m.bit_length()))):
        bit = (m >> i) & 1
        R[1 - bit] = ec.add_aff(R[0], R[1])
        R[bit] = ec.double_aff(R[bit])
    return R[0]


def double_mult(u: int, H: Point, v: int, Q: Point, ec: CurveGroup) -> Point:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients,
    affine coordinates.

    Strauss algorithm consists of a single 'double & add' loop
    for the parallel calculation of u*H and v*Q, efficiently
    using a single 'doubling' for both scalar multiplications.
    The Shamir trick adds the precomputation of H+Q,
    which is to be added in the loop when the binary digits
    of u and v are both equal to 1.

    The input points are assumed to be on curve.
    """

    if u < 0:
        raise EllipticaValueError(f"negative first coefficient: {int_str(u)}")
    if v < 0:
        raise EllipticaValueError(f"negative second coefficient: {int_str(v)}")

    # at each step one of the following points will be added
    T = [INF, H, Q, ec.add_aff(H, Q)]
    R = INF
    for i in reversed(range(max(u.bit_length(), v.bit_length()))):
        # the doubling part of 'double & add'
        R = ec.double_aff(R)
        # which point to add depends on the binary digits for this step
        R = ec.add_aff(R, T[((u >> i) & 1) + 2 * ((v >> i) & 1)])
    return R
