#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Brute-force exploration of low-cardinality curve groups.

Every point is enumerated: fine for toy curves used in
teaching and exhaustive testing, hopeless for real ones.
"""

from typing import List

from elliptica.curve_group import CurveGroup
from elliptica.exceptions import EllipticaValueError
from elliptica.number_theory import legendre_symbol, mod_sqrt
from elliptica.point import INF, Point

# largest field prime that can be walked through point by point
MAX_P = 10000


def _require_small_field(ec: CurveGroup, what: str) -> None:
    if ec.p > MAX_P:
        raise EllipticaValueError(f"p is too big to count all {what}: {ec.p}")


def find_all_points(ec: CurveGroup) -> List[Point]:
    """Return all the group points, INF first.

    For each x in Fp, Euler's criterion tells whether
    x^3 + a*x + b is a square: if so, both its roots are points
    (a single one when the root is zero).
    """
    _require_small_field(ec, "group points")

    points: List[Point] = [INF]
    for x in range(ec.p):
        y2 = ((x * x + ec.a) * x + ec.b) % ec.p
        if y2 == 0:
            points.append(Point(x, 0))
        elif legendre_symbol(y2, ec.p) == 1:
            y = mod_sqrt(y2, ec.p)
            points.extend((Point(x, y), Point(x, ec.p - y)))
    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Return the points of the subgroup generated by G.

    The list is G, 2G, 3G, ... and it ends with INF,
    so that its length is the order of G.
    """
    _require_small_field(ec, "subgroup points")
    ec.require_on_curve(G)

    points = [G]
    while not points[-1].inf:
        points.append(ec.add_aff(points[-1], G))
    return points


def point_order(ec: CurveGroup, Q: Point) -> int:
    "Return the smallest positive m such that m*Q is INF."
    return len(find_subgroup_points(ec, Q))
