#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

A Point is either a finite (x, y) pair of field elements
or the point at infinity INF, the identity of the group law.
Points are immutable values: curve operations never change them,
they return new ones.

The point at infinity is flagged explicitly:
its coordinates are meaningless and conventionally set to zero,
so that it can never be confused with a finite point,
not even with (0, 0) or with a point of order two (y = 0).
"""

from dataclasses import dataclass

from elliptica.exceptions import EllipticaTypeError, EllipticaValueError
from elliptica.utils import int_str


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0
    inf: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.x, int) or not isinstance(self.y, int):
            err_msg = f"non-integer coordinates: {self.x!r}, {self.y!r}"
            raise EllipticaTypeError(err_msg)
        if self.inf:
            if self.x != 0 or self.y != 0:
                raise EllipticaValueError("INF must have null coordinates")
            return
        if self.x < 0:
            raise EllipticaValueError(f"negative x-coordinate: {int_str(self.x)}")
        if self.y < 0:
            raise EllipticaValueError(f"negative y-coordinate: {int_str(self.y)}")

    @classmethod
    def infinity(cls) -> "Point":
        "Return the point at infinity."
        return INF

    def __str__(self) -> str:
        return "O" if self.inf else f"({self.x}, {self.y})"


# the identity element of the group law
INF = Point(inf=True)
