#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "02 79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
#
# use elliptica.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be verified
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]

# Source of uniform random bits: randbits(k) returns an int in [0, 2^k)
# e.g. secrets.randbits
RandBitsF = Callable[[int], int]
