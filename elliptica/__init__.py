#!/usr/bin/env python3

# Copyright (C) The elliptica developers
#
# This file is part of elliptica. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elliptica including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the elliptica package."

name = "elliptica"
__version__ = "2026.10.1"
__author__ = "The elliptica developers"
__author_email__ = "devs@elliptica.dev"
__copyright__ = "Copyright (C) 2026 The elliptica developers"
__license__ = "MIT License"
