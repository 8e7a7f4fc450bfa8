#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Print a filled square matrix, its determinant and its square.

    python -m vecmat --size 3 --fill increment
"""

import argparse
import logging

from .initializers import INITIALIZERS, get_initializer
from .matrix import Matrix

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="vecmat",
        description="Show a matrix, its determinant and the matrix squared.",
    )
    parser.add_argument("--size", type=int, default=3, help="Rows and columns")
    parser.add_argument(
        "--fill",
        choices=sorted(INITIALIZERS),
        default="increment",
        help="Initializer used for every cell",
    )
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    A = Matrix.from_function(args.size, args.size, get_initializer(args.fill))
    logger.debug(f"built {args.size}x{args.size} matrix with {args.fill}")

    print(A)
    print(A.determinant())
    print(A * A)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
