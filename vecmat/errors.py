# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by vecmat.

All of them derive from ValueError, so existing ``except ValueError``
handlers keep working.
"""

import numpy as np


class LinearAlgebraError(ValueError):
    """Base class for every precondition failure in vecmat."""


class DimensionMismatchError(LinearAlgebraError):
    """Operand sizes are incompatible for the requested operation."""


class NotSquareError(LinearAlgebraError):
    """A square matrix was required."""


class SingularMatrixError(LinearAlgebraError, np.linalg.LinAlgError):
    """The matrix has a zero determinant and no inverse."""


class UnsupportedOperationError(LinearAlgebraError):
    """The operation is not implemented for this size."""
