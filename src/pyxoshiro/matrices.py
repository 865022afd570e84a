# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

import math
import struct
from typing import List

# Machine epsilon of IEEE-754 single-precision numbers (FLT_EPSILON in C)
FLT_EPSILON = 2.0 ** -23


def _to_float32(x: float) -> float:
    """Round a Python float to the nearest single-precision value

    Values beyond the single-precision range become infinities with the same sign."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def invert_4x4(m: List[List[float]]) -> bool:
    """Invert a 4×4 matrix in place

    The matrix is a list of four rows, each a list of four numbers. If the
    magnitude of the determinant is smaller than the single-precision machine
    epsilon, the matrix is considered singular: the function returns False and
    `m` is left untouched. Otherwise the elements of `m` are replaced by those of
    the inverse, rounded to single precision, and the function returns True.

    The determinant is computed through the cofactors of the first row, and the
    2×2 minors are reused to build the inverse. Running sums of signed terms are
    subject to cancellation, so the accuracy depends on the conditioning of `m`."""

    m00, m01, m02, m03 = m[0]
    m10, m11, m12, m13 = m[1]
    m20, m21, m22, m23 = m[2]
    m30, m31, m32, m33 = m[3]

    # 2×2 minors of the last two rows
    d01 = m20 * m31 - m30 * m21
    d12 = m21 * m32 - m31 * m22
    d23 = m22 * m33 - m32 * m23
    d30 = m23 * m30 - m33 * m20
    d02 = m20 * m32 - m30 * m22
    d13 = m21 * m33 - m31 * m23

    c00 = +(m11 * d23 - m12 * d13 + m13 * d12)
    c01 = -(m12 * d30 + m13 * d02 + m10 * d23)
    c02 = +(m13 * d01 + m10 * d13 + m11 * d30)
    c03 = -(m10 * d12 - m11 * d02 + m12 * d01)

    det = m00 * c00 + m01 * c01 + m02 * c02 + m03 * c03
    if abs(det) < FLT_EPSILON:
        return False

    inv_det = 1.0 / det
    result = [[0.0] * 4 for _ in range(4)]

    result[0][0] = c00 * inv_det
    result[1][0] = c01 * inv_det
    result[2][0] = c02 * inv_det
    result[3][0] = c03 * inv_det

    result[0][1] = -(m01 * d23 - m02 * d13 + m03 * d12) * inv_det
    result[1][1] = +(m02 * d30 + m03 * d02 + m00 * d23) * inv_det
    result[2][1] = -(m03 * d01 + m00 * d13 + m01 * d30) * inv_det
    result[3][1] = +(m00 * d12 - m01 * d02 + m02 * d01) * inv_det

    # 2×2 minors of the first two rows, already divided by the determinant
    d01 = (m00 * m11 - m10 * m01) * inv_det
    d12 = (m01 * m12 - m11 * m02) * inv_det
    d23 = (m02 * m13 - m12 * m03) * inv_det
    d30 = (m03 * m10 - m13 * m00) * inv_det
    d02 = (m00 * m12 - m10 * m02) * inv_det
    d13 = (m01 * m13 - m11 * m03) * inv_det

    result[0][2] = +(m31 * d23 - m32 * d13 + m33 * d12)
    result[1][2] = -(m32 * d30 + m33 * d02 + m30 * d23)
    result[2][2] = +(m33 * d01 + m30 * d13 + m31 * d30)
    result[3][2] = -(m30 * d12 - m31 * d02 + m32 * d01)

    result[0][3] = -(m21 * d23 - m22 * d13 + m23 * d12)
    result[1][3] = +(m22 * d30 + m23 * d02 + m20 * d23)
    result[2][3] = -(m23 * d01 + m20 * d13 + m21 * d30)
    result[3][3] = +(m20 * d12 - m21 * d02 + m22 * d01)

    result = [[_to_float32(x) for x in row] for row in result]
    for i in range(4):
        m[i][:] = result[i]

    return True
