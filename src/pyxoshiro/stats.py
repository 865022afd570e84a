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

from dataclasses import dataclass
from math import sqrt
from typing import List

# Upper 0.1% quantile of the standard normal distribution
Z_001 = 3.090232


def chi_square_low_bits(generator, num_of_samples=10000, bits=4) -> float:
    """Return the χ² statistic of the lowest `bits` bits of `num_of_samples` outputs

    Each output is binned according to its lowest bits, and the counts are
    compared with the uniform distribution. The number of degrees of freedom is
    ``2**bits - 1``. The generator is advanced by `num_of_samples` steps."""
    num_of_bins = 1 << bits
    counts = [0] * num_of_bins
    for _ in range(num_of_samples):
        counts[generator.next() & (num_of_bins - 1)] += 1

    expected = num_of_samples / num_of_bins
    return sum((c - expected) ** 2 for c in counts) / expected


def chi_square_critical_value(dof: int, z=Z_001) -> float:
    """Return the approximate upper quantile of the χ² distribution

    We use the Wilson–Hilferty approximation, which is accurate enough for the
    number of degrees of freedom used in these tests (dof ≥ 3). The default
    value for `z` gives the 0.1% quantile."""
    k = 2.0 / (9.0 * dof)
    return dof * (1.0 - k + z * sqrt(k)) ** 3


def _scaled_samples(generator, num_of_samples) -> List[float]:
    scale = float(generator.max())
    return [generator.next() / scale for _ in range(num_of_samples)]


def _pearson(xs: List[float], ys: List[float]) -> float:
    n = len(xs)
    if n < 2:
        raise ValueError(f"correlation needs at least two pairs of values, got {n}")

    mean_x = sum(xs) / n
    mean_y = sum(ys) / n

    cov = 0.0
    var_x = 0.0
    var_y = 0.0
    for x, y in zip(xs, ys):
        dx, dy = x - mean_x, y - mean_y
        cov += dx * dy
        var_x += dx * dx
        var_y += dy * dy

    if var_x * var_y == 0.0:
        raise ValueError("correlation is undefined for constant sequences")

    return cov / sqrt(var_x * var_y)


def serial_correlation(generator, num_of_samples=10000) -> float:
    """Return the correlation coefficient between consecutive outputs (lag 1)

    At least three samples are needed. A `ValueError` is raised if the
    sequence is constant (e.g., a generator stuck in the all-zero state)."""
    values = _scaled_samples(generator, num_of_samples)
    return _pearson(values[:-1], values[1:])


def cross_correlation(generator1, generator2, num_of_samples=10000) -> float:
    """Return the correlation coefficient between the outputs of two generators"""
    return _pearson(_scaled_samples(generator1, num_of_samples),
                    _scaled_samples(generator2, num_of_samples))


@dataclass
class EquidistributionReport:
    """The result of :func:`.check_equidistribution`"""
    chi_square: float
    critical_value: float
    dof: int

    @property
    def passed(self) -> bool:
        return self.chi_square < self.critical_value


def check_equidistribution(generator, num_of_samples=10000, bits=4) -> EquidistributionReport:
    """Run a χ² test on the lowest `bits` bits of the outputs of `generator`"""
    dof = (1 << bits) - 1
    return EquidistributionReport(
        chi_square=chi_square_low_bits(generator, num_of_samples=num_of_samples, bits=bits),
        critical_value=chi_square_critical_value(dof),
        dof=dof,
    )
