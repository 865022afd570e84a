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

from typing import List

from pyxoshiro.misc import to_uint
from pyxoshiro.widths import WordWidth


def expand_seed(seed: int, width: WordWidth) -> List[int]:
    """Expand a scalar seed into the four words of a generator state

    This is the splitmix pattern: a running accumulator is advanced by a fixed
    odd stride (the «golden ratio» constant) and each value is passed through
    the avalanche function of the width. Seeds with very few bits set still
    produce well-diffused states. Only the lowest `width.bits` bits of `seed`
    are used."""
    acc = to_uint(seed, width.bits)
    state = []
    for _ in range(4):
        acc = to_uint(acc + width.golden, width.bits)
        state.append(width.mix(acc))

    return state
