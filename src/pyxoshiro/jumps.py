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

from pyxoshiro.transition import step
from pyxoshiro.widths import JumpKind, WordWidth


def jump_state(state: List[int], width: WordWidth, kind: JumpKind = JumpKind.SHORT) -> List[int]:
    """Return the state reached after 2^(2W) (short jump) or 2^(3W) (long jump) steps

    The jump table holds the coefficients of a polynomial over GF(2) which, evaluated
    on the transition matrix, gives the matrix power we want. Instead of building the
    matrix, we walk the orbit of `state` one step per coefficient and accumulate (XOR)
    the states that correspond to set bits. This takes 4×W steps.

    The argument `state` is not modified."""
    live = list(state)
    acc = [0, 0, 0, 0]

    for word in width.table(kind):
        for b in range(width.bits):
            if word & (1 << b):
                for i in range(4):
                    acc[i] ^= live[i]

            step(live, width)

    return acc
