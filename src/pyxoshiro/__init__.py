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

"""xoshiro++ pseudo-random bit generators with jump-ahead"""

from pyxoshiro.entropy import (
    EntropyError,
    EntropySource,
    RandomEntropySource,
    RemixPolicy,
    SequenceEntropySource,
    SystemEntropySource,
)
from pyxoshiro.generator import (
    Xoshiro,
    Xoshiro128PlusPlus,
    Xoshiro256PlusPlus,
    jump,
    long_jump,
    split_streams,
)
from pyxoshiro.matrices import invert_4x4
from pyxoshiro.pyrandom import XoshiroRandom
from pyxoshiro.widths import JumpKind, WordWidth, WIDTH_32, WIDTH_64
