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

from pyxoshiro.misc import to_uint32, to_uint64


def mix32(u: int) -> int:
    """Scramble a 32-bit word using the «triple32» hash

    The constants come from Chris Wellons' hash-prospector
    (https://github.com/skeeto/hash-prospector). A single bit flip in the input
    changes on average half of the output bits. The function is a bijection
    over 32-bit words, and ``mix32(0) == 0``."""
    u = to_uint32(u)
    u = to_uint32((u ^ (u >> 17)) * 0xED5AD4BB)
    u = to_uint32((u ^ (u >> 11)) * 0xAC4C1B51)
    u = to_uint32((u ^ (u >> 15)) * 0x31848BAB)
    return u ^ (u >> 14)


def mix64(u: int) -> int:
    """Scramble a 64-bit word using Stafford's «Mix13» variant

    This is the finalizer used by SplitMix64. Like :func:`mix32`, it is a
    bijection and ``mix64(0) == 0``."""
    u = to_uint64(u)
    u = to_uint64((u ^ (u >> 30)) * 0xBF58476D1CE4E5B9)
    u = to_uint64((u ^ (u >> 27)) * 0x94D049BB133111EB)
    return u ^ (u >> 31)
