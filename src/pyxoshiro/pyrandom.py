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

import random
from hashlib import sha512

from pyxoshiro.entropy import SystemEntropySource
from pyxoshiro.generator import Xoshiro256PlusPlus, GENERATORS
from pyxoshiro.jumps import jump_state
from pyxoshiro.widths import JumpKind

_RECIP_BPF = 2.0 ** -53


class XoshiroRandom(random.Random):
    """A drop-in replacement for ``random.Random`` driven by a xoshiro++ generator

    All the distributions provided by the standard library (``randint``,
    ``choice``, ``shuffle``, ``gauss``, …) are available and draw their bits from
    the underlying generator, which can be accessed through the `generator`
    property."""

    VERSION = 1

    def __init__(self, x=None, generator_class=Xoshiro256PlusPlus):
        self._generator_class = generator_class
        super().__init__(x)

    def seed(self, a=None, version=2):
        """Initialize the internal state

        If `a` is None, the state is taken from the operating system's entropy pool.
        Integers are expanded through the splitmix seeding, while strings and byte
        sequences are first hashed with SHA-512."""
        if a is None:
            self._generator = self._generator_class(SystemEntropySource())
        else:
            if isinstance(a, str):
                a = a.encode("utf-8")

            if isinstance(a, (bytes, bytearray)):
                a = int.from_bytes(sha512(a).digest(), "big")

            self._generator = self._generator_class(a)

        self.gauss_next = None

    @property
    def generator(self):
        return self._generator

    def getrandbits(self, k: int) -> int:
        """Return an integer with `k` random bits"""
        if k < 0:
            raise ValueError("number of bits must be non-negative")

        bits = self._generator.width.bits
        result = 0
        filled = 0
        while filled < k:
            result |= self._generator.next() << filled
            filled += bits

        return result & ((1 << k) - 1)

    def random(self) -> float:
        """Return a random floating-point number in the range [0, 1)"""
        return self.getrandbits(53) * _RECIP_BPF

    def getstate(self):
        return self.VERSION, self._generator.width.bits, tuple(self._generator.state), self.gauss_next

    def setstate(self, state):
        version, bits, words, self.gauss_next = state
        if version != self.VERSION:
            raise ValueError(f"state with version {version} passed to setstate() of version {self.VERSION}")

        self._generator_class = GENERATORS[bits]
        self._generator = self._generator_class.from_state(words)

    def jumped(self, kind=JumpKind.SHORT):
        """Return a new `XoshiroRandom` object whose stream starts after a jump

        This object is not modified."""
        width = self._generator.width
        words = jump_state(self._generator.state, width, kind)

        result = XoshiroRandom(0, generator_class=self._generator_class)
        result.setstate((self.VERSION, width.bits, tuple(words), None))
        return result
