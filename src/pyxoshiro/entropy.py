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

import os
from enum import Enum
from typing import List, Sequence

from pyxoshiro.misc import to_uint
from pyxoshiro.widths import WordWidth


class EntropyError(Exception):
    """The entropy source could not provide the requested values"""


class RemixPolicy(Enum):
    """When to pass entropy words through the avalanche function before storing them

    -   `NEVER`: raw bits are stored as they are
    -   `NARROW`: only words assembled by concatenating several narrow draws are remixed
    -   `ALWAYS`: every word is remixed
    """
    NEVER = 1
    NARROW = 2
    ALWAYS = 3


class EntropySource:
    """An abstract source of raw random integers

    Each call to :meth:`.EntropySource.draw` returns an integer in the range
    [0, 2^N - 1], where N is the value of the `native_bits` attribute. Concrete
    subclasses are :class:`.SystemEntropySource`, :class:`.RandomEntropySource`
    and :class:`.SequenceEntropySource`."""

    native_bits: int = 32

    def draw(self) -> int:
        """Return a new raw value from the source

        This is an abstract method. You should redefine it in derived classes."""
        raise NotImplementedError("Unable to call EntropySource.draw, it is an abstract method")


class SystemEntropySource(EntropySource):
    """Draw bytes from the operating system's randomness pool (``os.urandom``)"""

    def __init__(self, native_bits=32):
        if native_bits <= 0 or native_bits % 8 != 0:
            raise ValueError(f"native_bits must be a positive multiple of 8, got {native_bits}")

        self.native_bits = native_bits

    def draw(self) -> int:
        try:
            buf = os.urandom(self.native_bits // 8)
        except OSError as e:
            raise EntropyError(f"the system entropy pool is unavailable: {e}") from e

        return int.from_bytes(buf, "little")


class RandomEntropySource(EntropySource):
    """Adapt any ``random.Random`` instance (e.g., ``random.SystemRandom()``) into an entropy source"""

    def __init__(self, rng, native_bits=32):
        self.rng = rng
        self.native_bits = native_bits

    def draw(self) -> int:
        return self.rng.getrandbits(self.native_bits)


class SequenceEntropySource(EntropySource):
    """Replay a fixed list of values

    This is useful to reproduce a state that was initialized from entropy, and
    when writing tests. Once the values are exhausted, any further draw raises
    :class:`.EntropyError`."""

    def __init__(self, values: Sequence[int], native_bits=32):
        self.values = list(values)
        self.native_bits = native_bits
        self.position = 0

    def draw(self) -> int:
        if self.position >= len(self.values):
            raise EntropyError(f"entropy sequence exhausted after {len(self.values)} values")

        value = self.values[self.position]
        self.position += 1
        return to_uint(value, self.native_bits)


def _draws_per_word(native_bits: int, bits: int) -> int:
    return -(-bits // native_bits)


def _draw(source: EntropySource) -> int:
    try:
        return source.draw()
    except EntropyError:
        raise
    except Exception as e:
        raise EntropyError(f"the entropy source failed: {e}") from e


def from_entropy(source: EntropySource, width: WordWidth, remix=RemixPolicy.NARROW) -> List[int]:
    """Build the four words of a generator state from an entropy source

    If the source produces at least `width.bits` bits per draw, each word takes
    one draw, masked to the word width. Otherwise each word is the concatenation
    (least significant part first) of as many draws as needed to fill it. The
    `remix` policy decides whether words go through the avalanche function of
    the width before being stored.

    Any failure of the source is reported as :class:`.EntropyError` (the original
    exception is chained); the state is either fully built or not built at all."""
    native_bits = source.native_bits
    if native_bits <= 0:
        raise EntropyError(f"invalid native width {native_bits} for the entropy source")

    num_of_draws = _draws_per_word(native_bits, width.bits)
    narrow = num_of_draws > 1

    state = []
    for _ in range(4):
        word = 0
        for i in range(num_of_draws):
            word |= to_uint(_draw(source), native_bits) << (i * native_bits)

        word = to_uint(word, width.bits)
        if remix == RemixPolicy.ALWAYS or (remix == RemixPolicy.NARROW and narrow):
            word = width.mix(word)

        state.append(word)

    return state
