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

from typing import List, Sequence

from pyxoshiro.entropy import EntropySource, RemixPolicy, from_entropy
from pyxoshiro.jumps import jump_state
from pyxoshiro.misc import to_uint
from pyxoshiro.seeding import expand_seed
from pyxoshiro.transition import step
from pyxoshiro.widths import JumpKind, WordWidth, WIDTH_32, WIDTH_64


class Xoshiro:
    """A xoshiro++ uniform pseudo-random bit generator

    This class implements the algorithm for a generic word width; the concrete
    generators are :class:`.Xoshiro128PlusPlus` (32-bit words) and
    :class:`.Xoshiro256PlusPlus` (64-bit words). Each instance owns a list of
    four words (`state`), which is updated by every call to :meth:`.Xoshiro.next`.

    Instances are not meant to be shared among threads or processes: use
    :meth:`.Xoshiro.jump`, :meth:`.Xoshiro.long_jump` or :func:`.split_streams` to
    give each worker its own non-overlapping stream."""

    width: WordWidth = WIDTH_64
    state: List[int]

    def __init__(self, seed=0, remix=RemixPolicy.NARROW):
        """Create a new generator

        If `seed` is an integer, the state is derived from it through the splitmix
        expansion (only the lowest W bits are used). If `seed` is an instance of
        :class:`.EntropySource`, the state is filled with values drawn from it and
        `remix` decides whether they pass through the avalanche function."""
        if isinstance(seed, EntropySource):
            self.state = from_entropy(seed, self.width, remix=remix)
        elif isinstance(seed, int):
            self.state = expand_seed(seed, self.width)
        else:
            raise TypeError(f"Invalid seed type {type(seed)} for {self.__class__.__name__}")

    @classmethod
    def from_state(cls, words: Sequence[int]):
        """Create a generator whose state is exactly `words` (four integers)"""
        if len(words) != 4:
            raise ValueError(f"a xoshiro state needs 4 words, got {len(words)}")

        result = cls.__new__(cls)
        result.state = [to_uint(w, cls.width.bits) for w in words]
        return result

    @classmethod
    def min(cls) -> int:
        return 0

    @classmethod
    def max(cls) -> int:
        return cls.width.mask

    def next(self) -> int:
        """Return a new random number and advance the internal state"""
        return step(self.state, self.width)

    def __call__(self) -> int:
        return self.next()

    def __iter__(self):
        while True:
            yield self.next()

    def random_float(self) -> float:
        """Return a new random number uniformly distributed over [0, 1)"""
        bits = min(self.width.bits, 53)
        return (self.next() >> (self.width.bits - bits)) / (1 << bits)

    def jump(self):
        """Advance the state as if :meth:`.Xoshiro.next` were called 2^(2W) times"""
        self.state = jump_state(self.state, self.width, JumpKind.SHORT)

    def long_jump(self):
        """Advance the state as if :meth:`.Xoshiro.next` were called 2^(3W) times"""
        self.state = jump_state(self.state, self.width, JumpKind.LONG)

    def copy(self):
        """Return an independent generator with the same state"""
        return self.__class__.from_state(self.state)

    def __eq__(self, other):
        if not isinstance(other, Xoshiro):
            return NotImplemented

        return self.width == other.width and self.state == other.state

    def __repr__(self):
        words = ", ".join(f"0x{w:0{self.width.bits // 4}x}" for w in self.state)
        return f"{self.__class__.__name__}(state=[{words}])"


class Xoshiro128PlusPlus(Xoshiro):
    """xoshiro128++: 32-bit outputs, 128 bits of state

    A short jump is equivalent to 2^64 calls, a long jump to 2^96 calls."""
    width = WIDTH_32


class Xoshiro256PlusPlus(Xoshiro):
    """xoshiro256++: 64-bit outputs, 256 bits of state

    A short jump is equivalent to 2^128 calls, a long jump to 2^192 calls."""
    width = WIDTH_64


GENERATORS = {
    32: Xoshiro128PlusPlus,
    64: Xoshiro256PlusPlus,
}


def jump(generator: Xoshiro) -> Xoshiro:
    """Return a copy of `generator` advanced by a short jump; `generator` is not modified"""
    result = generator.copy()
    result.jump()
    return result


def long_jump(generator: Xoshiro) -> Xoshiro:
    """Return a copy of `generator` advanced by a long jump; `generator` is not modified"""
    result = generator.copy()
    result.long_jump()
    return result


def split_streams(generator: Xoshiro, count: int, kind=JumpKind.SHORT) -> List[Xoshiro]:
    """Return `count` generators producing non-overlapping streams

    The first generator is a copy of `generator`, and each of the others is the
    previous one advanced by a jump of the specified kind. The argument itself is
    left untouched, so it can be used to derive further streams later."""
    if count < 0:
        raise ValueError(f"the number of streams must be non-negative, got {count}")

    if not isinstance(kind, JumpKind):
        raise TypeError(f"Invalid jump kind {kind}")

    streams = []
    current = generator.copy()
    for i in range(count):
        if i > 0:
            current = current.__class__.from_state(jump_state(current.state, current.width, kind))

        streams.append(current)

    return streams
