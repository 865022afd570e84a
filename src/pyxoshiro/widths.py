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
from enum import Enum
from typing import Callable, Tuple

from pyxoshiro.mixers import mix32, mix64


class JumpKind(Enum):
    """Kinds of jump-ahead

    A `SHORT` jump is equivalent to 2^(2W) calls to the generator, a `LONG` jump
    to 2^(3W) calls, where W is the number of bits in a state word."""
    SHORT = 1
    LONG = 2


@dataclass(frozen=True)
class WordWidth:
    """The set of constants that turn the generic xoshiro++ algorithm into a concrete generator

    The fields are the following:

    -   `bits`: number of bits W in each of the four state words
    -   `rot_result`, `shift`, `rot_state`: the rotation/shift amounts used by the
        state transition and by the output scrambler
    -   `golden`: the odd increment used by the splitmix seed expansion (⌊2^W / φ⌋)
    -   `mix`: the avalanche function used by the seed expansion
    -   `jump_table`, `long_jump_table`: the coefficients of the jump polynomials

    The rotation amounts and the jump tables are derived from the same transition
    matrix: never change one without recomputing the other."""

    bits: int
    rot_result: int
    shift: int
    rot_state: int
    golden: int
    mix: Callable[[int], int]
    jump_table: Tuple[int, int, int, int]
    long_jump_table: Tuple[int, int, int, int]

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def table(self, kind: JumpKind) -> Tuple[int, int, int, int]:
        """Return the jump table for the specified kind of jump"""
        if kind == JumpKind.SHORT:
            return self.jump_table
        elif kind == JumpKind.LONG:
            return self.long_jump_table
        else:
            raise TypeError(f"Invalid jump kind {kind}")


# xoshiro128++: 128 bits of state
WIDTH_32 = WordWidth(
    bits=32,
    rot_result=7,
    shift=9,
    rot_state=11,
    golden=0x9E3779B9,
    mix=mix32,
    jump_table=(0x8764000B, 0xF542D2D3, 0x6FA035C3, 0x77F2DB5B),
    long_jump_table=(0xB523952E, 0x0B6F099F, 0xCCF5A0EF, 0x1C580662),
)

# xoshiro256++: 256 bits of state
WIDTH_64 = WordWidth(
    bits=64,
    rot_result=23,
    shift=17,
    rot_state=45,
    golden=0x9E3779B97F4A7C15,
    mix=mix64,
    jump_table=(0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C),
    long_jump_table=(0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635),
)

WIDTHS = {
    32: WIDTH_32,
    64: WIDTH_64,
}
