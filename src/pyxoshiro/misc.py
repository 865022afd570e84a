# -*- encoding: utf-8 -*-

# Python integers have no fixed width, so every operation that in C would
# silently wrap around must be clipped explicitly. The helpers below are
# used wherever a result has to fit in a 32-bit or 64-bit word.


def to_uint(x: int, bits: int) -> int:
    """Clip an integer so that it occupies `bits` bits"""
    return x & ((1 << bits) - 1)


def to_uint64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return x & 0xFFFFFFFFFFFFFFFF


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits"""
    return x & 0xFFFFFFFF


def rotl(x: int, k: int, bits: int) -> int:
    """Rotate the `bits`-wide word `x` to the left by `k` positions"""
    x = to_uint(x, bits)
    k %= bits
    if k == 0:
        return x

    return to_uint((x << k) | (x >> (bits - k)), bits)


def popcount(x: int) -> int:
    """Return the number of bits set in a non-negative integer"""
    return bin(x).count("1")


def are_close(num1, num2, epsilon=1e-6):
    """Return True if the two numbers differ by less than `epsilon`"""
    return abs(num1 - num2) < epsilon
