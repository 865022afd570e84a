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


def write_bit_image(generator, width, height, stream, format="PNG"):
    """Save `width × height` successive bits produced by `generator` as a black-and-white image

    Bits are taken from each output word starting from the least significant one,
    and they fill the image row by row. Any visible pattern in the image is a sign
    of a poor generator."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}×{height}")

    from PIL import Image
    img = Image.new("1", (width, height))

    bits = generator.width.bits
    word = 0
    available = 0
    for y in range(height):
        for x in range(width):
            if available == 0:
                word = generator.next()
                available = bits

            img.putpixel(xy=(x, y), value=255 if word & 1 else 0)
            word >>= 1
            available -= 1

    img.save(stream, format=format)
