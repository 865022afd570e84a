#!/usr/bin/env python3

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
from typing import List
import sys

from pyxoshiro.entropy import EntropyError, SystemEntropySource
from pyxoshiro.generator import GENERATORS, Xoshiro, jump, split_streams
from pyxoshiro.images import write_bit_image
from pyxoshiro.matrices import invert_4x4
from pyxoshiro.stats import check_equidistribution, cross_correlation, serial_correlation
from pyxoshiro.widths import JumpKind

import click


@dataclass
class Parameters:
    width: int = 64
    seed: int = 0
    use_entropy: bool = False

    def build_generator(self) -> Xoshiro:
        """Create the generator described by these parameters"""
        generator_class = GENERATORS[self.width]
        if self.use_entropy:
            return generator_class(SystemEntropySource())

        return generator_class(self.seed)


def width_option(func):
    return click.option(
        "--width",
        type=click.Choice(["32", "64"]),
        default="64",
        help="Width of the output words: 32 (xoshiro128++) or 64 (xoshiro256++)",
    )(func)


def seed_option(func):
    return click.option(
        "--seed",
        type=int,
        default=0,
        help="Seed for the generator (non-negative number).",
    )(func)


def make_generator(width, seed, use_entropy=False) -> Xoshiro:
    params = Parameters(width=int(width), seed=seed, use_entropy=use_entropy)
    try:
        return params.build_generator()
    except EntropyError as e:
        click.echo(f"error, unable to initialize the generator: {e}", err=True)
        sys.exit(1)


def format_value(value: int, width: int, use_hex: bool) -> str:
    if use_hex:
        return f"0x{value:0{width // 4}x}"

    return str(value)


@click.group()
def cli():
    pass


@click.command("generate")
@width_option
@seed_option
@click.option("--count", type=int, default=10, help="Number of values to print")
@click.option("--jumps", type=int, default=0, help="Number of short jumps to apply before generating")
@click.option("--long-jumps", type=int, default=0, help="Number of long jumps to apply before generating")
@click.option("--entropy", is_flag=True, default=False,
              help="Initialize the generator from the system entropy pool instead of --seed")
@click.option("--hex", "use_hex", is_flag=True, default=False, help="Print values in hexadecimal")
def generate(width, seed, count, jumps, long_jumps, entropy, use_hex):
    """Print a sequence of random numbers, one per line"""
    generator = make_generator(width, seed, use_entropy=entropy)

    for _ in range(jumps):
        generator.jump()

    for _ in range(long_jumps):
        generator.long_jump()

    for _ in range(count):
        click.echo(format_value(generator.next(), generator.width.bits, use_hex))


@click.command("streams")
@width_option
@seed_option
@click.option("--workers", type=int, default=4, help="Number of independent streams")
@click.option("--count", type=int, default=4, help="Number of values to print for each stream")
@click.option("--long", "use_long", is_flag=True, default=False, help="Separate streams using long jumps")
@click.option("--hex", "use_hex", is_flag=True, default=False, help="Print values in hexadecimal")
def streams(width, seed, workers, count, use_long, use_hex):
    """Print the first values of the streams assigned to a set of workers"""
    if workers < 0:
        click.echo(f"error, the number of workers ({workers}) must be non-negative", err=True)
        sys.exit(1)

    generator = make_generator(width, seed)
    kind = JumpKind.LONG if use_long else JumpKind.SHORT
    for idx, stream in enumerate(split_streams(generator, workers, kind=kind)):
        values = [format_value(stream.next(), stream.width.bits, use_hex) for _ in range(count)]
        click.echo(f"worker {idx}: {' '.join(values)}")


@click.command("check")
@width_option
@seed_option
@click.option("--samples", type=int, default=10000, help="Number of samples used by each test")
@click.option("--bits", type=int, default=4, help="Number of low-order bits checked by the χ² test")
def check(width, seed, samples, bits):
    """Run a few statistical checks on a stream and on its jumped copy"""
    if samples < 3 or bits < 1:
        click.echo("error, --samples must be at least 3 and --bits at least 1", err=True)
        sys.exit(1)

    generator = make_generator(width, seed)
    jumped = jump(generator)
    # Correlations smaller than this are compatible with independent sequences
    threshold = 4.0 / samples ** 0.5
    failures = 0

    for name, stream in [("stream", generator), ("jumped stream", jumped)]:
        report = check_equidistribution(stream.copy(), num_of_samples=samples, bits=bits)
        outcome = "ok" if report.passed else "FAILED"
        click.echo(f"{name}: χ²={report.chi_square:.2f} (dof={report.dof}, "
                   f"critical value {report.critical_value:.2f}) {outcome}")
        failures += 0 if report.passed else 1

        corr = serial_correlation(stream.copy(), num_of_samples=samples)
        outcome = "ok" if abs(corr) < threshold else "FAILED"
        click.echo(f"{name}: serial correlation {corr:+.5f} {outcome}")
        failures += 0 if abs(corr) < threshold else 1

    corr = cross_correlation(generator.copy(), jumped.copy(), num_of_samples=samples)
    outcome = "ok" if abs(corr) < threshold else "FAILED"
    click.echo(f"cross correlation {corr:+.5f} {outcome}")
    failures += 0 if abs(corr) < threshold else 1

    if failures:
        click.echo(f"{failures} check(s) failed", err=True)
        sys.exit(1)


@click.command("bitmap")
@width_option
@seed_option
@click.option("--image-width", type=int, default=256, help="Width of the image to create")
@click.option("--image-height", type=int, default=256, help="Height of the image to create")
@click.option("--format", "image_format", type=str, default="PNG", help="Image format (any format known to Pillow)")
@click.argument("output_file_name", type=str)
def bitmap(width, seed, image_width, image_height, image_format, output_file_name):
    """Save the bits produced by a generator as a black-and-white image"""
    if image_width <= 0 or image_height <= 0:
        click.echo(f"error, invalid image size {image_width}×{image_height}", err=True)
        sys.exit(1)

    generator = make_generator(width, seed)
    with open(output_file_name, "wb") as outf:
        write_bit_image(generator, image_width, image_height, outf, format=image_format)

    click.echo(f"File {output_file_name} has been written to disk.")


def parse_matrix(elements: List[float]) -> List[List[float]]:
    """Arrange 16 numbers into a 4×4 matrix (row-major order)"""
    return [list(elements[4 * i:4 * i + 4]) for i in range(4)]


@click.command("invert")
@click.argument("elements", type=float, nargs=16)
def invert(elements):
    """Invert a 4×4 matrix whose elements are given in row-major order"""
    matrix = parse_matrix(elements)
    if not invert_4x4(matrix):
        click.echo("error, the matrix is singular", err=True)
        sys.exit(1)

    for row in matrix:
        click.echo(" ".join(f"{x: .6e}" for x in row))


cli.add_command(generate)
cli.add_command(streams)
cli.add_command(check)
cli.add_command(bitmap)
cli.add_command(invert)


def main():
    cli(auto_envvar_prefix="PYXOSHIRO")


if __name__ == "__main__":
    main()
