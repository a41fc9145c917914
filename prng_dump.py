#!/usr/bin/env python3
"""
Dump raw output of a registered generator for external statistical test suites.

Values are written as unsigned 64-bit integers in native byte order, with no
framing or headers. Diagnostics go to stderr so stdout stays binary.

Run examples:
  python prng_dump.py 'xoshiro256**' 1024 123 | dieharder -g 200 -d 201
  python prng_dump.py splitmix64 16 -o splitmix64.bin
"""

from __future__ import annotations

import argparse
import os
import sys
from array import array
from dataclasses import dataclass
from typing import BinaryIO, List, Optional

from common import Rng, make_rng, registry_names
from prng import U64_MASK

DEFAULT_SEED = 1234567890
DEFAULT_BLOCK_SIZE = 1024
MEBIBYTE = 1024 * 1024
VALUE_SIZE = 8


@dataclass(frozen=True)
class DumpConfig:
    rng: str
    nbytes: int
    seed: int
    block_size: int  # values per write
    output: Optional[str]  # None -> stdout


def write_random_bytes(rng: Rng, nbytes: int, out: BinaryIO, block_size: int) -> int:
    """Write exactly nbytes of generator output to out; returns bytes written."""
    written = 0
    block = array("Q", bytes(VALUE_SIZE * block_size))

    # block-wise generation keeps the number of write calls low
    while written < nbytes:
        for i in range(block_size):
            block[i] = rng.next_u64()
        data = block.tobytes()
        remaining = nbytes - written
        if remaining < len(data):
            data = data[:remaining]
        out.write(data)
        written += len(data)

    return written


def _parse_uint(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> DumpConfig:
    names = registry_names()
    ap = argparse.ArgumentParser(
        description="Write raw pseudorandom bytes for statistical test tools.",
        epilog="available rngs: " + ", ".join(names),
    )
    ap.add_argument("name", choices=names, help="generator to run")
    ap.add_argument("mebibytes", type=_parse_uint, help="amount of output in MiB")
    ap.add_argument("seed", type=_parse_uint, nargs="?", default=DEFAULT_SEED)
    ap.add_argument("-o", "--output", default=None, help="write to file instead of stdout")
    ap.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE)

    ns = ap.parse_args(argv)

    if ns.block_size <= 0:
        ap.error("--block-size must be > 0")

    return DumpConfig(
        rng=ns.name,
        nbytes=ns.mebibytes * MEBIBYTE,
        seed=ns.seed & U64_MASK,
        block_size=ns.block_size,
        output=ns.output,
    )


def _dump(cfg: DumpConfig, out: BinaryIO) -> int:
    rng = make_rng(cfg.rng, cfg.seed)
    return write_random_bytes(rng, cfg.nbytes, out, cfg.block_size)


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)

    print(f"rng: {cfg.rng}", file=sys.stderr)
    print(f"seed: {cfg.seed}", file=sys.stderr)
    print(f"bytes: {cfg.nbytes}", file=sys.stderr)

    if cfg.output is not None:
        with open(cfg.output, "wb") as fh:
            _dump(cfg, fh)
        return 0

    try:
        _dump(cfg, sys.stdout.buffer)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. the test suite has seen enough data).
        # Point stdout at devnull so the interpreter's final flush is silent.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
