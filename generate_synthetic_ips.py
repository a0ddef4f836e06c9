#!/usr/bin/env python3
"""
Synthetic dataset generator for distinct line counting benchmarks.

Generates a newline-delimited file of IPv4 addresses drawn from a fixed pool
of distinct addresses, so the expected distinct count is known in advance.
Every address in the pool appears at least once.
"""

import argparse
import ipaddress
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

# Padding styles mixed in so trimming is exercised.
PADDINGS = ["", " ", "\t", "  "]


def generate_address_pool(num_unique: int, rng: random.Random) -> list[str]:
    """Draw `num_unique` distinct random IPv4 addresses."""
    pool: set[int] = set()
    while len(pool) < num_unique:
        pool.add(rng.getrandbits(32))
    return [str(ipaddress.IPv4Address(value)) for value in sorted(pool)]


def generate_synthetic_dataset(
    output_path: str,
    num_unique: int,
    total_lines: int,
    pad: bool,
    crlf: bool,
    seed: int,
) -> int:
    """
    Generate a dataset with exactly `num_unique` distinct addresses.

    Streams output line-by-line after the pool is built.

    Args:
        output_path: Path to output file.
        num_unique: Number of distinct addresses.
        total_lines: Total number of lines (>= num_unique).
        pad: Surround some lines with spaces or tabs.
        crlf: Use CRLF line endings.
        seed: Random seed for reproducibility.

    Returns:
        Total number of lines written.
    """
    rng = random.Random(seed)
    pool = generate_address_pool(num_unique, rng)
    newline = "\r\n" if crlf else "\n"
    written = 0

    def render(address: str) -> str:
        if not pad:
            return address + newline
        return rng.choice(PADDINGS) + address + rng.choice(PADDINGS) + newline

    with open(output_path, "w", encoding="ascii", newline="", buffering=BUFFER_SIZE) as f:
        # Each address once, then random repeats.
        for address in pool:
            f.write(render(address))
            written += 1

        while written < total_lines:
            f.write(render(rng.choice(pool)))
            written += 1

            # Progress indicator every million lines
            if written % 1_000_000 == 0:
                print(f"  Generated {written:,}/{total_lines:,} lines...", file=sys.stderr)

    return written


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic IP address dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10M lines, 1M distinct addresses
  python generate_synthetic_ips.py --out data/ips.txt --unique 1000000 --lines 10000000

  # Padded lines with Windows line endings
  python generate_synthetic_ips.py --out data/ips_crlf.txt --unique 1000 --lines 50000 --pad --crlf
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--unique",
        type=int,
        default=1_000_000,
        help="Number of distinct addresses (default: 1000000)",
    )
    parser.add_argument(
        "--lines",
        type=int,
        default=10_000_000,
        help="Total number of lines (default: 10000000)",
    )
    parser.add_argument("--pad", action="store_true", help="Add surrounding whitespace")
    parser.add_argument("--crlf", action="store_true", help="Use CRLF line endings")
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    # Validate
    if args.unique < 1:
        parser.error("--unique must be at least 1")
    if args.unique > 2**32:
        parser.error("--unique cannot exceed the IPv4 address space")
    if args.lines < args.unique:
        parser.error("--lines must be at least --unique")

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Distinct addresses: {args.unique:,}", file=sys.stderr)
    print(f"Total lines: {args.lines:,}", file=sys.stderr)

    total = generate_synthetic_dataset(
        output_path=args.out,
        num_unique=args.unique,
        total_lines=args.lines,
        pad=args.pad,
        crlf=args.crlf,
        seed=args.seed,
    )

    print(f"Done! Wrote {total:,} lines to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
