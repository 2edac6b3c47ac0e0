"""Seeded random number generator utility.

This module exposes a small generator handle that is seeded once (from the
wall clock in production, or from an explicit seed in tests) and can map its
unbounded output into an inclusive range with modulo arithmetic. It also
offers a simple CLI for printing generated numbers either line-by-line or as
JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from random import Random
from typing import Iterable, List

logger = logging.getLogger(__name__)

RAND_MAX = 2**31 - 1
SEED_MASK = 0xFFFFFFFF


class InvalidRangeError(ArithmeticError, ValueError):
    """Raised when a range's upper bound is below its lower bound."""

    def __init__(self, low: int, high: int) -> None:
        super().__init__(f"invalid range [{low}, {high}]: high must not be less than low")
        self.low = low
        self.high = high


def time_seed(now: float | None = None) -> int:
    """Derive a seed from wall-clock seconds.

    The timestamp is truncated to whole seconds and only its low 32 bits are
    kept, so two calls within the same second produce the same seed.
    """

    if now is None:
        now = time.time()
    return int(now) & SEED_MASK


def check_range(low: int, high: int) -> int:
    """Return the size of ``[low, high]``, raising if the range is inverted."""
    size = high - low + 1
    if size <= 0:
        raise InvalidRangeError(low, high)
    return size


class SeededRandom:
    """Explicitly owned PRNG. No global random state touched."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = Random(seed)
        logger.debug("Seeded generator with %d", seed)

    @classmethod
    def from_time(cls) -> "SeededRandom":
        return cls(time_seed())

    @property
    def seed(self) -> int:
        return self._seed

    def rand(self) -> int:
        """Return one unranged draw in ``[0, RAND_MAX]``."""
        return int(self._rng.random() * (RAND_MAX + 1))

    def rand_range(self, low: int, high: int) -> int:
        """Return a draw in the inclusive range ``[low, high]``.

        Args:
            low: Inclusive lower bound.
            high: Inclusive upper bound. Must not be less than ``low``.

        Raises:
            InvalidRangeError: If ``high`` is less than ``low``. No draw is
                consumed in that case.
        """

        size = check_range(low, high)
        # modulo mapping; slight bias when size does not divide RAND_MAX + 1
        return (self.rand() % size) + low


def generate_random_numbers(
    seed: int,
    count: int,
    lower: int = 0,
    upper: int = 100,
) -> List[int]:
    """Generate a deterministic list of pseudo-random integers.

    Args:
        seed: Seed to initialize the RNG.
        count: How many numbers to generate. Must be non-negative.
        lower: Inclusive lower bound of the range.
        upper: Inclusive upper bound of the range.

    Returns:
        A list of integers mapped into the inclusive range
        ``[lower, upper]``.

    Raises:
        ValueError: If ``count`` is negative.
        InvalidRangeError: If ``lower`` is greater than ``upper``.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    check_range(lower, upper)

    rng = SeededRandom(seed)
    return [rng.rand_range(lower, upper) for _ in range(count)]


def _format_numbers(seed: int, numbers: Iterable[int], as_json: bool) -> str:
    if as_json:
        return json.dumps({"seed": seed, "numbers": list(numbers)})
    return "\n".join(str(n) for n in numbers)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the RNG (default: derived from the current time)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="How many numbers to generate (default: 10)",
    )
    parser.add_argument(
        "--lower",
        type=int,
        default=0,
        help="Inclusive lower bound of the generated numbers (default: 0)",
    )
    parser.add_argument(
        "--upper",
        type=int,
        default=100,
        help="Inclusive upper bound of the generated numbers (default: 100)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated numbers as a JSON object",
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be non-negative")
    if args.upper < args.lower:
        parser.error("--upper must not be less than --lower")

    seed = args.seed if args.seed is not None else time_seed()
    numbers = generate_random_numbers(seed, args.count, args.lower, args.upper)
    if not numbers and not args.json:
        return
    print(_format_numbers(seed, numbers, args.json))


if __name__ == "__main__":
    main()
