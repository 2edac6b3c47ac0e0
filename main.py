"""Random number demo driver.

Seeds one generator from the wall clock, prints a block of unranged draws,
then a block of draws mapped into a fixed example range.
"""
from __future__ import annotations

from typing import Callable

from seeded_random import RAND_MAX, SeededRandom

REPETITIONS = 10

# example range for the second block
DEMO_LOW = 200
DEMO_HIGH = 300


def run_demo(
    rng: SeededRandom,
    repetitions: int = REPETITIONS,
    low: int = DEMO_LOW,
    high: int = DEMO_HIGH,
    write: Callable[[str], object] = print,
) -> None:
    write(f"Displaying {repetitions} random numbers between 0 and {RAND_MAX}")
    for _ in range(repetitions):
        write(str(rng.rand()))

    write(f"Displaying {repetitions} random numbers between {low} and {high}")
    for _ in range(repetitions):
        write(str(rng.rand_range(low, high)))


def main() -> None:
    run_demo(SeededRandom.from_time())


if __name__ == "__main__":
    main()
