#!/usr/bin/env python3
"""Counting with for loops and while loops."""

import logging

logger = logging.getLogger(__name__)


def for_loop_example():
    """Count up from 1 to 5, then down from 10 to 8."""
    for i in range(1, 6):
        print(f"For loop iteration: {i}")

    for j in range(10, 7, -1):
        print(f"Countdown: {j}")


def while_loop_example():
    """Count up to 3, then step a value down by 2 while it exceeds 15."""
    counter = 1
    while counter <= 3:
        print(f"While loop iteration: {counter}")
        counter += 1

    value = 20
    while value > 15:
        print(f"Value is: {value}")
        value -= 2


def main():
    """Run both loop examples with a header line before each."""
    logger.debug("Running loops demo")
    print("For loop example:")
    for_loop_example()

    print("While loop example:")
    while_loop_example()


if __name__ == "__main__":
    main()
