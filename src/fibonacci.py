#!/usr/bin/env python3
"""Print the first few Fibonacci numbers using plain recursion."""

import logging

from printer import Printer

logger = logging.getLogger(__name__)

FIBONACCI_COUNT = 10


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number (no memoization)."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def main():
    """Print the sequence header followed by FIBONACCI_COUNT numbers."""
    logger.debug("Running Fibonacci demo for %d numbers", FIBONACCI_COUNT)
    printer = Printer(0)
    printer.print_string("Fibonacci sequence:")

    for i in range(FIBONACCI_COUNT):
        printer.print_int(fibonacci(i))


if __name__ == "__main__":
    main()
