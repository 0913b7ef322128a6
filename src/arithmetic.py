#!/usr/bin/env python3
"""Print a few calculator results and boolean comparisons."""

import logging

from calculator import Calculator
from printer import Printer

logger = logging.getLogger(__name__)

STRING_CONSTANT = "foo bar"
PRINTER_SEED = 42


def main():
    """Route calculator results and comparisons through a Printer."""
    logger.debug("Running arithmetic demo with printer seed %d", PRINTER_SEED)
    printer = Printer(PRINTER_SEED)
    calc = Calculator()

    printer.print_string(STRING_CONSTANT)
    printer.print_int(calc.add(21, 33))
    printer.print_int(calc.sub(44, 33))
    printer.print_int(calc.mul(3, 3))
    printer.print_int(calc.div(9, 3))
    printer.print_int(calc.rem(8, 3))
    printer.print_bool_pair(True, True)
    printer.print_bool_pair(False, True)


if __name__ == "__main__":
    main()
