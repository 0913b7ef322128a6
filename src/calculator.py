"""Integer calculator used by the arithmetic demo."""

import logging

logger = logging.getLogger(__name__)


class DivisionByZero(ZeroDivisionError):
    """Raised when dividing or taking a remainder with a zero divisor."""


def _truncated_quotient(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero("Division by zero is not allowed")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient


class Calculator:
    """A stateless calculator over integers."""

    def add(self, a: int, b: int) -> int:
        """Add two numbers."""
        result = a + b
        logger.debug("add(%d, %d) = %d", a, b, result)
        return result

    def sub(self, a: int, b: int) -> int:
        """Subtract b from a."""
        result = a - b
        logger.debug("sub(%d, %d) = %d", a, b, result)
        return result

    def mul(self, a: int, b: int) -> int:
        """Multiply two numbers."""
        result = a * b
        logger.debug("mul(%d, %d) = %d", a, b, result)
        return result

    def div(self, a: int, b: int) -> int:
        """Divide a by b, truncating toward zero."""
        result = _truncated_quotient(a, b)
        logger.debug("div(%d, %d) = %d", a, b, result)
        return result

    def rem(self, a: int, b: int) -> int:
        """Remainder of a / b; the sign follows the dividend."""
        # a == div(a, b) * b + rem(a, b)
        result = a - _truncated_quotient(a, b) * b
        logger.debug("rem(%d, %d) = %d", a, b, result)
        return result
