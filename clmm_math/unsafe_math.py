"""Ceiling division for unsigned integers."""


def div_rounding_up(x: int, y: int) -> int:
    """Return ceil(x / y) for non-negative integers; raises ZeroDivisionError when y is 0."""
    if x < 0 or y < 0:
        raise ValueError("operands must be non-negative")
    if y == 0:
        raise ZeroDivisionError("division by zero")
    quotient, remainder = divmod(x, y)
    return quotient + (1 if remainder > 0 else 0)