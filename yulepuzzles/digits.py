"""Decimal digit helpers shared by several puzzles."""


def number_of_digits(number: int) -> int:
    """Return how many decimal digits a positive number has (0 for numbers <= 0)."""
    digits = 0
    while number > 0:
        digits += 1
        number //= 10
    return digits


def split_number(number: int, digits: int) -> tuple[int, int]:
    """Split a number into the part above and the part below its lowest ``digits`` digits."""
    left, right = divmod(number, 10**digits)
    return left, right