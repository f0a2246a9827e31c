"""Small integer helpers shared by the map and pathfinding code."""


def order_value(a: int, b: int) -> tuple[int, int]:
    """Return the two values as ``(smaller, larger)``."""
    return (b, a) if a > b else (a, b)


def clamp(lo: int, hi: int, value: int) -> int:
    """Limit ``value`` to the closed interval ``[lo, hi]``.

    The lower bound is checked first, so when ``lo > hi`` values below
    ``lo`` still come back as ``lo``.
    """
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value