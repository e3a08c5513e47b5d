"""
Common utility functions for the pyimdct project.
"""


def is_power_of_two(n: int) -> bool:
    """
    Checks whether n is a positive integral power of two.
    bool is rejected even though it is an int subclass.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        return False
    return n > 0 and (n & (n - 1)) == 0


def ilog2(n: int) -> int:
    """
    Integer base-2 logarithm of a power of two.

    Args:
        n: A positive power of two.

    Returns:
        k such that 2**k == n.
    """
    if not is_power_of_two(n):
        raise ValueError(f"{n} is not a power of two")
    return n.bit_length() - 1


def alternating_signs(n: int, dtype=float) -> list:
    """
    Returns [+1, -1, +1, ...] of length n.
    """
    return [dtype(1) if i % 2 == 0 else dtype(-1) for i in range(n)]
