"""Bounded integer distance arithmetic."""

INFINITY = 2**63 - 1
"""Sentinel distance for unreachable pairs (largest signed 64-bit integer)."""

MIN_WEIGHT = -(2**63)


def saturating_add(a: int, b: int) -> int:
    """Add two distances, clamping at ``INFINITY``.

    If either operand is ``INFINITY`` or the sum would reach it, the result is
    ``INFINITY``. Sums below the signed 64-bit range clamp at ``MIN_WEIGHT``.

    Example:
        >>> saturating_add(1, 2)
        3
        >>> saturating_add(INFINITY, 1) == INFINITY
        True
        >>> saturating_add(INFINITY - 1, 5) == INFINITY
        True

    """
    if a == INFINITY or b == INFINITY:
        return INFINITY
    total = a + b
    if total >= INFINITY:
        return INFINITY
    return max(total, MIN_WEIGHT)


def is_finite(distance: int) -> bool:
    """Return whether ``distance`` is a real distance rather than the sentinel."""
    return distance != INFINITY
