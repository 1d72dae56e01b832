"""
Integer sequences built on unfold.

Python integers never overflow, so each sequence works on a fixed-width
signed integer range instead (64 bits unless `bits` says otherwise). A step
whose arithmetic would leave that range ends the sequence; it never wraps
and never raises.
"""

from numbers import Integral

from concat import concat
from unfold import Unfold, fold
from variants import TERMINATED, Active, Done

DEFAULT_INT_BITS = 64


def int_bounds(bits=DEFAULT_INT_BITS):
    """(min, max) of a signed two's complement integer with `bits` bits"""
    if bits < 1:
        raise ValueError("integer width must be positive, got {}".format(bits))
    half = 1 << (bits - 1)
    return -half, half - 1


def overflowing_add(a, b, bits=DEFAULT_INT_BITS):
    """Add a and b within `bits` bits. Returns (sum, overflowed)."""
    low, high = int_bounds(bits)
    total = a + b
    return total, not low <= total <= high


def next_digit(state):
    if state.is_done():
        return TERMINATED
    n = state.value
    remaining = n // 10
    return (Active(remaining) if remaining else Done()), n % 10


def digits_of(n):
    """Lazy base-10 digits of n, least significant first. The sign is ignored."""
    if not isinstance(n, Integral) or isinstance(n, bool):
        raise TypeError("digits_of expects an integer, got {}".format(type(n).__name__))
    return Unfold(Active(abs(int(n))), next_digit)


def cross_sum(n):
    return fold(lambda total, digit: total + digit, 0, digits_of(n))


def fibonacci(bits=DEFAULT_INT_BITS):
    """Fibonacci numbers 0, 1, 1, 2, ... as long as the step after them fits.

    The state is (current, next). Each pull emits `current` and advances to
    (next, current + next); the pull whose sum would overflow ends the
    sequence instead. This stops two numbers short of the largest
    representable Fibonacci number.
    """
    int_bounds(bits)

    def next_fibonacci_number(state):
        n, m = state
        total, overflow = overflowing_add(n, m, bits)
        if overflow:
            return TERMINATED
        return (m, total), n

    return Unfold((0, 1), next_fibonacci_number)


def fibonacci_tail(bits=DEFAULT_INT_BITS):
    """Fibonacci numbers from the third on (1, 2, 3, 5, ...), up to the last one that fits."""
    int_bounds(bits)

    def next_fibonacci_sum(state):
        n, m = state
        total, overflow = overflowing_add(n, m, bits)
        if overflow:
            return TERMINATED
        return (m, total), total

    return Unfold((0, 1), next_fibonacci_sum)


def concat_fibonacci(bits=DEFAULT_INT_BITS):
    """All Fibonacci numbers that fit in `bits` bits: the seeds, then the sums."""
    low, high = int_bounds(bits)
    seeds = [seed for seed in (0, 1) if low <= seed <= high]
    return concat(seeds, fibonacci_tail(bits))
