"""Helpers for the bitmap that records which tick arrays are initialized.

Each bit of a 1024-bit bitmap stands for one tick array. Bit 512 holds the
array that starts at tick 0.
"""

from clmmath.big_num import leading_zeros, trailing_zeros

TICK_ARRAY_SIZE = 60
TICK_ARRAY_BITMAP_SIZE = 512
BITMAP_BITS = 1024


def max_tick_in_tickarray_bitmap(tick_spacing):
    """Number of ticks covered by one half of the bitmap for ``tick_spacing``."""
    return tick_spacing * TICK_ARRAY_SIZE * TICK_ARRAY_BITMAP_SIZE


def get_bitmap_tick_boundary(tick_array_start_index, tick_spacing):
    """Return ``(lower, upper)`` of the bitmap range holding ``tick_array_start_index``.

    The lower bound is inclusive and the upper bound exclusive.
    """
    ticks_in_one_bitmap = max_tick_in_tickarray_bitmap(tick_spacing)
    magnitude = abs(tick_array_start_index)
    m = magnitude // ticks_in_one_bitmap
    if tick_array_start_index < 0 and magnitude % ticks_in_one_bitmap:
        m += 1
    min_value = ticks_in_one_bitmap * m
    if tick_array_start_index < 0:
        return -min_value, -min_value + ticks_in_one_bitmap
    return min_value, min_value + ticks_in_one_bitmap


def most_significant_bit(value):
    """Distance of the highest set bit from the top of a 1024-bit value.

    Returns the count of leading zero bits, or None when ``value`` is zero.
    """
    if value == 0:
        return None
    return leading_zeros(value, BITMAP_BITS)


def least_significant_bit(value):
    """Position of the lowest set bit of a 1024-bit value, or None when zero."""
    if value == 0:
        return None
    return trailing_zeros(value, BITMAP_BITS)