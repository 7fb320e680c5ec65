#!/usr/bin/env python3
"""
RTP Sequence Number Arithmetic

RTP sequence numbers are 16-bit counters that wrap from 65535 back to 0.
Ordering and distance are therefore defined on a circle of 65536 values,
never by raw magnitude.

Everything here is built on one primitive, get_sequence_number_delta():

    delta(a, b) = ((b - a + 32768) mod 65536) - 32768      in [-32768, 32767]

Limitations:
- Two values exactly 32768 apart are inherently ambiguous. The formula
  yields -32768 there, so neither value is "older" than the other.
- Inputs are reduced mod 65536 by the formula, but rolled_over_to() also
  compares raw values; callers holding wider counters must reduce first.

All functions are pure and thread-safe.
"""

from typing import Union

import numpy as np

SEQUENCE_NUMBER_MODULUS = 1 << 16
SEQUENCE_NUMBER_HALF_RANGE = 1 << 15

ArrayLike = Union[np.ndarray, list, tuple]


def get_sequence_number_delta(a: int, b: int) -> int:
    """
    Signed minimal step from a to b around the sequence number circle.

    Positive when b is ahead of a, negative when b is behind a.

    Examples:
        >>> get_sequence_number_delta(10, 15)
        5
        >>> get_sequence_number_delta(65535, 0)
        1
        >>> get_sequence_number_delta(0, 65535)
        -1
    """
    a, b = int(a), int(b)
    return ((b - a + SEQUENCE_NUMBER_HALF_RANGE) % SEQUENCE_NUMBER_MODULUS) - SEQUENCE_NUMBER_HALF_RANGE


def apply_sequence_number_delta(seq: int, delta: int) -> int:
    """Sequence number reached by stepping delta from seq (mod 65536)."""
    return (int(seq) + int(delta)) % SEQUENCE_NUMBER_MODULUS


def is_older_than(a: int, b: int) -> bool:
    """True if packet a was sent before packet b (b lies ahead of a)."""
    return get_sequence_number_delta(a, b) > 0


def is_newer_than(a: int, b: int) -> bool:
    """True if packet a was sent after packet b."""
    return is_older_than(b, a)


def rolled_over_to(a: int, b: int) -> bool:
    """
    True if getting from a to b involves the counter wrapping past 65535.

    Both conditions are needed: a must be older than b on the circle, and
    yet b's raw value is smaller than a's. That only happens across a wrap,
    e.g. a=65530, b=3.
    """
    return is_older_than(a, b) and int(b) < int(a)


def is_next_after(a: int, b: int) -> bool:
    """True if a is the immediate successor of b, i.e. a == (b + 1) mod 65536."""
    return get_sequence_number_delta(a, b) == -1


def num_packets_between(older: int, newer: int) -> int:
    """
    Number of sequence numbers strictly between older and newer.

    Precondition: older must be older than newer. This is not checked and
    the result is meaningless (negative or off by the circle) otherwise.

    Example:
        >>> num_packets_between(10, 15)   # 11, 12, 13, 14
        4
    """
    return -get_sequence_number_delta(newer, older) - 1


def sequence_number_deltas(seqs: ArrayLike) -> np.ndarray:
    """
    Signed delta between each pair of consecutive sequence numbers.

    Args:
        seqs: Sequence numbers in arrival order

    Returns:
        int32 array of length len(seqs) - 1 (empty for fewer than 2 inputs)
    """
    arr = np.asarray(seqs, dtype=np.int64)
    if arr.size < 2:
        return np.empty(0, dtype=np.int32)
    deltas = np.mod(np.diff(arr) + SEQUENCE_NUMBER_HALF_RANGE, SEQUENCE_NUMBER_MODULUS) - SEQUENCE_NUMBER_HALF_RANGE
    return deltas.astype(np.int32)


def unwrap_sequence_numbers(seqs: ArrayLike) -> np.ndarray:
    """
    Extend 16-bit sequence numbers to a monotonic 64-bit space.

    The first value is kept as-is; each following value is the previous
    extended value plus the signed delta, so a wrap 65535 -> 0 continues
    as 65535 -> 65536. Reordered packets step backwards as expected.

    Args:
        seqs: Sequence numbers in arrival order

    Returns:
        int64 array of the same length
    """
    arr = np.asarray(seqs, dtype=np.int64)
    if arr.size == 0:
        return np.empty(0, dtype=np.int64)
    extended = np.empty(arr.size, dtype=np.int64)
    extended[0] = arr[0]
    extended[1:] = arr[0] + np.cumsum(sequence_number_deltas(arr).astype(np.int64))
    return extended
