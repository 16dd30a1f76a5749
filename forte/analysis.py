"""
Set-class descriptors derived from prime form: interval-class vector and
subset enumeration.
"""
import numpy as np

from .constants import INTERVAL_CLASSES, MAX_SUBSET_SOURCE, MODULUS
from .operations import mod
from .prime_form import prime_form


def interval_class(interval: int) -> int:
    """Fold an interval (mod 12) onto 0..6, e.g. 7 → 5, -1 → 1."""
    interval = mod(interval)
    return MODULUS - interval if interval > MODULUS // 2 else interval


def subsets(pcs, size: int | None = None) -> list[list[int]]:
    """
    Every subset of `pcs`, including [] and the full set.

    Values are treated as plain distinct integers (duplicates dropped, no
    mod-12 reduction). Each subset is ascending; the list is ordered by
    subset size, then lexicographically. A set of n values yields 2**n
    subsets, so sources above MAX_SUBSET_SOURCE values are refused.

    Args:
        pcs: iterable of integers.
        size: if given, only subsets of exactly this cardinality.

    Raises:
        ValueError: more than MAX_SUBSET_SOURCE distinct values.
    """
    ordered = sorted(set(pcs))
    n = len(ordered)
    if n > MAX_SUBSET_SOURCE:
        raise ValueError(
            f"subsets of {n} values would produce 2**{n} lists; "
            f"limit is {MAX_SUBSET_SOURCE} values"
        )

    result = []
    for mask in range(1 << n):
        if size is not None and bin(mask).count("1") != size:
            continue
        result.append([ordered[i] for i in range(n) if mask >> i & 1])
    result.sort(key=lambda s: (len(s), s))
    return result


def interval_class_vector(pcs) -> list[int]:
    """
    Count the interval classes 1..6 among all pairs of the set's prime form.

    The Forte prime form is used, so duplicates and transposition/inversion
    of the input make no difference. The counts sum to n*(n-1)/2.

    Returns:
        list of 6 ints, index 0 holding interval class 1.
    """
    vector = np.zeros(len(INTERVAL_CLASSES), dtype=int)
    for low, high in subsets(prime_form(pcs), size=2):
        vector[interval_class(high - low) - 1] += 1
    return [int(count) for count in vector]
