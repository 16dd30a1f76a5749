"""
Normal form of a pitch-class set.

The normal form is the rotation of the sorted set with the smallest span
(last element minus first, counted upward). When several rotations share
that span, a packing key decides between them:

    Forte  the rotation whose distances from its first element are
           lexicographically smallest (packed towards the left).
    Rahn   the rotation whose bitmask of distances from its first element
           is numerically smallest (packed away from the right).

Both keys share the same rotation and span scaffold; only the key differs.
"""
from enum import Enum

from .constants import MODULUS
from .operations import mod


class Algorithm(Enum):
    """Tie-break policy used for normal and prime forms."""

    FORTE = "forte"
    RAHN = "rahn"


def _coerce_algorithm(algorithm) -> Algorithm:
    """Accept an Algorithm member or its string value ('forte' / 'rahn')."""
    if isinstance(algorithm, Algorithm):
        return algorithm
    return Algorithm(str(algorithm).lower())


def distinct_sorted(pcs) -> list[int]:
    """Reduce mod 12, drop duplicates, sort ascending."""
    return sorted({mod(pc) for pc in pcs})


def rotations(ordered: list[int]) -> list[list[int]]:
    """
    All len(ordered) rotations of an ascending set.

    Rotation i starts at ordered[i]; wrapped elements get +12 so every
    rotation is strictly increasing. Rotations come out ordered by their
    first element.
    """
    n = len(ordered)
    doubled = ordered + [pc + MODULUS for pc in ordered]
    return [doubled[i:i + n] for i in range(n)]


def span(rotation: list[int]) -> int:
    return rotation[-1] - rotation[0]


def left_gaps(rotation: list[int]) -> tuple[int, ...]:
    """Distances from the first element to each later element."""
    first = rotation[0]
    return tuple(pc - first for pc in rotation[1:])


def bitmask(rotation: list[int]) -> int:
    """Integer with bit (pc - first) set for every element of the rotation."""
    first = rotation[0]
    mask = 0
    for pc in rotation:
        mask |= 1 << (pc - first)
    return mask


_PACKING_KEYS = {
    Algorithm.FORTE: left_gaps,
    Algorithm.RAHN: bitmask,
}


def smallest_span(candidates: list[list[int]]) -> list[list[int]]:
    """Keep only the rotations whose span equals the minimum span."""
    least = min(span(r) for r in candidates)
    return [r for r in candidates if span(r) == least]


def most_packed(candidates: list[list[int]], algorithm=Algorithm.FORTE) -> list[int]:
    """
    Pick the best-packed rotation under the algorithm's key.

    Ties on the key (transpositionally symmetric sets) go to the earliest
    rotation, i.e. the one starting on the lowest pitch class.
    """
    key = _PACKING_KEYS[_coerce_algorithm(algorithm)]
    return min(candidates, key=key)


def normal_form(pcs, algorithm=Algorithm.FORTE) -> list[int]:
    """
    Reorder a pitch-class set into normal form.

    Input may be unsorted, contain duplicates, or hold values outside
    0-11; it is reduced mod 12 and de-duplicated first. The empty set
    yields []. E.g. [1, 2, 11] → [11, 1, 2].
    """
    ordered = distinct_sorted(pcs)
    if not ordered:
        return []
    best = most_packed(smallest_span(rotations(ordered)), algorithm)
    return [mod(pc) for pc in best]
