"""
Prime form: the canonical representative of a set's T/I set-class.

The set and its inversion are each put in normal form and transposed to
start on 0; the smaller of the two under the algorithm's ordering wins.
Forte compares the two lists element by element, Rahn compares their
bitmasks. The two disagree on six set-classes (5-20, 6-Z29, 6-31, 7-Z18,
7-20, 8-26).
"""
from .normal_form import Algorithm, _coerce_algorithm, bitmask, normal_form
from .operations import invert, transpose_to


def _zeroed_normal_form(pcs, algorithm: Algorithm) -> list[int]:
    return transpose_to(normal_form(pcs, algorithm), 0)


_PRIME_KEYS = {
    Algorithm.FORTE: list,
    Algorithm.RAHN: bitmask,
}


def prime_form(pcs, algorithm=Algorithm.FORTE) -> list[int]:
    """
    Return the prime form of `pcs`.

    Args:
        pcs: iterable of integers; reduced mod 12, duplicates ignored.
        algorithm: Algorithm.FORTE (default) or Algorithm.RAHN, or the
            strings "forte" / "rahn".

    Returns:
        list[int] starting on 0, or [] for the empty set.

    Raises:
        ValueError: unknown algorithm name.
    """
    algorithm = _coerce_algorithm(algorithm)
    pcs = list(pcs)
    if not pcs:
        return []
    original = _zeroed_normal_form(pcs, algorithm)
    inverted = _zeroed_normal_form(invert(pcs), algorithm)
    # min() keeps the original on a tie (inversionally symmetric sets).
    return min([original, inverted], key=_PRIME_KEYS[algorithm])


def forte_prime_form(pcs) -> list[int]:
    return prime_form(pcs, Algorithm.FORTE)


def rahn_prime_form(pcs) -> list[int]:
    return prime_form(pcs, Algorithm.RAHN)
