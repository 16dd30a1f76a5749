"""
Transposition and inversion of pitch-class sets.

Every operation returns a new list; element order is preserved and each
element is reduced into [0, 12).
"""
from .constants import MODULUS


def mod(value: int, modulus: int = MODULUS) -> int:
    """Modulo with a non-negative result, e.g. mod(-3) == 9."""
    return ((value % modulus) + modulus) % modulus


def transpose(pcs, delta: int) -> list[int]:
    """Shift every pitch class by `delta` semitones (mod 12)."""
    return [mod(pc + delta) for pc in pcs]


def transpose_to(pcs, target: int) -> list[int]:
    """
    Transpose the set so that its first element lands on `target` (mod 12).

    Raises:
        ValueError: the set is empty, so there is no first element to move.
    """
    pcs = list(pcs)
    if not pcs:
        raise ValueError("transpose_to requires a non-empty pitch-class set")
    return transpose(pcs, target - pcs[0])


def invert(pcs, axis: int = 0) -> list[int]:
    """
    Reflect every pitch class about `axis`: e → (axis - e) mod 12.

    With the default axis of 0 this is the plain inversion 12 - e.
    Note that I0 is not the identity.
    """
    return [mod(axis - pc) for pc in pcs]


def inversion_axis(pair: tuple[int, int]) -> int:
    """Axis n of the inversion In that maps a onto b (and b onto a)."""
    a, b = pair
    return mod(a + b)


def invert_by_pair(pcs, pair: tuple[int, int]) -> list[int]:
    """Invert about the axis implied by mapping pair[0] onto pair[1]."""
    return invert(pcs, inversion_axis(pair))


# ── Fixed-level shorthands: t0 … t11, i0 … i11 ────────────────────────────────

def _make_transposition(level):
    def tn(pcs):
        return transpose(pcs, level)
    tn.__name__ = f"t{level}"
    tn.__doc__ = f"Transpose a pitch-class set by {level}; same as transpose(pcs, {level})."
    return tn


def _make_inversion(level):
    def in_(pcs):
        return invert(pcs, level)
    in_.__name__ = f"i{level}"
    in_.__doc__ = f"Invert a pitch-class set about {level}; same as invert(pcs, {level})."
    return in_


for _level in range(MODULUS):
    globals()[f"t{_level}"] = _make_transposition(_level)
    globals()[f"i{_level}"] = _make_inversion(_level)
del _level

TRANSPOSITIONS = tuple(globals()[f"t{n}"] for n in range(MODULUS))
INVERSIONS = tuple(globals()[f"i{n}"] for n in range(MODULUS))
