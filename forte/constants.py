# ── Pitch-class arithmetic ────────────────────────────────────────────────────

MODULUS = 12

# Largest source set `subsets` will expand (2**20 subsets).
MAX_SUBSET_SOURCE = 20

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Display spelling for a pitch class.
_PC_TO_NOTE: list[str] = [
    "C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"
]

# ── Catalog digit alphabet ────────────────────────────────────────────────────

# One character per pitch class in forte.sets: 0-9 literally, T = 10, E = 11.
_DIGIT_TO_PC: dict[str, int] = {
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5,
    "6": 6, "7": 7, "8": 8, "9": 9, "T": 10, "E": 11,
}
_PC_TO_DIGIT: list[str] = [
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "T", "E"
]

# Interval classes 1..6, indexed by the vector position + 1.
INTERVAL_CLASSES = (1, 2, 3, 4, 5, 6)
