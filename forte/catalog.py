"""
Forte's catalog of set-classes: name → prime form, and reverse lookup.

The catalog lives in data/forte.sets, one set-class per line:

    NAME:DIGITS        e.g.  6-Z44:012569   8-26:0124579T   0-1:

DIGITS holds one character per pitch class (0-9, T = 10, E = 11). The "Z"
in names such as 6-Z44 is part of the name. The file is parsed once; a
malformed line aborts loading with CatalogError.
"""
import logging
import os
import threading
from types import MappingProxyType

from .parser import parse_digits
from .prime_form import prime_form

logger = logging.getLogger(__name__)

# Packaged catalog (forte/data/forte.sets)
_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
FORTE_SETS_PATH = os.path.join(_PACKAGE_DIR, "data", "forte.sets")


class CatalogError(ValueError):
    """The catalog file is missing or corrupt."""


def parse_catalog_line(line: str) -> tuple[str, tuple[int, ...]]:
    """Split one `NAME:DIGITS` line into (name, prime form)."""
    parts = line.strip().split(":")
    if len(parts) != 2 or not parts[0]:
        raise CatalogError(f"malformed catalog line {line.strip()!r}")
    name, digits = parts
    try:
        return name, tuple(parse_digits(digits))
    except ValueError as e:
        raise CatalogError(str(e)) from e


def parse_catalog(lines) -> dict[str, tuple[int, ...]]:
    """Parse catalog lines (blank lines skipped) into an ordered dict."""
    entries: dict[str, tuple[int, ...]] = {}
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            name, pcs = parse_catalog_line(line)
        except CatalogError as e:
            raise CatalogError(f"line {lineno}: {e}") from e
        if name in entries:
            raise CatalogError(f"line {lineno}: duplicate set-class name {name!r}")
        entries[name] = pcs
    return entries


class Catalog:
    """
    Read-only set-class table.

    Usage:
        catalog = load_catalog()
        catalog.sets()["6-31"]          # (0, 1, 3, 5, 8, 9)
        catalog.name([7, 8, 4, 5, 11])  # ("5-16", [0, 1, 3, 4, 7])
    """

    def __init__(self, entries):
        self._entries = MappingProxyType(dict(entries))

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        return name in self._entries

    def sets(self):
        """Immutable mapping of set-class name → prime form tuple, in file order."""
        return self._entries

    def name(self, pcs) -> tuple[str, list[int]] | None:
        """
        Find the set-class of `pcs`.

        Computes the Forte prime form and returns (name, prime form), or
        None when no entry matches.
        """
        prime = tuple(prime_form(pcs))
        for set_name, entry in self._entries.items():
            if entry == prime:
                return set_name, list(entry)
        return None

    def forte_name(self, pcs) -> str | None:
        match = self.name(pcs)
        return match[0] if match else None

    def sets_of_cardinality(self, cardinality: int) -> dict[str, tuple[int, ...]]:
        """Entries whose prime form has `cardinality` pitch classes."""
        return {n: pcs for n, pcs in self._entries.items() if len(pcs) == cardinality}


def load_catalog(path=None) -> Catalog:
    """
    Load a catalog file (default: the packaged forte.sets).

    Raises:
        CatalogError: the file cannot be read or contains a bad line.
    """
    path = path or FORTE_SETS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            entries = parse_catalog(f)
    except OSError as e:
        raise CatalogError(f"cannot read catalog {path}: {e}") from e
    logger.debug("Loaded %d set-classes from %s", len(entries), path)
    return Catalog(entries)


# Default catalog, loaded on first use
_DEFAULT_CATALOG: Catalog | None = None
_DEFAULT_LOCK = threading.Lock()


def default_catalog() -> Catalog:
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_CATALOG is None:
                _DEFAULT_CATALOG = load_catalog()
    return _DEFAULT_CATALOG


def sets():
    """The packaged name → prime form mapping (224 set-classes)."""
    return default_catalog().sets()


def name(pcs) -> tuple[str, list[int]] | None:
    """(name, prime form) of `pcs` in the packaged catalog, or None."""
    return default_catalog().name(pcs)


def forte_name(pcs) -> str | None:
    return default_catalog().forte_name(pcs)


def sets_of_cardinality(cardinality: int) -> dict[str, tuple[int, ...]]:
    return default_catalog().sets_of_cardinality(cardinality)
