#!/usr/bin/env python3
"""
scripts/audit_catalog.py — consistency audit for the Forte set-class catalog.

For every catalog entry:
  1. FIXED POINT   The stored prime form is its own Forte prime form.
  2. CARDINALITY   The number before the dash equals the set size.
  3. UNIQUENESS    No two names share a prime form.
  4. COMPLEMENTS   n-k and (12-n)-k are complements of each other; a Z
                   hexachord's complement is its Z partner.
  5. RAHN          Every entry whose Rahn prime form differs is written to
                   reports/forte_rahn.csv.

Usage (from project root):
    python scripts/audit_catalog.py
    python scripts/audit_catalog.py --catalog path/to/forte.sets
"""
import os
import sys
import csv
import argparse
from collections import Counter

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from forte.analysis import interval_class_vector
from forte.catalog import CatalogError, load_catalog
from forte.parser import format_pitch_classes
from forte.prime_form import Algorithm, prime_form

REPORTS_DIR = os.path.join(ROOT, "reports")

# Forte and Rahn are known to disagree on exactly these set-classes.
_EXPECTED_RAHN_DIFFERENCES = {"5-20", "6-Z29", "6-31", "7-Z18", "7-20", "8-26"}


# ── Helpers ───────────────────────────────────────────────────────────────────

def _split_name(set_name: str) -> tuple[int, str]:
    """'6-Z44' → (6, 'Z44')."""
    cardinality, ordinal = set_name.split("-", 1)
    return int(cardinality), ordinal


def _complement(pcs) -> list[int]:
    return [pc for pc in range(12) if pc not in pcs]


def audit(catalog) -> tuple[list[str], list[dict]]:
    """Return (problems, rahn_rows) for a loaded catalog."""
    problems: list[str] = []
    rahn_rows: list[dict] = []
    entries = catalog.sets()

    seen = Counter(entries.values())
    for pcs, count in seen.items():
        if count > 1:
            dup = [n for n, p in entries.items() if p == pcs]
            problems.append(f"prime form {format_pitch_classes(pcs)} shared by {', '.join(dup)}")

    for set_name, pcs in entries.items():
        forte = prime_form(pcs)
        if forte != list(pcs):
            problems.append(f"{set_name}: stored {format_pitch_classes(pcs)} "
                            f"but prime form is {format_pitch_classes(forte)}")

        try:
            cardinality, ordinal = _split_name(set_name)
        except ValueError:
            problems.append(f"{set_name}: name is not CARDINALITY-ORDINAL")
            continue
        if cardinality != len(pcs):
            problems.append(f"{set_name}: {len(pcs)} pitch classes, name says {cardinality}")

        if 3 <= cardinality <= 9:
            match = catalog.name(_complement(pcs))
            if match is None:
                problems.append(f"{set_name}: complement not in catalog")
            elif cardinality != 6:
                comp_card, comp_ord = _split_name(match[0])
                if comp_card != 12 - cardinality or comp_ord != ordinal:
                    problems.append(f"{set_name}: complement named {match[0]}")
            elif match[0] != set_name:
                # Non-self-complementary hexachords are Z pairs sharing a vector
                if not ("Z" in set_name and "Z" in match[0]
                        and interval_class_vector(pcs) == interval_class_vector(match[1])):
                    problems.append(f"{set_name}: complement {match[0]} is not its Z partner")

        rahn = prime_form(pcs, Algorithm.RAHN)
        if rahn != list(pcs):
            rahn_rows.append({
                "name":  set_name,
                "forte": format_pitch_classes(pcs),
                "rahn":  format_pitch_classes(rahn),
            })

    found = {row["name"] for row in rahn_rows}
    if found != _EXPECTED_RAHN_DIFFERENCES:
        problems.append(f"Forte/Rahn differences {sorted(found)}, "
                        f"expected {sorted(_EXPECTED_RAHN_DIFFERENCES)}")
    return problems, rahn_rows


# ── Main ──────────────────────────────────────────────────────────────────────

def main() -> int:
    parser = argparse.ArgumentParser(description="Audit the Forte set-class catalog.")
    parser.add_argument("--catalog", type=str, default=None,
                        help="Catalog file to audit (default: packaged forte.sets).")
    args = parser.parse_args()

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as e:
        print(f"Catalog failed to load: {e}", file=sys.stderr)
        return 1

    problems, rahn_rows = audit(catalog)

    os.makedirs(REPORTS_DIR, exist_ok=True)
    rahn_path = os.path.join(REPORTS_DIR, "forte_rahn.csv")
    with open(rahn_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["name", "forte", "rahn"])
        w.writeheader()
        w.writerows(rahn_rows)

    # ── Summary ───────────────────────────────────────────────────────────────
    by_size = Counter(len(pcs) for pcs in catalog.sets().values())
    print(f"\n{'═'*60}")
    print(f"CATALOG AUDIT")
    print(f"{'═'*60}")
    print(f"  Set-classes        : {len(catalog)}")
    for size in sorted(by_size):
        print(f"    cardinality {size:>2}   : {by_size[size]}")
    print(f"  Forte/Rahn differ  : {len(rahn_rows)}")
    for row in rahn_rows:
        print(f"    {row['name']:<8} forte {row['forte']:<10} rahn {row['rahn']}")
    print(f"  Problems           : {len(problems)}")
    for problem in problems:
        print(f"    {problem}")

    print(f"\n  Report written to:")
    print(f"    {rahn_path}")
    print()
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
