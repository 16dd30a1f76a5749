"""
Command-line front end.

Usage:
    forte prime "0 1 5 6 8"
    forte prime 01378 --algorithm rahn
    forte normal "Bb F A"
    forte icv 01378
    forte name "7 8 4 5 11"
    forte subsets 0124 --size 3
    forte catalog --cardinality 3
"""
import argparse
import sys

from .analysis import interval_class_vector, subsets
from .catalog import CatalogError, default_catalog, load_catalog
from .normal_form import Algorithm, normal_form
from .parser import format_pitch_classes, parse_pitch_classes, pitch_class_names
from .prime_form import prime_form


def _show(pcs) -> str:
    """List form plus compact digits, e.g. '[0, 1, 4]  (014)'."""
    return f"{list(pcs)}  ({format_pitch_classes(pcs)})"


def _cmd_normal(args, catalog):
    nf = normal_form(args.pcs, args.algorithm)
    print(f"{_show(nf)}  {' '.join(pitch_class_names(nf))}")
    return 0


def _cmd_prime(args, catalog):
    print(_show(prime_form(args.pcs, args.algorithm)))
    return 0


def _cmd_icv(args, catalog):
    print("<" + "".join(str(n) for n in interval_class_vector(args.pcs)) + ">")
    return 0


def _cmd_name(args, catalog):
    match = catalog.name(args.pcs)
    if match is None:
        print(f"No catalog entry for {args.pcs}", file=sys.stderr)
        return 1
    set_name, prime = match
    print(f"{set_name}  {_show(prime)}")
    return 0


def _cmd_subsets(args, catalog):
    for subset in subsets(args.pcs, size=args.size):
        print(subset)
    return 0


def _cmd_catalog(args, catalog):
    if args.cardinality is None:
        entries = catalog.sets()
    else:
        entries = catalog.sets_of_cardinality(args.cardinality)
    for set_name, prime in entries.items():
        print(f"{set_name:<8}{format_pitch_classes(prime)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forte",
        description="Normal form, prime form, interval-class vector and Forte name of pitch-class sets.",
    )
    parser.add_argument("--catalog", type=str, default=None, metavar="PATH",
                        help="Catalog file in NAME:DIGITS format (default: packaged forte.sets).")
    sub = parser.add_subparsers(dest="command", required=True)

    def with_set(name, help_text, handler):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("pcs", type=str,
                       help='Pitch-class set: "0 1 4", "014T" or "C E G".')
        p.set_defaults(handler=handler)
        return p

    for name, help_text, handler in (
        ("normal", "Normal form of the set.", _cmd_normal),
        ("prime", "Prime form of the set.", _cmd_prime),
    ):
        p = with_set(name, help_text, handler)
        p.add_argument("--algorithm", choices=[a.value for a in Algorithm],
                       default=Algorithm.FORTE.value,
                       help="Tie-break policy (default: forte).")

    with_set("icv", "Interval-class vector of the set.", _cmd_icv)
    with_set("name", "Forte name of the set's set-class.", _cmd_name)
    p = with_set("subsets", "All subsets of the set.", _cmd_subsets)
    p.add_argument("--size", type=int, default=None,
                   help="Only subsets of this cardinality.")

    p = sub.add_parser("catalog", help="List catalog entries.")
    p.add_argument("--cardinality", type=int, default=None,
                   help="Only set-classes of this size.")
    p.set_defaults(handler=_cmd_catalog)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if hasattr(args, "pcs"):
        try:
            args.pcs = parse_pitch_classes(args.pcs)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        catalog = load_catalog(args.catalog) if args.catalog else default_catalog()
        return args.handler(args, catalog)
    except CatalogError as e:
        print(f"Catalog error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
