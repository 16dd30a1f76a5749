import unittest
import os
import shutil
import tempfile
import threading
from collections import Counter
from unittest.mock import patch
from forte import catalog as catalog_module
from forte.catalog import (
    Catalog,
    CatalogError,
    FORTE_SETS_PATH,
    load_catalog,
    parse_catalog,
    parse_catalog_line,
    sets,
    name,
    forte_name,
    sets_of_cardinality,
    default_catalog,
)
from forte.prime_form import Algorithm, prime_form


class TestCatalogParsing(unittest.TestCase):
    def test_parse_line(self):
        self.assertEqual(parse_catalog_line("6-Z44:012569\n"), ("6-Z44", (0, 1, 2, 5, 6, 9)))
        self.assertEqual(parse_catalog_line("8-26:0124579T"), ("8-26", (0, 1, 2, 4, 5, 7, 9, 10)))
        self.assertEqual(parse_catalog_line("0-1:"), ("0-1", ()))

    def test_unknown_digit(self):
        with self.assertRaises(CatalogError):
            parse_catalog_line("3-1:01X")

    def test_malformed_line(self):
        for line in ("3-1", "3-1:012:3", ":012"):
            with self.assertRaises(CatalogError):
                parse_catalog_line(line)

    def test_parse_catalog_reports_line_number(self):
        with self.assertRaisesRegex(CatalogError, "line 3"):
            parse_catalog(["3-1:012", "", "3-2:01?"])

    def test_duplicate_name(self):
        with self.assertRaises(CatalogError):
            parse_catalog(["3-1:012", "3-1:013"])

    def test_catalog_error_is_value_error(self):
        self.assertTrue(issubclass(CatalogError, ValueError))


class TestLoadCatalog(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.sets_file = os.path.join(self.test_dir, "small.sets")
        with open(self.sets_file, "w") as f:
            f.write("3-1:012\n3-11:037\n\n4-28:0369\n")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_custom_file(self):
        catalog = load_catalog(self.sets_file)
        self.assertEqual(len(catalog), 3)
        self.assertEqual(list(catalog.sets()), ["3-1", "3-11", "4-28"])
        self.assertEqual(catalog.name([0, 4, 7]), ("3-11", [0, 3, 7]))

    def test_lookup_miss_returns_none(self):
        catalog = load_catalog(self.sets_file)
        self.assertIsNone(catalog.name([0, 1, 3]))
        self.assertIsNone(catalog.forte_name([0, 1, 3]))

    def test_corrupt_file_refused(self):
        bad = os.path.join(self.test_dir, "bad.sets")
        with open(bad, "w") as f:
            f.write("3-1:012\n3-2 013\n")
        with self.assertRaises(CatalogError):
            load_catalog(bad)

    def test_missing_file(self):
        with self.assertRaises(CatalogError):
            load_catalog(os.path.join(self.test_dir, "nope.sets"))

    def test_mapping_is_read_only(self):
        catalog = load_catalog(self.sets_file)
        with self.assertRaises(TypeError):
            catalog.sets()["3-1"] = (0, 1, 3)

    def test_catalog_from_entries(self):
        catalog = Catalog({"2-6": (0, 6)})
        self.assertIn("2-6", catalog)
        self.assertEqual(catalog.name([3, 9]), ("2-6", [0, 6]))


class TestDefaultCatalog(unittest.TestCase):
    def test_packaged_file_exists(self):
        self.assertTrue(os.path.isfile(FORTE_SETS_PATH))

    def test_224_entries(self):
        self.assertEqual(len(sets()), 224)
        sizes = Counter(len(pcs) for pcs in sets().values())
        self.assertEqual(
            [sizes[n] for n in range(13)],
            [1, 1, 6, 12, 29, 38, 50, 38, 29, 12, 6, 1, 1],
        )

    def test_names(self):
        self.assertEqual(sets()["6-31"], (0, 1, 3, 5, 8, 9))
        self.assertEqual(sets()["6-Z44"], (0, 1, 2, 5, 6, 9))
        self.assertEqual(sets()["0-1"], ())
        self.assertEqual(sets()["12-1"], tuple(range(12)))

    def test_catalog_is_self_consistent(self):
        for set_name, pcs in sets().items():
            self.assertEqual(prime_form(pcs), list(pcs), set_name)
            self.assertEqual(int(set_name.split("-")[0]), len(pcs), set_name)

    def test_prime_forms_unique(self):
        self.assertEqual(len(set(sets().values())), 224)

    def test_name_lookup(self):
        self.assertEqual(name([7, 8, 4, 5, 11]), ("5-16", [0, 1, 3, 4, 7]))
        self.assertEqual(name([0, 1, 5, 6, 8]), ("5-20", [0, 1, 3, 7, 8]))
        self.assertEqual(name([]), ("0-1", []))
        self.assertEqual(forte_name([0, 4, 7]), "3-11")
        self.assertEqual(forte_name([0, 1, 4, 6]), "4-Z15")

    def test_every_set_has_a_name(self):
        for mask in range(4096):
            pcs = [pc for pc in range(12) if mask >> pc & 1]
            self.assertIsNotNone(name(pcs), pcs)

    def test_rahn_differences(self):
        differ = sorted(n for n, pcs in sets().items()
                        if prime_form(pcs, Algorithm.RAHN) != list(pcs))
        self.assertEqual(differ, ["5-20", "6-31", "6-Z29", "7-20", "7-Z18", "8-26"])

    def test_sets_of_cardinality(self):
        trichords = sets_of_cardinality(3)
        self.assertEqual(len(trichords), 12)
        self.assertEqual(list(trichords)[0], "3-1")
        self.assertEqual(list(trichords)[-1], "3-12")

    def test_loaded_once(self):
        with patch.object(catalog_module, "_DEFAULT_CATALOG", None), \
             patch.object(catalog_module, "load_catalog",
                          wraps=catalog_module.load_catalog) as mock_load:
            threads = [threading.Thread(target=default_catalog) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
            first = default_catalog()
            self.assertIs(default_catalog(), first)
            self.assertEqual(mock_load.call_count, 1)


if __name__ == "__main__":
    unittest.main()
