import doctest
import logging
import unittest

from .. import huffman
from ..huffman import Leaf, Internal, build_tree, build_codes, count_frequencies, encode, decode


def load_tests(loader, tests, ignore):
    tests.addTests(doctest.DocTestSuite(huffman))
    return tests


def leaves(node):
    if isinstance(node, Leaf):
        return [node]
    return leaves(node.left) + leaves(node.right)


class HuffmanTests(unittest.TestCase):
    text = "Hello, world!"

    def test_tree_frequency_is_the_text_length(self):
        tree = build_tree(count_frequencies(self.text))
        self.assertIsInstance(tree, Internal)
        self.assertEqual(tree.frequency, len(self.text))
        self.assertEqual(sorted(leaf.symbol for leaf in leaves(tree)), sorted(set(self.text)))

    def test_codes_are_prefix_free(self):
        codes = build_codes(build_tree(count_frequencies(self.text)))
        for symbol, code in codes.items():
            for other, other_code in codes.items():
                if symbol != other:
                    self.assertFalse(other_code.startswith(code), (symbol, other))

    def test_frequent_symbols_get_codes_no_longer_than_rare_ones(self):
        frequencies = count_frequencies(self.text)
        codes = build_codes(build_tree(frequencies))
        for symbol in frequencies:
            for other in frequencies:
                if frequencies[symbol] > frequencies[other]:
                    self.assertLessEqual(len(codes[symbol]), len(codes[other]))

    def test_codes_do_not_depend_on_dict_order(self):
        frequencies = count_frequencies(self.text)
        reversed_frequencies = dict(reversed(list(frequencies.items())))
        self.assertEqual(build_codes(build_tree(frequencies)), build_codes(build_tree(reversed_frequencies)))

    def test_encoded_length_matches_the_weighted_path_length(self):
        frequencies = {"a": 45, "b": 13, "c": 12, "d": 16, "e": 9, "f": 5}
        codes = build_codes(build_tree(frequencies))
        total = sum(frequencies[symbol] * len(code) for symbol, code in codes.items())
        self.assertEqual(total, 224)

    def test_round_trip(self):
        tree = build_tree(count_frequencies(self.text))
        self.assertEqual(decode(encode(self.text, build_codes(tree)), tree), self.text)

    def test_encode_without_codes_builds_them(self):
        self.assertEqual(len(encode("aaab")), 4)

    def test_single_symbol(self):
        tree = build_tree({"x": 3})
        self.assertEqual(build_codes(tree), {"x": "0"})
        self.assertEqual(decode("000", tree), "xxx")
        self.assertRaises(ValueError, decode, "01", tree)

    def test_errors(self):
        tree = build_tree({"a": 1, "b": 2})
        self.assertRaises(ValueError, build_tree, {})
        self.assertRaises(ValueError, decode, "2", tree)
        self.assertRaises(KeyError, encode, "c", build_codes(tree))

    def test_merges_are_logged(self):
        with self.assertLogs("felicity.huffman", level=logging.DEBUG) as logs:
            build_tree({"a": 1, "b": 2, "c": 3})
        self.assertEqual(len(logs.records), 2)
