#!/usr/bin/env python

import logging
from optparse import OptionParser

from felicity import huffman


def main():
    usage = "usage: %prog [options] <text>"
    parser = OptionParser(usage)
    parser.add_option(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="log every merge while building the tree"
    )

    (options, args) = parser.parse_args()

    if len(args) != 1:
        parser.error("You need to supply exactly one text to encode!")

    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    text = args[0]
    if not text:
        parser.error("The text to encode must not be empty!")

    frequencies = huffman.count_frequencies(text)
    print("{0!r}:".format(text))
    for symbol, frequency in sorted(frequencies.items()):
        print("  {0!r}: {1}".format(symbol, frequency))

    tree = huffman.build_tree(frequencies)
    codes = huffman.build_codes(tree)
    print("codes:")
    for symbol, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[1])):
        print("  {0!r}: {1}".format(symbol, code))

    print(huffman.encode(text, codes))


if __name__ == "__main__":
    main()
