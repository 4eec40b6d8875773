# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Random strings over an alphabet, without modulo bias.

Each 63-bit draw is cut into k-bit groups, k being the bits needed to index
the alphabet. Group values beyond the alphabet are discarded, never reduced.
"""

from randkit.common.rand import RandomService

# ascii lowercase letters, then digits
ALPHANUM_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
DIGITS_ALPHABET = "0123456789"

DRAW_BITS = 63


def index_bits(size):
    # bits to represent any index < size, at least one
    return max(1, (size - 1).bit_length())


def random_string(length, alphabet=None):
    """
    Return `length` symbols drawn uniformly from alphabet.

    An empty or missing alphabet selects ALPHANUM_ALPHABET. A bytes alphabet
    yields bytes, anything else a str.
    """
    if length < 0:
        raise ValueError("negative string length %d" % length)
    if not alphabet:
        alphabet = ALPHANUM_ALPHABET

    size = len(alphabet)
    idx_bits = index_bits(size)
    idx_mask = (1 << idx_bits) - 1
    idx_max = DRAW_BITS // idx_bits # indexes per draw

    prng = RandomService()
    symbols = []

    draw = prng.int63()
    remaining = idx_max
    while len(symbols) < length:
        if remaining == 0:
            draw, remaining = prng.int63(), idx_max
        idx = draw & idx_mask
        if idx < size:
            symbols.append(alphabet[idx])
        draw >>= idx_bits
        remaining -= 1

    if isinstance(alphabet, (bytes, bytearray)):
        return bytes(symbols)
    return "".join(symbols)
