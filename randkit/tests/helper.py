# Copyright (C) 2022 randkit contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Helper functions for randkit tests
"""

def get_histogram(draw, elements, samples):

    bitmap = [0 for _ in range(elements)]

    for _ in range(samples*elements):
        val = draw()
        bitmap[val] += 1

    return bitmap


def max_bias(bitmap, samples):
    return max(abs(1-count/samples) for count in bitmap)


def symbol_counts(strings):
    counts = {}
    for s in strings:
        for symbol in s:
            counts[symbol] = counts.get(symbol, 0) + 1
    return counts
