# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Randomness utilities on a securely seeded, thread-safe process-wide PRNG.
"""

from randkit.common.rand import RandomService, rand
from randkit.technique.jitter import DEFAULT_JITTER_FACTOR, jitter
from randkit.technique.strings import ALPHANUM_ALPHABET, DIGITS_ALPHABET, random_string

__all__ = [
    "ALPHANUM_ALPHABET",
    "DEFAULT_JITTER_FACTOR",
    "DIGITS_ALPHABET",
    "RandomService",
    "jitter",
    "rand",
    "random_string",
]
