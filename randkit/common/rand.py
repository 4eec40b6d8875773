# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Process-wide PRNG, securely seeded and safe for concurrent use.

fastrand keeps a single PCG32 state per process. RandomService owns that
state: it seeds it once from the OS entropy pool and serializes every draw
on a lock. The `rand` class is the convenience facade used by callers.
"""

import os
import threading
import time

import fastrand

from randkit.common.logger import logger
from randkit.common.util import Singleton

INT63_MASK = (1 << 63) - 1
UINT32_MASK = 0xFFFFFFFF

# largest bound handed to fastrand.pcg32bounded()
PCG32_MAX_BOUND = (1 << 31) - 1


def secure_seed():
    """
    Return a non-negative 63-bit seed from the OS entropy source.

    Falls back to wall-clock nanoseconds if the entropy source is not
    available. The seed is never logged.
    """
    try:
        seed_bytes = os.urandom(8)
    except (OSError, NotImplementedError):
        logger.warn("Secure entropy source unavailable, seeding PRNG from wall clock!")
        return time.time_ns() & INT63_MASK

    # mask off sign bit to ensure positive number
    return int.from_bytes(seed_bytes, byteorder="little") & INT63_MASK


class RandomService(metaclass=Singleton):

    def __init__(self):
        self._seed()
        # a forked child is a new process and gets its own seed, otherwise
        # parent and child would replay the same sequence
        if hasattr(os, "register_at_fork"):
            os.register_at_fork(after_in_child=self._seed)
        logger.debug("PRNG initialized (pid=%d)" % os.getpid())

    def _seed(self):
        # fresh lock, another thread may have held the old one across fork()
        self._lock = threading.Lock()
        with self._lock:
            # seed from system and flush initial output
            fastrand.pcg32_seed(secure_seed())
            fastrand.pcg32()
            fastrand.pcg32()

    def int63(self):
        """Return a random non-negative 63-bit integer."""
        with self._lock:
            hi = fastrand.pcg32() & UINT32_MASK
            lo = fastrand.pcg32() & UINT32_MASK
        return (hi << 31) | (lo >> 1)

    def float64(self):
        """Return a random float in [0.0, 1.0) with 53 bits of precision."""
        with self._lock:
            a = (fastrand.pcg32() & UINT32_MASK) >> 5
            b = (fastrand.pcg32() & UINT32_MASK) >> 6
        return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)

    def getrandbits(self, k):
        """Return a non-negative integer with k random bits."""
        if k < 0:
            raise ValueError("number of bits must be non-negative, got %d" % k)
        value = 0
        filled = 0
        while filled < k:
            value = (value << 63) | self.int63()
            filled += 63
        return value >> (filled - k)

    def bounded(self, n):
        """Return a random integer N := 0 <= N < n."""
        if n <= 0:
            raise ValueError("bound must be positive, got %d" % n)
        if n <= PCG32_MAX_BOUND:
            with self._lock:
                return fastrand.pcg32bounded(n)

        # beyond 32 bit, reject out-of-range values instead of reducing them
        k = n.bit_length()
        value = self.getrandbits(k)
        while value >= n:
            value = self.getrandbits(k)
        return value


class rand:

    # return integer N := 0 <= n < limit
    # Intended semantics:
    #   if rand.int(100) < 50 # execute with p(0.5)
    #   if rand.int(2)        # execute with p(0.5)
    # a[rand.int(len(a))] = 5 # never out of bounds
    # rand.int(0) raises ValueError
    @staticmethod
    def int(limit):
        return RandomService().bounded(limit)

    # return integer N := low <= N < high
    @staticmethod
    def range(low, high):
        if high <= low:
            raise ValueError("empty range [%d, %d)" % (low, high))
        return rand.int(high - low) + low

    @staticmethod
    def float():
        return RandomService().float64()

    @staticmethod
    def select(arg):
        if len(arg) == 0:
            raise ValueError("cannot select from an empty sequence")
        return arg[rand.int(len(arg))]

    @staticmethod
    def bytes(num):
        if num < 0:
            raise ValueError("negative byte count %d" % num)
        return bytes([rand.int(256) for _ in range(num)])
