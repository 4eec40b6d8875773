# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Randomized perturbation of durations.

Clients doing periodic work (retries, polling, cache expiry) should jitter
their intervals so that many of them do not converge on the same schedule.
"""

import math

from datetime import timedelta

from randkit.common.rand import rand

# +-20% by default
DEFAULT_JITTER_FACTOR = 0.2

ONE_MICROSECOND = timedelta(microseconds=1)


def _jitter_ticks(ticks, factor):
    new_ticks = 0
    while new_ticks <= 0:
        spread = 2 * rand.float() - 1 # [-1.0, 1.0)
        new_ticks = ticks + int(spread * factor * ticks)
    return new_ticks


def _jitter_real(value, factor):
    new_value = 0.0
    while new_value <= 0.0:
        spread = 2 * rand.float() - 1 # [-1.0, 1.0)
        new_value = value + spread * factor * value
    return new_value


def jitter(duration, factor=None):
    """
    Return duration altered by a random amount of up to +-factor of itself.

    Accepts a datetime.timedelta, an int (any integer time unit, e.g. ns) or a
    float, and returns the same type. The result is always > 0: candidates
    that are not positive are drawn again rather than clamped. A factor of
    None or <= 0.0 selects DEFAULT_JITTER_FACTOR, NaN or +inf raises
    ValueError.
    """
    if factor is None or factor <= 0.0:
        factor = DEFAULT_JITTER_FACTOR
    elif not math.isfinite(factor):
        raise ValueError("jitter factor must be finite, got %r" % factor)

    if isinstance(duration, timedelta):
        micros = duration // ONE_MICROSECOND
        if micros <= 0:
            raise ValueError("cannot jitter non-positive duration %s" % duration)
        return timedelta(microseconds=_jitter_ticks(micros, factor))

    if isinstance(duration, int):
        if duration <= 0:
            raise ValueError("cannot jitter non-positive duration %r" % duration)
        return _jitter_ticks(duration, factor)

    if not math.isfinite(duration) or duration <= 0:
        raise ValueError("cannot jitter duration %r" % duration)
    return _jitter_real(float(duration), factor)
