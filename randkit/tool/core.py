# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Command line front end: generate and print random values.
"""

from datetime import timedelta

from randkit.common.logger import init_logger, logger
from randkit.common.rand import rand
from randkit.technique.jitter import jitter
from randkit.technique.strings import ALPHANUM_ALPHABET, DIGITS_ALPHABET, random_string

ALPHABETS = {
    "alphanum": ALPHANUM_ALPHABET,
    "digits": DIGITS_ALPHABET,
}


def resolve_alphabet(name):
    return ALPHABETS.get(name, name)


def gen_int(config):
    return rand.int(config.bound)


def gen_range(config):
    return rand.range(config.min, config.max)


def gen_float(config):
    return rand.float()


def gen_jitter(config):
    return jitter(timedelta(seconds=config.duration), config.factor).total_seconds()


def gen_string(config):
    return random_string(config.length, resolve_alphabet(config.alphabet))


GENERATORS = {
    "int": gen_int,
    "range": gen_range,
    "float": gen_float,
    "jitter": gen_jitter,
    "string": gen_string,
}


def start(config, out=print):

    init_logger(config)

    action = config.action
    generate = GENERATORS[action]
    logger.debug("Generating %d value(s) for action <%s>" % (config.iterations, action))

    try:
        for _ in range(config.iterations):
            out(generate(config))
    except (ValueError, OverflowError) as e:
        logger.error("Invalid arguments for <%s>: %s" % (action, e))
        return 1
    finally:
        logger.close()

    return 0
