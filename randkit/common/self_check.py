# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import os
import sys

from randkit.common.logger import logger


def check_version():
    if sys.version_info < (3, 7, 0):
        logger.error("This script requires python >= 3.7!")
        return False
    return True


def check_packages():

    deps = [
            'fastrand',
            'confuse',
            'flatdict',
            ]

    import importlib
    for pkg in deps:
        try:
            importlib.import_module(pkg)
        except (ImportError):
            logger.error("Failed to import package %s - check dependencies!" % pkg)
            return False

    return True


def check_entropy_source():
    try:
        os.urandom(1)
    except (OSError, NotImplementedError):
        # not fatal, the PRNG falls back to a time-based seed
        logger.warn("No secure entropy source available, PRNG seed will be predictable.")
        return False
    return True


def self_check():
    if not check_version():
        return False
    if not check_packages():
        return False
    check_entropy_source()
    return True
