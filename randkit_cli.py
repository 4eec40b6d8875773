#!/usr/bin/env python3
#
# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Launcher for the randkit generator. Check randkit/tool/core.py for more.
"""

import sys

from randkit.common.self_check import self_check
from randkit.common.config import ConfigArgsParser
from randkit.common.util import print_banner

from randkit.tool import core as tool

def main():

    if not self_check():
        return 1

    parser = ConfigArgsParser()
    config = parser.parse_options()

    print_banner("randkit", quiet=config.quiet)

    return tool.start(config)


if __name__ == "__main__":
    sys.exit(main())
