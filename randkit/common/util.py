# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import sys
import threading

from randkit.common import color


class Singleton(type):
    _instances = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        # double-checked, concurrent first callers must see one instance
        if cls not in cls._instances:
            with Singleton._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


def print_banner(msg, quiet=False):
    if quiet:
        return
    print(color.BOLD + "<< " + msg + " >>" + color.ENDC, file=sys.stderr)
