# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

WARNING =    '\033[0;33m'
FAIL =       '\033[91m'
ENDC =       '\033[0m'
BOLD =       '\033[1m'
FLUSH_LINE = '\r\x1b[K'
