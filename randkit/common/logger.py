# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import sys
import time

from datetime import timedelta

from randkit.common import color

LOG_LEVEL = {
    "DEBUG": 1, # verbose/debug - enable with --verbose or --debug
    "INFO":  2, # normal reporting - disable stdout with --quiet, --log-file still records it
    "WARN":  3, # minor/correctable issues, e.g. degraded seeding
    "ERROR": 4, # rejected arguments, failed self-checks
}

# --quiet    - mute stdout, disabling debug and info output
# --verbose  - enable verbose stdout (logger.debug())
# --debug    - max verbosity on stdout and in the log file
# --log-file - log outputs to file, combine with --debug for max verbosity


class Logger():
    def __init__(self):
        self.init_time = time.time()
        self.stdout_level = LOG_LEVEL["INFO"]
        self.file_level = None
        self.log_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init(self, stdout_level="INFO", file_level=None, log_file=None):
        self.close()
        self.stdout_level = LOG_LEVEL[stdout_level]
        if file_level and log_file:
            self.file_level = LOG_LEVEL[file_level]
            self.log_file = open(log_file, "a")
        else:
            self.file_level = None

    def close(self):
        self.file_level = None
        if self.log_file:
            self.log_file.close()
            self.log_file = None

    def file_log(self, msg_level, msg):
        if self.log_file and self.file_level and self.file_level <= LOG_LEVEL[msg_level]:
            self.log_file.write(str(timedelta(seconds=time.time() - self.init_time)) + " " + msg + "\n")
            self.log_file.flush()

    def debug(self, msg):
        self.file_log("DEBUG", msg)
        if self.stdout_level <= LOG_LEVEL["DEBUG"]:
            print(color.FLUSH_LINE + msg, file=sys.stderr)

    def info(self, msg):
        self.file_log("INFO", msg)
        if self.stdout_level <= LOG_LEVEL["INFO"]:
            print(color.FLUSH_LINE + msg, file=sys.stderr)

    def warn(self, msg):
        self.file_log("WARN", "[WARN] " + msg)
        print(color.FLUSH_LINE + color.WARNING + msg + color.ENDC, file=sys.stderr, flush=True)

    def error(self, msg):
        self.file_log("ERROR", "[ERROR] " + msg)
        print(color.FLUSH_LINE + color.FAIL + "[ERROR] " + msg + color.ENDC, file=sys.stderr, flush=True)


logger = Logger()


def init_logger(config):

    # Default is INFO level to console, and no file logging.
    # Generated values go to stdout, so all log output goes to stderr.
    #
    # We allow some sensible combinations, e.g. --quiet --log-file x [--debug]
    if config.quiet:
        stdout_level = "WARN"
    elif config.verbose or config.debug:
        stdout_level = "DEBUG"
    else:
        stdout_level = "INFO"

    if config.log_file:
        if config.debug:
            file_level = "DEBUG"
        else:
            file_level = "INFO"
    else:
        file_level = None

    logger.init(stdout_level, file_level, config.log_file)
