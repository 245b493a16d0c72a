# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

import sys
import time

from datetime import timedelta

import randbin_fuzzer.common.color as color

LOG_LEVEL = {
    "DEBUG": 1, # per-byte mutation trace - enable with --verbose
    "INFO":  2, # normal reporting - disable stdout with --quiet, --log still includes it
    "WARN":  3, # minor/correctable issues
    "ERROR": 4, # failed mutation run
}

# --quiet   - mute stdout, only warnings and errors on stderr
# --verbose - enable logger.debug() on stdout and in the log file
# --log     - additionally write all enabled messages to <file>


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
        return

    def init(self, stdout_level="INFO", file_level=None, log_file=None):
        self.close()
        self.stdout_level = LOG_LEVEL[stdout_level]
        if file_level and log_file:
            self.log_file = open(log_file, "a")
            self.file_level = LOG_LEVEL[file_level]

    def close(self):
        if self.log_file:
            self.log_file.close()
        self.log_file = None
        self.file_level = None

    def file_log(self, msg_level, msg):
        if self.file_level and self.file_level <= LOG_LEVEL[msg_level]:
            self.log_file.write(str(timedelta(seconds=time.time() - self.init_time)) + " " + msg + "\n")
            self.log_file.flush()

    def enabled(self, msg_level):
        level = LOG_LEVEL[msg_level]
        if self.file_level and self.file_level <= level:
            return True
        return self.stdout_level <= level

    def debug(self, msg):
        self.file_log("DEBUG", msg)
        if self.stdout_level <= LOG_LEVEL["DEBUG"]:
            print(color.FLUSH_LINE + msg)

    def info(self, msg):
        self.file_log("INFO", msg)
        if self.stdout_level <= LOG_LEVEL["INFO"]:
            print(color.FLUSH_LINE + msg)

    def warn(self, msg):
        self.file_log("WARN", color.WARNING_PREFIX + msg)
        print(color.FLUSH_LINE + color.WARNING + msg + color.ENDC, file=sys.stderr, flush=True)

    def error(self, msg):
        self.file_log("ERROR", color.ERROR_PREFIX + msg)
        print(color.FLUSH_LINE + color.FAIL + color.ERROR_PREFIX + msg + color.ENDC, file=sys.stderr, flush=True)

logger = Logger()

def init_logger(config):

    # Default is INFO level to console, and no file logging.
    #  -v / -q to increase/decrease console logging
    #  -l / --log <file> to mirror console logging into a file
    if config.quiet:
        stdout_level = "WARN"
    elif config.verbose:
        stdout_level = "DEBUG"
    else:
        stdout_level = "INFO"

    if config.log:
        file_level = "DEBUG" if config.verbose else "INFO"
    else:
        file_level = None

    logger.init(stdout_level, file_level, config.log)
