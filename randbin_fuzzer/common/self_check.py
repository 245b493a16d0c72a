# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

import importlib
import sys

from randbin_fuzzer.common.logger import logger


def check_version():
    if sys.version_info < (3, 6, 0):
        logger.error("This script requires python 3.6 or later!")
        return False
    return True


def check_packages():

    deps = [
            'confuse',
            'flatdict',
            'fastrand',
            ]

    for pkg in deps:
        try:
            importlib.import_module(pkg)
        except ImportError:
            logger.error("Failed to import package %s - check dependencies!" % pkg)
            return False

    return True


def self_check():
    if not check_version():
        return False
    if not check_packages():
        return False
    return True
