#!/usr/bin/env python3
#
# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Launcher for randbin. Check randbin_fuzzer/mutator/core.py for more.
"""

import sys

from randbin_fuzzer.common.self_check import self_check
from randbin_fuzzer.common.config import ConfigArgsParser

from randbin_fuzzer.mutator import core as mutator

def main():

    if not self_check():
        return 1

    parser = ConfigArgsParser()
    config = parser.parse_mutate_options()

    return mutator.start(config)


if __name__ == "__main__":
    sys.exit(main())
