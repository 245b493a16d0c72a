# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Random byte replacement stage.

Picks nbytes distinct positions and overwrites each with a random value
different from the one it held before.
"""

from randbin_fuzzer.common.logger import logger
from randbin_fuzzer.technique.helper import RANDBYTE_VALUE_LIMIT

SELECTED = 0xff


def pick_position(rand, selected):
    while True:
        pos = rand.int(len(selected))
        if selected[pos] != SELECTED:
            selected[pos] = SELECTED
            return pos


def pick_byte(rand, orig):
    while True:
        newbyte = rand.int(RANDBYTE_VALUE_LIMIT)
        if newbyte != orig:
            return newbyte


def mutate_random_bytes(data, nbytes, rand):
    """
    Mutate data (a bytearray) in place. Returns the selection mask, non-zero
    at every mutated position.
    """
    if nbytes < 0 or nbytes > len(data):
        raise ValueError("Cannot mutate %d out of %d bytes" % (nbytes, len(data)))

    # selection mask, one entry per byte of data
    selected = bytearray(len(data))
    trace = logger.enabled("DEBUG")

    for _ in range(nbytes):
        pos = pick_position(rand, selected)
        newbyte = pick_byte(rand, data[pos])
        if trace:
            logger.debug("pos: %8d  byte: 0x%02x -> 0x%02x" % (pos, data[pos], newbyte))
        data[pos] = newbyte

    return selected
