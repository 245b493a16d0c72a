# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Helper functions used by the random byte mutation stage
"""

# replacement bytes are drawn from [0, RANDBYTE_VALUE_LIMIT), 0xff is never written
RANDBYTE_VALUE_LIMIT = 255

PERCENT_MAX = 100


def mutation_count(fsize, percent):
    """
    Number of bytes to mutate for a buffer of fsize bytes.

    floor(fsize * percent / 100), computed in integers so that e.g. 29% of
    100 bytes yields 29 and not 28. Anything at or above 100% selects every
    byte of the buffer.
    """
    if fsize < 0 or percent < 0:
        raise ValueError("fsize and percent must not be negative (got %d, %d)" % (fsize, percent))
    if percent >= PERCENT_MAX:
        return fsize
    return (fsize * percent) // PERCENT_MAX
